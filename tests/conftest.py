"""Shared test fixtures."""
import os

import pytest

from zjnav import config as config_module
from zjnav.host import Host
from zjnav.models import RunCommandResult
from zjnav.router import Router

CLIENT_LIST_HEADER = "CLIENT_ID ZELLIJ_PANE_ID RUNNING_COMMAND"


def client_list(command: str, pane: str = "terminal_1") -> str:
    """Build `zellij action list-clients` output for a single client."""
    return f"{CLIENT_LIST_HEADER}\n1          {pane}     {command}\n"


class FakeHost(Host):
    """Host that records every call instead of talking to zellij."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def run_command(self, args, context=None):
        self.calls.append(("run_command", list(args)))

    def move_focus(self, direction):
        self.calls.append(("move_focus", direction))

    def move_focus_or_tab(self, direction):
        self.calls.append(("move_focus_or_tab", direction))

    def resize_increase(self, direction):
        self.calls.append(("resize_increase", direction))

    def write_chars(self, chars):
        self.calls.append(("write_chars", chars))

    def request_permission(self, permissions):
        self.calls.append(("request_permission", tuple(permissions)))

    def hide_self(self):
        self.calls.append(("hide_self",))

    def probe_result(self, output):
        """Deliver a list-clients result; str output is UTF-8 encoded."""
        stdout = output.encode() if isinstance(output, str) else output
        self.emit(RunCommandResult(exit_code=0, stdout=stdout))

    def actions(self):
        """Calls that act on zellij or the pane."""
        return [c for c in self.calls if c[0] not in ("run_command", "request_permission", "hide_self")]

    def probes(self):
        return [c for c in self.calls if c[0] == "run_command"]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the user's config file and ZJNAV_* variables out of tests."""
    for name in list(os.environ):
        if name.startswith("ZJNAV_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("ZJNAV_CONFIG_FILE", str(tmp_path / "missing.toml"))

    original = config_module._config
    config_module.set_config(None)
    yield
    config_module.set_config(original)


@pytest.fixture(name="client_list")
def client_list_fixture():
    return client_list


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def router(host):
    nav = Router(host)
    nav.load()
    return nav
