"""Tests for the pipe and probe commands."""
import subprocess
from unittest.mock import Mock, patch

import httpx
import pytest
from click.testing import CliRunner

from zjnav.cli import cli
from zjnav.models import PipeMessage
from zjnav.router import PROBE_COMMAND
from zjnav.server.routers.pipe import PipeResponse


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def running_server():
    conn = Mock(is_running=True, base_url="http://127.0.0.1:21591")
    with patch("zjnav.cli.navigate.Connection", return_value=conn):
        yield conn


def test_pipe_posts_message(runner, running_server):
    with patch("zjnav.cli.navigate.api_call", return_value=PipeResponse(accepted=True, pending=1)) as call:
        result = runner.invoke(cli, ["pipe", "move_focus", "left"])

    assert result.exit_code == 0
    call.assert_called_once_with(
        "http://127.0.0.1:21591", "POST", "/pipe/",
        data=PipeMessage(name="move_focus", payload="left"),
        response_model=PipeResponse,
    )


def test_pipe_reports_ignored_message(runner, running_server):
    with patch("zjnav.cli.navigate.api_call", return_value=PipeResponse(accepted=False, pending=0)):
        result = runner.invoke(cli, ["pipe", "jump", "left"])

    assert result.exit_code == 0
    assert "Ignored: jump left" in result.output


def test_pipe_without_server_aborts(runner):
    with patch("zjnav.cli.navigate.Connection", return_value=Mock(is_running=False)):
        result = runner.invoke(cli, ["pipe", "resize", "up"])

    assert result.exit_code != 0
    assert "Server not running" in result.output


def test_pipe_connection_error_aborts(runner, running_server):
    with patch("zjnav.cli.navigate.api_call", side_effect=httpx.ConnectError("refused")):
        result = runner.invoke(cli, ["pipe", "resize", "up"])

    assert result.exit_code != 0
    assert "Error sending message" in result.output


def test_probe_prints_occupant(runner):
    completed = subprocess.CompletedProcess(
        PROBE_COMMAND, 0,
        stdout=b"CLIENT_ID ZELLIJ_PANE_ID RUNNING_COMMAND\n1 terminal_3 /usr/bin/nvim\n",
        stderr=b"",
    )
    with patch("zjnav.cli.navigate.proc.run", return_value=completed) as run:
        result = runner.invoke(cli, ["probe"])

    assert result.exit_code == 0
    assert result.output == "nvim\n"
    run.assert_called_once_with(PROBE_COMMAND, text=False)


def test_probe_prints_none_for_plugin_pane(runner):
    completed = subprocess.CompletedProcess(
        PROBE_COMMAND, 0, stdout=b"CLIENT_ID ZELLIJ_PANE_ID RUNNING_COMMAND\n1 plugin_0 N/A\n", stderr=b"")
    with patch("zjnav.cli.navigate.proc.run", return_value=completed):
        result = runner.invoke(cli, ["probe"])

    assert result.output == "none\n"


def test_probe_without_zellij_aborts(runner):
    with patch("zjnav.cli.navigate.proc.run", side_effect=FileNotFoundError("zellij")):
        result = runner.invoke(cli, ["probe"])

    assert result.exit_code != 0
    assert "Failed to run zellij" in result.output


def test_occupant_command_prints_none_for_undecodable_output(runner):
    completed = subprocess.CompletedProcess(
        PROBE_COMMAND, 0, stdout=b"CLIENT_ID PANE CMD\n1 terminal_1 /usr/bin/\xff\xfe\n", stderr=b"")
    with patch("zjnav.cli.navigate.proc.run", return_value=completed):
        result = runner.invoke(cli, ["probe"])

    assert result.exit_code == 0
    assert result.output == "none\n"
