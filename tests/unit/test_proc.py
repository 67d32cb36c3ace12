"""Tests for process helpers."""
import asyncio
import subprocess
from unittest.mock import AsyncMock, Mock, patch

import pytest

from zjnav import proc


def test_run_captures_text_by_default():
    completed = subprocess.CompletedProcess(["zellij"], 0, stdout="ok\n", stderr="")
    with patch("subprocess.run", return_value=completed) as run:
        result = proc.run(["zellij", "action", "list-clients"])

    assert result is completed
    run.assert_called_once_with(["zellij", "action", "list-clients"], capture_output=True, text=True)


def test_run_logs_failures(caplog):
    completed = subprocess.CompletedProcess(["zellij"], 2, stdout="", stderr="no session")
    with patch("subprocess.run", return_value=completed):
        with caplog.at_level("ERROR", logger="zjnav.proc"):
            proc.run(["zellij", "action", "move-focus", "left"])

    assert "exit code 2" in caplog.text


def test_run_reraises_exceptions():
    with patch("subprocess.run", side_effect=FileNotFoundError("zellij")):
        with pytest.raises(FileNotFoundError):
            proc.run(["zellij"])


def test_run_async_returns_raw_output():
    process = Mock(returncode=0)
    process.communicate = AsyncMock(return_value=(b"\xffraw", b""))

    with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=process)) as create:
        returncode, stdout, stderr = asyncio.run(proc.run_async(["zellij", "action", "list-clients"]))

    assert (returncode, stdout, stderr) == (0, b"\xffraw", b"")
    assert create.await_args.args == ("zellij", "action", "list-clients")
