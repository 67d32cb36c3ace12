"""Events exchanged between the router and its host."""
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class PermissionType(str, Enum):
    """Host permissions the router needs."""

    RUN_COMMANDS = "run_commands"
    WRITE_TO_STDIN = "write_to_stdin"
    CHANGE_APPLICATION_STATE = "change_application_state"


class PipeMessage(BaseModel):
    """An inbound trigger message."""

    name: str = Field(..., description="Command name (move_focus, move_focus_or_tab, resize)")
    payload: Optional[str] = Field(None, description="Direction token (left, right, up, down)")


class RunCommandResult(BaseModel):
    """Completion of a command the host ran on our behalf."""

    exit_code: Optional[int] = Field(None, description="Process exit code, if it exited normally")
    stdout: bytes = Field(b"", description="Raw standard output")
    stderr: bytes = Field(b"", description="Raw standard error")
    context: Dict[str, str] = Field(default_factory=dict, description="Caller supplied context")


class PermissionRequestResult(BaseModel):
    """Outcome of a permission request."""

    granted: bool = Field(..., description="Whether the host granted the permissions")
