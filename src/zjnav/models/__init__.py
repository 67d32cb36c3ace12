"""Data models for zjnav."""
from .command import Command, CommandKind, Direction, parse_command, parse_direction
from .events import PermissionRequestResult, PermissionType, PipeMessage, RunCommandResult
from .modifier import ModifierClass

__all__ = [
    "Command",
    "CommandKind",
    "Direction",
    "ModifierClass",
    "PermissionRequestResult",
    "PermissionType",
    "PipeMessage",
    "RunCommandResult",
    "parse_command",
    "parse_direction",
]
