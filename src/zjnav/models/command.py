"""Directional command model for zjnav."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """A pane direction, valued as zellij spells it."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class CommandKind(str, Enum):
    """What a command asks the multiplexer to do."""

    MOVE_FOCUS = "move_focus"
    MOVE_FOCUS_OR_TAB = "move_focus_or_tab"
    RESIZE = "resize"


class Command(BaseModel):
    """A queued navigation or resize request."""

    model_config = ConfigDict(frozen=True)

    kind: CommandKind = Field(..., description="Requested action")
    direction: Direction = Field(..., description="Direction to act in")

    @property
    def is_resize(self) -> bool:
        return self.kind is CommandKind.RESIZE


def parse_direction(token: Optional[str]) -> Optional[Direction]:
    """Return the Direction for an exact lowercase token, or None."""
    if token is None:
        return None
    try:
        return Direction(token)
    except ValueError:
        return None


def parse_command(name: str, payload: Optional[str]) -> Optional[Command]:
    """Build a Command from a trigger name and direction payload.

    Both tokens are matched exactly; anything unrecognized yields None.
    """
    direction = parse_direction(payload)
    if direction is None:
        return None

    try:
        kind = CommandKind(name)
    except ValueError:
        return None

    return Command(kind=kind, direction=direction)
