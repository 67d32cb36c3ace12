"""Modifier key classes used for editor keybindings."""
from enum import Enum
from typing import Optional


class ModifierClass(str, Enum):
    """Which keybinding family to emit for a command."""

    CTRL = "ctrl"
    ALT = "alt"

    @classmethod
    def parse(cls, value: str) -> Optional["ModifierClass"]:
        """Case-insensitive lookup, None when unrecognized."""
        try:
            return cls(value.lower())
        except (ValueError, AttributeError):
            return None
