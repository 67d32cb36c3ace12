"""Keystrokes that make a modal editor navigate or resize its own splits."""
from typing import Dict

from .models import Command, Direction, ModifierClass

ESC = "\x1b"

# Ctrl+h, Ctrl+l, Ctrl+k, Ctrl+j
CTRL_KEYS: Dict[Direction, str] = {
    Direction.LEFT: "\x08",
    Direction.RIGHT: "\x0c",
    Direction.UP: "\x0b",
    Direction.DOWN: "\x0a",
}

ALT_KEYS: Dict[Direction, str] = {
    Direction.LEFT: ESC + "!",
    Direction.UP: ESC + "@",
    Direction.RIGHT: ESC + "#",
    Direction.DOWN: ESC + "$",
}


def ctrl_keybinding(direction: Direction) -> str:
    return CTRL_KEYS[direction]


def alt_keybinding(direction: Direction) -> str:
    return ALT_KEYS[direction]


def keybinding_for(command: Command, move_mod: ModifierClass, resize_mod: ModifierClass) -> str:
    """Return the characters to write into an editor for this command.

    Resize commands use resize_mod, every focus command uses move_mod.
    """
    mod = resize_mod if command.is_resize else move_mod

    if mod is ModifierClass.CTRL:
        return ctrl_keybinding(command.direction)
    return alt_keybinding(command.direction)
