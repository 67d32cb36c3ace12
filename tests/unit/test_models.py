"""Tests for command parsing and modifier lookup."""
import pytest
from pydantic import ValidationError

from zjnav.models import Command, CommandKind, Direction, ModifierClass, parse_command


@pytest.mark.parametrize("name,kind", [
    ("move_focus", CommandKind.MOVE_FOCUS),
    ("move_focus_or_tab", CommandKind.MOVE_FOCUS_OR_TAB),
    ("resize", CommandKind.RESIZE),
])
def test_parse_known_commands(name, kind):
    assert parse_command(name, "down") == Command(kind=kind, direction=Direction.DOWN)


@pytest.mark.parametrize("name,payload", [
    ("jump", "left"),
    ("move_focus", None),
    ("move_focus", "Left"),
    ("move_focus", "north"),
    ("MOVE_FOCUS", "left"),
    ("", ""),
])
def test_parse_rejects_unknown_tokens(name, payload):
    assert parse_command(name, payload) is None


def test_command_is_immutable():
    command = Command(kind=CommandKind.RESIZE, direction=Direction.UP)
    with pytest.raises(ValidationError):
        command.direction = Direction.DOWN


def test_modifier_parse_is_case_insensitive():
    assert ModifierClass.parse("CTRL") is ModifierClass.CTRL
    assert ModifierClass.parse("Alt") is ModifierClass.ALT
    assert ModifierClass.parse("shift") is None
