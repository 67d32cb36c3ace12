"""Routes directional commands to zellij or to the editor in the focused pane."""
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from .classifier import decode_client_list, occupant_from_client_list
from .command_queue import CommandQueue
from .config import parse_modifiers
from .host import Host
from .keybind import keybinding_for
from .models import (
    Command, CommandKind, ModifierClass, PermissionRequestResult, PermissionType,
    PipeMessage, RunCommandResult, parse_command,
)

logger = logging.getLogger(__name__)

PROBE_COMMAND = ["zellij", "action", "list-clients"]
DEFAULT_MODAL_EDITORS = ("vim", "nvim")
PERMISSIONS = (
    PermissionType.RUN_COMMANDS,
    PermissionType.WRITE_TO_STDIN,
    PermissionType.CHANGE_APPLICATION_STATE,
)


class Router:
    """Queues commands until the focused pane's program is known, then runs them.

    Every accepted trigger enqueues one command and starts one probe. Every
    probe result updates the occupant and dispatches exactly one queued
    command, oldest first. Probes carry no correlation to the trigger that
    started them, so a command may be dispatched using an occupant learned
    by a later probe.
    """

    def __init__(
        self,
        host: Host,
        move_mod: ModifierClass = ModifierClass.CTRL,
        resize_mod: ModifierClass = ModifierClass.ALT,
        modal_editors: Iterable[str] = DEFAULT_MODAL_EDITORS,
    ):
        self.host = host
        self.move_mod = move_mod
        self.resize_mod = resize_mod
        self.modal_editors = frozenset(modal_editors)

        self._permissions_granted = False
        self._occupant: Optional[str] = None
        self._queue = CommandQueue()

    @classmethod
    def from_configuration(
        cls,
        host: Host,
        configuration: Mapping[str, str],
        modal_editors: Iterable[str] = DEFAULT_MODAL_EDITORS,
    ) -> "Router":
        """Build a router from `move_mod` / `resize_mod` settings.

        Raises:
            ConfigError: If either modifier is not ctrl or alt
        """
        move_mod, resize_mod = parse_modifiers(configuration)
        return cls(host, move_mod, resize_mod, modal_editors)

    @property
    def occupant(self) -> Optional[str]:
        return self._occupant

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def permissions_granted(self) -> bool:
        return self._permissions_granted

    @property
    def is_modal_editor(self) -> bool:
        return self._occupant is not None and self._occupant in self.modal_editors

    def load(self) -> None:
        """Hook into the host: subscribe to events and request permissions."""
        self.host.subscribe(self.update)
        self.host.request_permission(PERMISSIONS)
        if self._permissions_granted:
            self.host.hide_self()

    def pipe(self, message: PipeMessage) -> bool:
        """Handle a trigger message. Returns False if it was ignored."""
        command = parse_command(message.name, message.payload)
        if command is None:
            logger.debug(f"Ignoring pipe message {message.name!r} with payload {message.payload!r}")
            return False

        self._queue.enqueue(command)
        logger.debug(f"Queued {command.kind.value} {command.direction.value} ({len(self._queue)} pending)")
        self.host.run_command(PROBE_COMMAND)
        return True

    def update(self, event: object) -> None:
        """Handle an event delivered by the host."""
        if isinstance(event, RunCommandResult):
            self._on_probe_result(event)
        elif isinstance(event, PermissionRequestResult):
            self._on_permission_result(event)

    def _on_probe_result(self, result: RunCommandResult) -> None:
        self._occupant = occupant_from_client_list(decode_client_list(result.stdout))
        logger.debug(f"Focused pane occupant: {self._occupant}")

        command = self._queue.dequeue_oldest()
        if command is not None:
            self.execute(command)

    def _on_permission_result(self, result: PermissionRequestResult) -> None:
        self._permissions_granted = result.granted
        if self._permissions_granted:
            self.host.hide_self()
        else:
            logger.warning("Permissions denied, zellij actions will fail")

    def execute(self, command: Command) -> None:
        """Run a command against the current occupant."""
        if self.is_modal_editor:
            keys = keybinding_for(command, self.move_mod, self.resize_mod)
            logger.info(f"{command.kind.value} {command.direction.value} -> keys for {self._occupant}")
            self.host.write_chars(keys)
            return

        logger.info(f"{command.kind.value} {command.direction.value} -> zellij")
        if command.kind is CommandKind.MOVE_FOCUS:
            self.host.move_focus(command.direction)
        elif command.kind is CommandKind.MOVE_FOCUS_OR_TAB:
            self.host.move_focus_or_tab(command.direction)
        elif command.kind is CommandKind.RESIZE:
            self.host.resize_increase(command.direction)

    def snapshot(self) -> Dict[str, Any]:
        """Current state, for inspection."""
        return {
            "occupant": self._occupant,
            "modal_editor": self.is_modal_editor,
            "pending": [
                {"kind": c.kind.value, "direction": c.direction.value} for c in self._queue
            ],
            "move_mod": self.move_mod.value,
            "resize_mod": self.resize_mod.value,
            "permissions_granted": self._permissions_granted,
        }
