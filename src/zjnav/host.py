"""Host multiplexer interface and its zellij implementation."""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional, Set

from . import proc
from .models import Direction, PermissionRequestResult, PermissionType, RunCommandResult

logger = logging.getLogger(__name__)

EventHandler = Callable[[object], None]


class Host(ABC):
    """Actions the router asks of the multiplexer it runs inside."""

    def __init__(self):
        self._handlers: List[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> None:
        """Register a callable that receives every host event."""
        self._handlers.append(handler)

    def emit(self, event: object) -> None:
        """Deliver an event to all subscribers, in subscription order."""
        for handler in list(self._handlers):
            handler(event)

    @abstractmethod
    def run_command(self, args: List[str], context: Optional[Dict[str, str]] = None) -> None:
        """Start a command; its RunCommandResult is emitted later."""

    @abstractmethod
    def move_focus(self, direction: Direction) -> None:
        ...

    @abstractmethod
    def move_focus_or_tab(self, direction: Direction) -> None:
        ...

    @abstractmethod
    def resize_increase(self, direction: Direction) -> None:
        ...

    @abstractmethod
    def write_chars(self, chars: str) -> None:
        """Write characters to the focused pane's input."""

    @abstractmethod
    def request_permission(self, permissions: Iterable[PermissionType]) -> None:
        """Ask for permissions; a PermissionRequestResult is emitted later."""

    @abstractmethod
    def hide_self(self) -> None:
        ...


class ZellijHost(Host):
    """Drives zellij through `zellij action` subprocesses.

    Must be used from within a running asyncio event loop: run_command
    schedules a task on it and returns immediately.
    """

    def __init__(self, zellij: str = "zellij"):
        super().__init__()
        self.zellij = zellij
        self._tasks: Set[asyncio.Task] = set()

    def _action(self, *args: str) -> List[str]:
        return [self.zellij, "action", *args]

    def run_command(self, args: List[str], context: Optional[Dict[str, str]] = None) -> None:
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._run_and_emit(list(args), dict(context or {})))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_and_emit(self, args: List[str], context: Dict[str, str]) -> None:
        try:
            returncode, stdout, stderr = await proc.run_async(args)
        except OSError as e:
            # No result is ever delivered for a command that could not start
            logger.error(f"Could not run {args[0]}: {e}")
            return

        result = RunCommandResult(
            exit_code=returncode,
            stdout=stdout,
            stderr=stderr,
            context=context,
        )
        try:
            self.emit(result)
        except Exception:
            # Nothing awaits this task, so a handler failure must be logged here
            logger.exception(f"Handling result of {' '.join(args)} failed")

    def move_focus(self, direction: Direction) -> None:
        proc.run(self._action("move-focus", direction.value))

    def move_focus_or_tab(self, direction: Direction) -> None:
        proc.run(self._action("move-focus-or-tab", direction.value))

    def resize_increase(self, direction: Direction) -> None:
        proc.run(self._action("resize", "increase", direction.value))

    def write_chars(self, chars: str) -> None:
        # Raw bytes, so control characters survive argv
        proc.run(self._action("write", *(str(b) for b in chars.encode())))

    def request_permission(self, permissions: Iterable[PermissionType]) -> None:
        requested = ", ".join(p.value for p in permissions)
        logger.info(f"Permissions requested: {requested} (granted, no permission model outside plugins)")

        result = PermissionRequestResult(granted=True)
        try:
            asyncio.get_running_loop().call_soon(self.emit, result)
        except RuntimeError:
            self.emit(result)

    def hide_self(self) -> None:
        logger.debug("Nothing to hide: zjnav has no visible pane")
