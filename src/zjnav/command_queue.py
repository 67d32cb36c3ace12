"""FIFO of commands waiting for the occupant probe."""
from collections import deque
from typing import Deque, Iterator, Optional

from .models import Command


class CommandQueue:
    """Pending commands, oldest first."""

    def __init__(self):
        self._items: Deque[Command] = deque()

    def enqueue(self, command: Command) -> None:
        self._items.append(command)

    def dequeue_oldest(self) -> Optional[Command]:
        """Remove and return the oldest command, or None when empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Command]:
        return iter(tuple(self._items))
