"""Commands, notifications and UI events passed between the screen parts."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class Command(Enum):
    """Requests that the panes send to the main loop."""

    UPDATE_BOOK_WHEN_ORDER_KEPT = "UpdateBookWhenOrderKept"
    UPDATE_BOOK_WHEN_ORDER_CHANGED = "UpdateBookWhenOrderChanged"
    UPDATE_NOTE = "UpdateNote"
    REFRESH_ALL = "RefreshAll"
    REFRESH_BOOK = "RefreshBook"
    REFRESH_NOTE = "RefreshNote"
    INPUT_ENTERED = "InputEntered"
    INPUT_CANCELED = "InputCanceled"
    OPEN_EDITOR = "OpenEditor"

    def __str__(self) -> str:
        return self.value


@dataclass
class Communicator:
    """Three FIFO queues: UI events to replay, commands, and notifications."""

    ui: deque[Any] = field(default_factory=deque)
    cmd: deque[Command] = field(default_factory=deque)
    ntf: deque[str] = field(default_factory=deque)


def drain(queue: deque[T]) -> Iterator[T]:
    """Yield items from the front of the queue until it is empty.

    Items appended while draining are yielded too.
    """
    while queue:
        yield queue.popleft()