"""The pane listing past notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable

from uebernotes.communicator import Communicator
from uebernotes.components import Component, Event, border_chars
from uebernotes.pager import Pager, PagerState

_log = logging.getLogger("uebernotes.linux")

MAX_HISTORY_SIZE = 50


class HistoryModel:
    """The most recent messages, oldest first."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def add_message(self, message: str) -> None:
        """Append a message, dropping the oldest when the history is full."""
        if len(self.messages) == MAX_HISTORY_SIZE:
            del self.messages[0]
            _log.debug("Pop message from history")
        self.messages.append(message)
        _log.debug("Push message to history")


class _Maybe(Component):
    """Shows and passes events to its child only while a condition holds."""

    def __init__(self, child: Component, visible: Callable[[], bool]) -> None:
        super().__init__(child)
        self._visible = visible

    def on_event(self, event: Event) -> bool:
        return self._visible() and super().on_event(event)

    def render(self, width: int, height: int) -> list[str]:
        return super().render(width, height) if self._visible() else []

    def focusable(self) -> bool:
        return self._visible() and super().focusable()


class HistoryController:
    """A pager over the message history that can be shown or hidden."""

    def __init__(self) -> None:
        self.name = "History"
        self.model = HistoryModel()
        self.state = PagerState(shift=0, wrap=False)
        self.enabled = False
        self.component: Component | None = None

    def create_component(self, communicator: Communicator) -> Component:
        pager = Pager(lambda: self.model.messages, self.state)
        self.component = _Maybe(pager, lambda: self.enabled)
        return self.component

    def toggle_view(self) -> bool:
        """Show or hide the pane; return whether it is now shown."""
        self.enabled = not self.enabled
        return self.enabled

    def add_message(self, message: str) -> None:
        self.model.add_message(message)

    def render(self, width: int, height: int) -> list[str]:
        """A bordered box of the given size, or nothing while hidden."""
        if not self.enabled:
            return []
        focused = self.component is not None and self.component.focused
        body = self.component.render(width - 2, height - 2) if self.component else []
        return border_chars(focused).frame(body, width, height)