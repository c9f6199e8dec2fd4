"""A small component tree: event routing, focus and text rendering."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any, NamedTuple, Union


class Key(Enum):
    """Special keys; printable keys are plain one-character strings."""

    TAB = "Tab"
    TAB_REVERSE = "TabReverse"
    RETURN = "Return"
    ESCAPE = "Escape"
    BACKSPACE = "Backspace"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    HOME = "Home"
    END = "End"


Event = Union[Key, str]


class Component:
    """A node of the UI tree that routes events to its active child."""

    def __init__(self, *args: Component) -> None:
        self.children: list[Component] = []
        self.focused = False
        for child in args:
            self.add(child)

    def add(self, child: Component) -> None:
        self.children.append(child)

    @property
    def active_child(self) -> Component | None:
        """The first focusable child, which receives forwarded events."""
        return next((child for child in self.children if child.focusable()), None)

    def on_event(self, event: Event) -> bool:
        """Forward the event to the active child; True if it was handled."""
        child = self.active_child
        return child is not None and child.on_event(event)

    def render(self, width: int, height: int) -> list[str]:
        if len(self.children) == 1:
            return self.children[0].render(width, height)
        return ["Not implemented component"]

    def focusable(self) -> bool:
        return any(child.focusable() for child in self.children)


class CatchEvent(Component):
    """Gives a handler the first look at every event."""

    def __init__(self, child: Component, handler: Callable[[Event], bool]) -> None:
        super().__init__(child)
        self._handler = handler

    def on_event(self, event: Event) -> bool:
        if self._handler(event):
            return True
        return super().on_event(event)


class IgnoreEvent(Component):
    """Drops the events the predicate accepts instead of passing them on."""

    def __init__(self, child: Component, predicate: Callable[[Event], bool]) -> None:
        super().__init__(child)
        self._predicate = predicate

    def on_event(self, event: Event) -> bool:
        if self._predicate(event):
            return False
        return super().on_event(event)


def ignore_events(child: Component, events: Iterable[Event]) -> IgnoreEvent:
    """Wrap a component so that the listed events never reach it."""
    ignored = tuple(events)
    return IgnoreEvent(child, lambda event: event in ignored)


class FocusableWrapper(Component):
    """Makes any component focusable."""

    def __init__(self, child: Component) -> None:
        super().__init__(child)

    def render(self, width: int, height: int) -> list[str]:
        if self.children:
            return self.children[0].render(width, height)
        return ["Empty container"]

    def focusable(self) -> bool:
        return True


class EventHandler(Component):
    """Claims the first listed event as handled after passing it to its child.

    Every event still reaches the active child; only the first entry of
    ``events`` is compared with the event.
    """

    def __init__(self, child: Component, events: Sequence[Event]) -> None:
        super().__init__(child)
        self._events = list(events)

    def on_event(self, event: Event) -> bool:
        if not self._events:
            return False
        handled = super().on_event(event)
        return True if self._events[0] == event else handled


def line_filler(char: str, width: int) -> str:
    """A row of the given width filled with one character."""
    return char * max(width, 0)


class _BorderChars(NamedTuple):
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    def frame(self, lines: Sequence[str], width: int, height: int) -> list[str]:
        """Draw a box of the given size around the lines, clipping them."""
        if width < 2 or height < 2:
            return []
        inner_width = width - 2
        inner = [line[:inner_width].ljust(inner_width) for line in lines[: height - 2]]
        inner += [" " * inner_width] * (height - 2 - len(inner))
        top = self.top_left + self.horizontal * inner_width + self.top_right
        bottom = self.bottom_left + self.horizontal * inner_width + self.bottom_right
        return [top, *(self.vertical + row + self.vertical for row in inner), bottom]


_HEAVY = _BorderChars("━", "┃", "┏", "┓", "┗", "┛")
_LIGHT = _BorderChars("─", "│", "┌", "┐", "└", "┘")


def border_chars(focused: bool) -> Any:
    """Heavy border characters for a focused pane, light ones otherwise."""
    return _HEAVY if focused else _LIGHT