"""A scrollable, optionally wrapping text area."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Union

from uebernotes.components import Component, Event

Content = Union[str, Iterable[str], None]

_FAR_END = 99999


@dataclass
class PagerState:
    """Scroll position and wrapping, shared between a pager and its owner."""

    shift: int = 0
    wrap: bool = False


def _split(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def pager_lines(content: Content) -> list[str]:
    """Split text (or several texts) into lines.

    A final newline does not start a line of its own; empty text gives none.
    """
    if content is None:
        return []
    if isinstance(content, str):
        return _split(content)
    return [line for text in content for line in _split(text)]


def render_pager(lines: list[str], state: PagerState, width: int, height: int) -> list[str]:
    """Draw lines from the scroll position into rows of exactly ``width`` cells.

    The scroll position is first clamped to the existing lines. At most
    ``height`` rows are returned; long lines wrap or are cut off.
    """
    if state.shift < 0 or not lines:
        state.shift = 0
    elif state.shift >= len(lines):
        state.shift = len(lines) - 1

    if width <= 0 or height <= 0:
        return []

    rows: list[str] = []
    for line in lines[state.shift:]:
        if len(rows) >= height:
            break
        row = ""
        for char in line:
            if len(row) >= width:
                if not state.wrap:
                    break
                rows.append(row)
                if len(rows) >= height:
                    return rows
                row = ""
            row += char
        rows.append(row.ljust(width))
    return rows


class Pager(Component):
    """A focusable text area scrolled with j/k/g/G and wrapped with w.

    ``content`` is text, a list of texts, None, or a callable returning one
    of those; a list or callable lets the owner change what is shown.
    """

    def __init__(self, content: Content | Callable[[], Content], state: PagerState) -> None:
        super().__init__()
        self._content = content
        self.state = state

    def _current(self) -> Content:
        return self._content() if callable(self._content) else self._content

    def on_event(self, event: Event) -> bool:
        if event == "w":
            self.state.wrap = not self.state.wrap
        elif event == "j":
            self.state.shift += 1
        elif event == "k":
            self.state.shift -= 1
        elif event == "g":
            self.state.shift = 0
        elif event == "G":
            self.state.shift = _FAR_END
        else:
            return False
        return True

    def render(self, width: int, height: int) -> list[str]:
        return render_pager(pager_lines(self._current()), self.state, width, height)

    def focusable(self) -> bool:
        return True