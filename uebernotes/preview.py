"""The pane showing the content of the selected note."""

from __future__ import annotations

from uebernotes.communicator import Command, Communicator
from uebernotes.components import CatchEvent, Component, Event, Key, border_chars
from uebernotes.models import Note
from uebernotes.pager import Pager, PagerState

EDITOR_NOTICE = "Open editor: not available"


class PreviewController:
    """A wrapping pager over the selected note's content."""

    def __init__(self) -> None:
        self.name = "Preview"
        self.note: Note | None = None
        self.state = PagerState(shift=0, wrap=True)
        self.component: Component | None = None

    def create_component(self, communicator: Communicator) -> Component:
        pager = Pager(lambda: self.note.content if self.note is not None else None, self.state)

        def on_key(event: Event) -> bool:
            if event == Key.RETURN:
                communicator.cmd.append(Command.OPEN_EDITOR)
                communicator.ntf.append(EDITOR_NOTICE)
                return True
            return False

        self.component = CatchEvent(pager, on_key)
        return self.component

    def set_note(self, note: Note | None) -> None:
        """Show another note from its first line."""
        self.note = note
        self.state.shift = 0

    def render(self, width: int, height: int) -> list[str]:
        """A bordered box with a title row, a separator and the content."""
        inner = max(width - 2, 0)
        focused = self.component is not None and self.component.focused
        body = self.component.render(inner, height - 4) if self.component else []
        lines = [self.name.center(inner), "─" * inner, *body]
        return border_chars(focused).frame(lines, width, height)