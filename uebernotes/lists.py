"""The books and notes menu panes."""

from __future__ import annotations

from uebernotes.communicator import Command, Communicator
from uebernotes.components import Key, line_filler
from uebernotes.menu import MenuController


class BooksController(MenuController):
    """The list of books; Enter moves to the notes pane."""

    refresh_cmd = Command.REFRESH_BOOK
    sort_cmd = Command.UPDATE_BOOK_WHEN_ORDER_CHANGED
    view_cmd = Command.UPDATE_BOOK_WHEN_ORDER_KEPT

    def __init__(self) -> None:
        super().__init__("Books")

    def configure_component_option(self, communicator: Communicator) -> None:
        self.on_enter = lambda: communicator.ui.append(Key.ARROW_RIGHT)


class NotesController(MenuController):
    """The notes of the selected book; Enter asks to open the editor."""

    refresh_cmd = Command.REFRESH_NOTE
    sort_cmd = Command.UPDATE_NOTE
    view_cmd = Command.UPDATE_NOTE

    def __init__(self) -> None:
        super().__init__("Notes")

    def configure_component_option(self, communicator: Communicator) -> None:
        self.view.postfix = (
            lambda width: line_filler("-", width) if self.items_amount() else None
        )
        self.on_enter = lambda: communicator.cmd.append(Command.OPEN_EDITOR)