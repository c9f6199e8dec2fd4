"""The interactive full-screen interface with books, notes and preview panes."""

from __future__ import annotations

import logging

from uebernotes.communicator import Command, Communicator, drain
from uebernotes.components import Event, Key
from uebernotes.history import HistoryController
from uebernotes.lists import BooksController, NotesController
from uebernotes.models import Config
from uebernotes.preview import EDITOR_NOTICE, PreviewController
from uebernotes.status import Mode, StatusController
from uebernotes.storage import Storage

_log = logging.getLogger("uebernotes.linux")

MIN_WIDTH = 80
MIN_HEIGHT = 20

BOOKS = "Books"
NOTES = "Notes"
PREVIEW = "Preview"
HISTORY = "History"
STATUS = "Status"
DATA_PANES = (BOOKS, NOTES, PREVIEW)

NO_NOTE_MESSAGE = "No selected note to open"


class TUI:
    """Ties the panes to the storage and routes keys, commands and notifications."""

    def __init__(self, config: Config) -> None:
        self._storage = Storage(config)
        self.communicator = Communicator()

        self.books = BooksController()
        self.notes = NotesController()
        self.preview = PreviewController()
        self.history = HistoryController()
        self.status = StatusController()
        self._panes = {
            pane.name: pane
            for pane in (self.books, self.notes, self.preview, self.history, self.status)
        }

        self._note_index_cache = self.notes.create_index_cache()
        for pane in self._panes.values():
            pane.create_component(self.communicator)

        self.running = False
        self._focus = BOOKS
        self._last_data_pane = BOOKS

        self.update_books_model()
        self.update_notes_model()
        self.update_preview()
        self.reset_focus()

    @property
    def focus(self) -> str:
        """Name of the pane that receives key events."""
        return self._focus

    def close(self) -> None:
        self._storage.close()

    # models

    def update_books_model(self, reload: bool = False) -> None:
        if reload:
            self._storage.load_books_to_cache()
        self.books.set_items(self._storage.books())

    def update_notes_model(self, reload: bool = False) -> None:
        book_id = self.books.selected_item_id()
        if book_id is None:
            return
        if reload:
            self._storage.load_notes_to_cache(book_id)
        self.notes.set_items(self._storage.notes_by_book(book_id))

    def update_preview(self) -> None:
        self.preview.set_note(self.notes.selected_item())

    # focus

    def _set_focus(self, name: str) -> None:
        self._focus = name
        if name in DATA_PANES:
            self._last_data_pane = name
        for pane in self._panes.values():
            pane.component.focused = pane.name == name

    def reset_focus(self) -> None:
        self._set_focus(BOOKS)

    def _move_focus(self, event: Event) -> bool:
        if self._focus in DATA_PANES:
            index = DATA_PANES.index(self._focus)
            if event in (Key.ARROW_RIGHT, Key.TAB) and index + 1 < len(DATA_PANES):
                self._set_focus(DATA_PANES[index + 1])
                return True
            if event in (Key.ARROW_LEFT, Key.TAB_REVERSE) and index > 0:
                self._set_focus(DATA_PANES[index - 1])
                return True
            if event == Key.ARROW_DOWN and self.history.component.focusable():
                self._set_focus(HISTORY)
                return True
        elif self._focus == HISTORY and event in (Key.ARROW_UP, Key.TAB_REVERSE):
            self._set_focus(self._last_data_pane)
            return True
        return False

    # events

    def _on_common_key(self, event: Event) -> bool:
        if event == "q":
            self.running = False
        elif event == "R":
            self.communicator.cmd.append(Command.REFRESH_ALL)
        elif event == "/":
            self.status.set_mode(Mode.SEARCH)
            self._set_focus(STATUS)
        elif event == ":":
            self.status.set_mode(Mode.COMMAND)
            self._set_focus(STATUS)
        elif event == "t":
            if not self.history.toggle_view():
                self.reset_focus()
        elif event == "T":
            if self._focus == HISTORY:
                self.reset_focus()
            elif self.history.component.focusable():
                self._set_focus(HISTORY)
        else:
            return False
        return True

    def handle_event(self, event: Event) -> bool:
        """Route one key event; True if something handled it."""
        if self._focus == STATUS:
            if self.status.mode is not Mode.STATUS:
                return self.status.on_event(event)
            self.reset_focus()

        if self._on_common_key(event):
            return True

        pane = self._panes[self._focus]
        handled = pane.component.on_event(event)
        if self._focus in DATA_PANES and event == "j":
            return True
        if handled:
            return True
        return self._move_focus(event)

    def handle_commands(self) -> None:
        """Carry out every queued command."""
        for command in drain(self.communicator.cmd):
            _log.debug("Handling command: %s", command)
            if command is Command.UPDATE_BOOK_WHEN_ORDER_KEPT:
                self.update_notes_model()
                self._note_index_cache.restore(self.books.selected_index())
                self.update_preview()
            elif command is Command.UPDATE_BOOK_WHEN_ORDER_CHANGED:
                self.update_notes_model()
                self._note_index_cache.clear()
                self.update_preview()
            elif command is Command.UPDATE_NOTE:
                self._note_index_cache.add(self.books.selected_index())
                self.update_preview()
            elif command is Command.REFRESH_ALL:
                self.update_books_model(reload=True)
                self.update_notes_model()
                self._note_index_cache.clear()
                self.update_preview()
            elif command is Command.REFRESH_BOOK:
                self.update_notes_model(reload=True)
                self._note_index_cache.remove(self.books.selected_index())
                self.update_preview()
            elif command is Command.REFRESH_NOTE:
                self.update_preview()
            elif command is Command.INPUT_ENTERED:
                self.communicator.ntf.append(f"Unhandled input: {self.status.last_input()}")
                self.reset_focus()
            elif command is Command.INPUT_CANCELED:
                self.reset_focus()
            elif command is Command.OPEN_EDITOR:
                if self.notes.items_amount():
                    self.communicator.ntf.append(EDITOR_NOTICE)
                else:
                    self.communicator.ntf.append(NO_NOTE_MESSAGE)
            else:
                _log.warning("Unhandled command: %s", command)

    def handle_notifications(self) -> None:
        """Show queued notifications; an empty one stops the processing."""
        for notification in drain(self.communicator.ntf):
            _log.info("Handling notification: '%s'", notification)
            if not notification:
                return
            self.status.set_message(notification)
            self.history.add_message(notification)

    # drawing

    def render(self, width: int, height: int) -> list[str]:
        """Process the queues and return the screen as rows of ``width`` cells."""
        _log.debug(
            "Render, cmds=%d, ntfs=%d", len(self.communicator.cmd), len(self.communicator.ntf)
        )
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            return [f"too small window: {width}x{height}"]

        for event in drain(self.communicator.ui):
            self.handle_event(event)
        self.handle_commands()
        self.handle_notifications()

        list_width = width // 4
        history_height = height // 4 if self.history.enabled else 0
        data_height = height - history_height - 1
        columns = [
            self.books.render(list_width, data_height),
            self.notes.render(list_width, data_height),
            self.preview.render(width - 2 * list_width, data_height),
        ]
        rows = ["".join(parts) for parts in zip(*columns)]
        rows += self.history.render(width, history_height)
        rows.append(self.status.render(width))
        return rows

    def run(self) -> bool:
        """Run the interactive loop on the terminal until 'q' is pressed."""
        import curses

        curses.wrapper(self._loop)
        return True

    def _loop(self, screen) -> None:
        import curses

        special = {
            curses.KEY_LEFT: Key.ARROW_LEFT,
            curses.KEY_RIGHT: Key.ARROW_RIGHT,
            curses.KEY_UP: Key.ARROW_UP,
            curses.KEY_DOWN: Key.ARROW_DOWN,
            curses.KEY_HOME: Key.HOME,
            curses.KEY_END: Key.END,
            curses.KEY_BTAB: Key.TAB_REVERSE,
            curses.KEY_ENTER: Key.RETURN,
            curses.KEY_BACKSPACE: Key.BACKSPACE,
        }
        characters = {
            "\t": Key.TAB,
            "\n": Key.RETURN,
            "\r": Key.RETURN,
            "\x1b": Key.ESCAPE,
            "\x7f": Key.BACKSPACE,
            "\b": Key.BACKSPACE,
        }
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        screen.keypad(True)

        self.running = True
        while self.running:
            height, width = screen.getmaxyx()
            rows = self.render(width, height)
            screen.erase()
            for y, row in enumerate(rows[:height]):
                try:
                    screen.addstr(y, 0, row[:width])
                except curses.error:
                    pass  # writing the bottom-right cell moves the cursor off screen
            screen.refresh()

            key = screen.get_wch()
            if isinstance(key, int):
                event = special.get(key)
            else:
                event = characters.get(key, key if key.isprintable() else None)
            if event is not None:
                self.handle_event(event)