"""Non-interactive operations on books and notes."""

from __future__ import annotations

import sys
from typing import TextIO

from uebernotes.argparser import CommandLineArgs
from uebernotes.models import Book, Config, Note
from uebernotes.storage import Storage

_TITLE_WIDTH = 50


class CLI:
    """Runs one operation from the command line against the storage."""

    def __init__(self, config: Config, out: TextIO | None = None,
                 err: TextIO | None = None) -> None:
        self._storage = Storage(config)
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr

    def close(self) -> None:
        self._storage.close()

    def _say(self, message: str) -> None:
        print(message, file=self._out)

    def _complain(self, message: str) -> None:
        print(message, file=self._err)

    def run(self, args: CommandLineArgs) -> bool:
        """Perform the operation named on the command line; True on success."""
        if args.has("list-books"):
            return self.list_books()
        if args.has("print-book"):
            return self.print_book(args.value("print-book"))
        if args.has("print-note"):
            return self.print_note(args.value("print-note"))
        if args.has("create-book"):
            return self.create_book(args.value("create-book"))
        if args.has("create-note"):
            return self.create_note(args.value("create-note"), args.value("note-content"))
        if args.has("update-book"):
            return self.update_book(args.value("update-book"), args.value("book-name"))
        if args.has("update-note"):
            return self.update_note(args.value("update-note"), args.value("note-content"))
        if args.has("remove-book"):
            return self.remove_book(args.value("remove-book"))
        if args.has("remove-note"):
            return self.remove_note(args.value("remove-note"))

        self._complain("No argument to process")
        return False

    def list_books(self) -> bool:
        for book in self._storage.books():
            self._say(f"Book ID: {book.id} | Name: {book.name}")
        return True

    def print_book(self, book_id: int) -> bool:
        if self._storage.load_book(book_id) is None:
            self._complain("Book not found")
            return False
        for note in self._storage.notes_by_book(book_id):
            self._say(f"Note ID: {note.id} | Content: {note.title()[:_TITLE_WIDTH]}")
        return True

    def print_note(self, note_id: int) -> bool:
        note = self._storage.load_note(note_id)
        if note is None:
            self._complain("Note not found")
            return False
        self._say(note.content)
        return True

    def create_book(self, name: str) -> bool:
        book_id = self._storage.create_book(Book(name))
        if book_id is None:
            self._complain("Failed to create book")
            return False
        self._complain(f"New book ID: {book_id}")
        return True

    def create_note(self, book_id: int, content: str) -> bool:
        if self._storage.load_book(book_id) is not None:
            note_id = self._storage.create_note(Note(book_id, content))
            if note_id is not None:
                self._complain(f"New note ID: {note_id}")
                return True
        self._complain("Failed to create note")
        return False

    def update_book(self, book_id: int, name: str) -> bool:
        if self._storage.update_book(book_id, name):
            return True
        self._complain(f"Failed to update book, ID {book_id}")
        return False

    def update_note(self, note_id: int, content: str) -> bool:
        if self._storage.update_note(note_id, content):
            return True
        self._complain(f"Failed to update note, ID {note_id}")
        return False

    def remove_book(self, book_id: int) -> bool:
        if self._storage.remove_book(book_id):
            return True
        self._complain(f"Failed to remove book: ID {book_id}")
        return False

    def remove_note(self, note_id: int) -> bool:
        if self._storage.remove_note(note_id):
            return True
        self._complain(f"Failed to remove note: ID {note_id}")
        return False