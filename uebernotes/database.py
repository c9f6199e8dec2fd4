"""SQLite persistence for books and notes."""

from __future__ import annotations

import logging
import os
import sqlite3

from uebernotes.models import Book, Note

_log = logging.getLogger("uebernotes.core")
_log.addHandler(logging.NullHandler())

_SCHEMA = """
CREATE TABLE IF NOT EXISTS normal_books (
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS normal_notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    book_id INTEGER NOT NULL,
    content TEXT NOT NULL,
    FOREIGN KEY (book_id) REFERENCES normal_books (id) ON DELETE CASCADE
);
"""


def _book(row: tuple) -> Book:
    return Book(row[1], id=row[0])


def _note(row: tuple) -> Note:
    return Note(row[1], row[2], id=row[0])


class Database:
    """A database file holding books and the notes inside them."""

    def __init__(self, path) -> None:
        self._path = os.fspath(path)
        _log.info("Initializing database: %s", self._path)
        self._conn = sqlite3.connect(self._path, isolation_level=None)
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._conn.executescript(_SCHEMA)

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def _count(self, table: str, row_id: int) -> int:
        cursor = self._conn.execute(f"SELECT COUNT(*) FROM {table} WHERE id = ?", (row_id,))
        return cursor.fetchone()[0]

    # books

    def insert_book(self, book: Book) -> int | None:
        """Store a new book and return its id, or None on failure."""
        try:
            cursor = self._conn.execute("INSERT INTO normal_books (name) VALUES (?)", (book.name,))
        except sqlite3.Error as exc:
            _log.error("Failed to insert book: bookID = %s, message = %s", book.id, exc)
            return None
        return cursor.lastrowid

    def load_book(self, book_id: int) -> Book | None:
        """Return the book with this id, or None if there is none."""
        row = self._conn.execute(
            "SELECT id, name FROM normal_books WHERE id = ?", (book_id,)
        ).fetchone()
        if row is None:
            _log.error("Failed to get book: bookID = %s", book_id)
            return None
        return _book(row)

    def update_book(self, book_id: int, name: str) -> bool:
        """Rename a book; False if it does not exist."""
        if not self._count("normal_books", book_id):
            return False
        self._conn.execute("UPDATE normal_books SET name = ? WHERE id = ?", (name, book_id))
        return True

    def remove_book(self, book_id: int) -> bool:
        """Delete a book and, through the foreign key, its notes."""
        try:
            self._conn.execute("DELETE FROM normal_books WHERE id = ?", (book_id,))
        except sqlite3.Error as exc:
            _log.error("Failed to remove book: bookID = %s, message = %s", book_id, exc)
            return False
        return True

    # notes

    def insert_note(self, note: Note) -> int | None:
        """Store a new note and return its id, or None on failure."""
        try:
            cursor = self._conn.execute(
                "INSERT INTO normal_notes (book_id, content) VALUES (?, ?)",
                (note.book_id, note.content),
            )
        except sqlite3.Error as exc:
            _log.error("Failed to insert note: noteID = %s, message = %s", note.id, exc)
            return None
        return cursor.lastrowid

    def load_note(self, note_id: int) -> Note | None:
        """Return the note with this id, or None if there is none."""
        row = self._conn.execute(
            "SELECT id, book_id, content FROM normal_notes WHERE id = ?", (note_id,)
        ).fetchone()
        if row is None:
            _log.error("Failed to get note: noteID = %s", note_id)
            return None
        return _note(row)

    def update_note(self, note_id: int, content: str) -> bool:
        """Replace a note's content; False if it does not exist."""
        if not self._count("normal_notes", note_id):
            return False
        self._conn.execute("UPDATE normal_notes SET content = ? WHERE id = ?", (content, note_id))
        return True

    def remove_note(self, note_id: int) -> bool:
        """Delete a note."""
        try:
            self._conn.execute("DELETE FROM normal_notes WHERE id = ?", (note_id,))
        except sqlite3.Error as exc:
            _log.error("Failed to remove note: noteID = %s, message = %s", note_id, exc)
            return False
        return True

    # collections

    def load_books(self) -> list[Book]:
        """Return every book, ordered by id."""
        rows = self._conn.execute("SELECT id, name FROM normal_books ORDER BY id")
        return [_book(row) for row in rows]

    def load_all_notes(self) -> list[Note]:
        """Return every note, ordered by id."""
        rows = self._conn.execute("SELECT id, book_id, content FROM normal_notes ORDER BY id")
        return [_note(row) for row in rows]

    def load_notes_by_book(self, book_id: int) -> list[Note]:
        """Return the notes of one book, ordered by id."""
        rows = self._conn.execute(
            "SELECT id, book_id, content FROM normal_notes WHERE book_id = ? ORDER BY id",
            (book_id,),
        )
        return [_note(row) for row in rows]