"""Access to books and notes with an optional in-memory cache."""

from __future__ import annotations

from collections.abc import Iterable

from uebernotes.database import Database
from uebernotes.models import Book, Config, Note


class StorageCache:
    """Books and notes held in memory, keyed by id."""

    def __init__(self, is_active: bool) -> None:
        self.is_active = is_active
        self._books: dict[int, Book] = {}
        self._notes: dict[int, Note] = {}

    def initialize(self, books: Iterable[Book], notes: Iterable[Note]) -> None:
        """Replace the whole cache content."""
        self._books = {book.id: book for book in books}
        self._notes = {note.id: note for note in notes}

    def add_book(self, book: Book) -> None:
        self._books.setdefault(book.id, book)

    def add_note(self, note: Note) -> None:
        self._notes.setdefault(note.id, note)

    def add_notes(self, notes: Iterable[Note]) -> None:
        for note in notes:
            self.add_note(note)

    def books(self) -> list[Book]:
        return list(self._books.values())

    def notes_by_book(self, book_id: int) -> list[Note]:
        return [note for note in self._notes.values() if note.book_id == book_id]

    def book(self, book_id: int) -> Book | None:
        return self._books.get(book_id)

    def note(self, note_id: int) -> Note | None:
        return self._notes.get(note_id)

    def remove_book(self, book_id: int) -> None:
        """Drop a book together with its notes."""
        self.remove_notes_for_book(book_id)
        self._books.pop(book_id, None)

    def remove_notes_for_book(self, book_id: int) -> None:
        self._notes = {
            note_id: note for note_id, note in self._notes.items() if note.book_id != book_id
        }

    def remove_note(self, note_id: int) -> None:
        self._notes.pop(note_id, None)


class Storage:
    """Books and notes in a database, read through the cache when it is active."""

    def __init__(self, config: Config) -> None:
        self._db = Database(config.database)
        self._cache = StorageCache(config.use_caching)
        self.load()

    def __enter__(self) -> Storage:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Close the database."""
        self._db.close()

    def load(self) -> None:
        if self._cache.is_active:
            self.load_books_to_cache()

    def load_books_to_cache(self) -> None:
        """Reload every book and note from the database into the cache."""
        self._cache.initialize(self._db.load_books(), self._db.load_all_notes())

    def load_notes_to_cache(self, book_id: int) -> None:
        """Reload the notes of one book from the database into the cache."""
        notes = self._db.load_notes_by_book(book_id)
        self._cache.remove_notes_for_book(book_id)
        self._cache.add_notes(notes)

    def books(self) -> list[Book]:
        if self._cache.is_active:
            return self._cache.books()
        return self._db.load_books()

    def notes_by_book(self, book_id: int) -> list[Note]:
        if self._cache.is_active:
            return self._cache.notes_by_book(book_id)
        return self._db.load_notes_by_book(book_id)

    def create_book(self, book: Book) -> int | None:
        """Store a book, set its id and return it; None on failure."""
        book_id = self._db.insert_book(book)
        if book_id is None:
            return None
        book.id = book_id
        if self._cache.is_active:
            self._cache.add_book(book)
        return book_id

    def create_note(self, note: Note) -> int | None:
        """Store a note, set its id and return it; None on failure."""
        note_id = self._db.insert_note(note)
        if note_id is None:
            return None
        note.id = note_id
        if self._cache.is_active:
            self._cache.add_note(note)
        return note_id

    def load_book(self, book_id: int) -> Book | None:
        if self._cache.is_active:
            return self._cache.book(book_id)
        return self._db.load_book(book_id)

    def load_note(self, note_id: int) -> Note | None:
        if self._cache.is_active:
            return self._cache.note(note_id)
        return self._db.load_note(note_id)

    def update_book(self, book_id: int, name: str) -> bool:
        book = self.load_book(book_id)
        if book is not None and self._db.update_book(book_id, name):
            book.name = name
            return True
        return False

    def update_note(self, note_id: int, content: str) -> bool:
        note = self.load_note(note_id)
        if note is not None and self._db.update_note(note_id, content):
            note.content = content
            return True
        return False

    def remove_book(self, book_id: int) -> bool:
        # the database does not report removal of a missing row
        if self.load_book(book_id) is None or not self._db.remove_book(book_id):
            return False
        if self._cache.is_active:
            self._cache.remove_book(book_id)
        return True

    def remove_note(self, note_id: int) -> bool:
        if self.load_note(note_id) is None or not self._db.remove_note(note_id):
            return False
        if self._cache.is_active:
            self._cache.remove_note(note_id)
        return True