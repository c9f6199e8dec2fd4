"""Books and notes, the entities kept by the storage."""

from __future__ import annotations

from dataclasses import dataclass

UNTITLED = "<untitled>"


@dataclass(eq=False)
class Book:
    """A named collection of notes."""

    name: str = ""
    id: int = 0

    def title(self) -> str:
        """Return the name shown for the book."""
        return self.name


@dataclass(eq=False)
class Note:
    """A piece of text that belongs to a book."""

    book_id: int = 0
    content: str = ""
    id: int = 0

    def title(self) -> str:
        """Return the first line of the content, or a placeholder if there is none."""
        if not self.content:
            return UNTITLED
        first_line, newline, _ = self.content.partition("\n")
        if newline and not first_line:
            return UNTITLED
        return first_line


@dataclass(frozen=True)
class Config:
    """Where the data lives and whether it is kept in memory."""

    database: str
    use_caching: bool