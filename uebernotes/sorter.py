"""Ordering of menu entries by id or by title."""

from __future__ import annotations

from enum import Enum
from typing import Any


class SortField(Enum):
    """What menu entries are ordered by."""

    CREATION_TIME = "creation_time"  # ordered by id for now
    UPDATE_TIME = "update_time"  # ordered by id for now
    NAME = "name"


class Sorter:
    """Sort settings and the sorting of entries that have an id and a title."""

    def __init__(self) -> None:
        self.field = SortField.CREATION_TIME
        self.ascending = True

    def set_field(self, field: SortField) -> bool:
        """Change the field; False if it was already set."""
        if self.field == field:
            return False
        self.field = field
        return True

    def set_order(self, ascending: bool) -> bool:
        """Change the direction; False if it was already set."""
        if self.ascending == ascending:
            return False
        self.ascending = ascending
        return True

    def sort(self, items: list[Any]) -> bool:
        """Sort the list in place by the current field and direction."""
        if self.field is SortField.NAME:
            items.sort(key=lambda item: item.title(), reverse=not self.ascending)
        else:
            items.sort(key=lambda item: item.id, reverse=not self.ascending)
        return True