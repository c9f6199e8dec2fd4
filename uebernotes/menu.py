"""Selectable lists of entries with sorting, id display and saved positions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from uebernotes.communicator import Command, Communicator
from uebernotes.components import (
    CatchEvent,
    Component,
    Event,
    FocusableWrapper,
    Key,
    border_chars,
    ignore_events,
)
from uebernotes.sorter import SortField, Sorter

_log = logging.getLogger("uebernotes.linux")


class IndexCache:
    """Remembers the selected position of a menu per key."""

    def __init__(self, view: MenuView) -> None:
        self._view = view
        self._cache: dict[Hashable, int] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._cache

    def add(self, key: Hashable) -> None:
        """Save the current selection under the key."""
        self._cache[key] = self._view.selected_index

    def restore(self, key: Hashable) -> None:
        """Select the position saved under the key, or the first entry."""
        self._view.selected_index = self._cache.get(key, 0)
        self._view.focused_index = self._view.selected_index

    def remove(self, key: Hashable) -> None:
        self._cache.pop(key, None)

    def clear(self) -> None:
        self._cache.clear()


class MenuModel:
    """The entries of a menu, kept sorted."""

    def __init__(self) -> None:
        self.items: list[Any] = []
        self._sorter = Sorter()

    @property
    def sort_field(self) -> SortField:
        return self._sorter.field

    @property
    def ascending(self) -> bool:
        return self._sorter.ascending

    def item(self, index: int) -> Any:
        """Return the entry at the index, or None if there are no entries."""
        if not self.items:
            return None
        if not 0 <= index < len(self.items):
            raise IndexError(f"menu index {index} out of range")
        return self.items[index]

    def item_id(self, index: int) -> int | None:
        """Return the id of the entry at the index, or None if there are no entries."""
        item = self.item(index)
        return None if item is None else item.id

    def set_items(self, items: Iterable[Any]) -> None:
        self.items = list(items)
        self._sorter.sort(self.items)
        _log.debug("Set menu model items: %d", len(self.items))

    def sort_by_field(self, field: SortField) -> bool:
        """Sort by another field; False if it is the current one."""
        if not self._sorter.set_field(field):
            return False
        self._sorter.sort(self.items)
        return True

    def sort_by_order(self, ascending: bool) -> bool:
        """Sort in another direction; False if it is the current one."""
        if not self._sorter.set_order(ascending):
            return False
        self._sorter.sort(self.items)
        return True


class MenuView:
    """Labels shown for the entries and the selected position."""

    def __init__(self) -> None:
        self.selected_index = 0
        self.focused_index = 0
        self.show_id = False
        self.options: list[str] = []
        self.postfix: Callable[[int], str | None] | None = None

    def add_option(self, item_id: Any, name: str) -> None:
        self.options.append(f"[{item_id}] {name}" if self.show_id else name)

    def clear_options(self) -> None:
        self.options.clear()

    def reset_index(self) -> None:
        self.selected_index = 0

    def toggle_show_id(self) -> bool:
        self.show_id = not self.show_id
        return self.show_id

    def create_index_cache(self) -> IndexCache:
        return IndexCache(self)

    def rows(self, width: int) -> list[str]:
        """The entry rows, the selected one marked, followed by the postfix row."""
        rows = [
            ("> " if index == self.selected_index else "  ") + label
            for index, label in enumerate(self.options)
        ]
        if self.postfix is not None:
            extra = self.postfix(width)
            if extra is not None:
                rows.append(extra)
        return rows

    def render(self, name: str, width: int, height: int, focused: bool) -> list[str]:
        """A bordered box with the name as title and the entries below it."""
        inner = max(width - 2, 0)
        lines = [name.center(inner), "─" * inner, *self.rows(inner)]
        return border_chars(focused).frame(lines, width, height)


class _MenuComponent(Component):
    """Moves the selection of a view with arrows, j/k, Home/End and Tab."""

    def __init__(self, view: MenuView, on_change: Callable[[], None],
                 on_enter: Callable[[], None] | None) -> None:
        super().__init__()
        self._view = view
        self._on_change = on_change
        self._on_enter = on_enter

    def on_event(self, event: Event) -> bool:
        if event == Key.RETURN:
            if self._on_enter is not None:
                self._on_enter()
            return True

        view = self._view
        count = len(view.options)
        old = view.selected_index
        if event in (Key.ARROW_UP, "k"):
            new = old - 1
        elif event in (Key.ARROW_DOWN, "j"):
            new = old + 1
        elif event == Key.HOME:
            new = 0
        elif event == Key.END:
            new = count - 1
        elif event == Key.TAB and count:
            new = (old + 1) % count
        elif event == Key.TAB_REVERSE and count:
            new = (old + count - 1) % count
        else:
            return False

        new = max(0, min(new, count - 1))
        if new == old:
            return False
        view.selected_index = view.focused_index = new
        self._on_change()
        return True

    def render(self, width: int, height: int) -> list[str]:
        return self._view.rows(width)[:height]

    def focusable(self) -> bool:
        return bool(self._view.options)


class MenuController:
    """A named menu pane: its entries, its keys and the commands it sends."""

    refresh_cmd: Command = Command.REFRESH_ALL
    sort_cmd: Command = Command.REFRESH_ALL
    view_cmd: Command = Command.REFRESH_ALL

    def __init__(self, name: str) -> None:
        self.name = name
        self.model = MenuModel()
        self.view = MenuView()
        self.component: Component | None = None
        self.on_enter: Callable[[], None] | None = None

    def configure_component_option(self, communicator: Communicator) -> None:
        """Hook for panes to set ``on_enter`` and the view's postfix row."""

    def create_component(self, communicator: Communicator) -> Component:
        """Build the component tree that takes key events for this menu."""
        self.configure_component_option(communicator)

        def on_change() -> None:
            communicator.cmd.append(self.view_cmd)
            _log.debug("[%s] Selected ID: %s", self.name, self.selected_item_id())

        component: Component = _MenuComponent(self.view, on_change, self.on_enter)
        component = CatchEvent(component, lambda event: self._on_key(communicator, event))
        component = FocusableWrapper(component)
        component = ignore_events(component, [Key.TAB, Key.TAB_REVERSE])
        component = CatchEvent(component, lambda event: self._on_jump(communicator, event))
        self.component = component
        return component

    def _on_jump(self, communicator: Communicator, event: Event) -> bool:
        if event == "g":
            communicator.ui.append(Key.HOME)
            return True
        if event == "G":
            communicator.ui.append(Key.END)
            return True
        return False

    def _on_key(self, communicator: Communicator, event: Event) -> bool:
        if event == "r":
            item_id = self.selected_item_id()
            if item_id is not None:
                message = f"[{self.name}] Refreshed ID: {item_id}"
            else:
                message = f"[{self.name}] Nothing to refresh"
            communicator.cmd.append(self.refresh_cmd)
            communicator.ntf.append(message)
            return True
        if event == "s":
            field = self.toggle_sort_field()
            communicator.cmd.append(self.sort_cmd)
            if field is SortField.NAME:
                communicator.ntf.append(f"[{self.name}] Sort by name")
            else:
                communicator.ntf.append(f"[{self.name}] Sort by creation time")
            return True
        if event == "o":
            ascending = self.toggle_sort_order()
            communicator.cmd.append(self.sort_cmd)
            communicator.ntf.append(
                f"[{self.name}] Ascending sort order: {str(ascending).lower()}"
            )
            return True
        if event == "i":
            enabled = self.toggle_show_id()
            communicator.cmd.append(self.view_cmd)
            communicator.ntf.append(f"[{self.name}] Show ID: {str(enabled).lower()}")
            return True
        return False

    def on_event(self, event: Event) -> bool:
        """Pass a key event to the component; True if it was handled."""
        if self.component is None:
            raise RuntimeError(f"{self.name} menu has no component yet")
        return self.component.on_event(event)

    def selected_item_id(self) -> int | None:
        return self.model.item_id(self.view.selected_index)

    def selected_item(self) -> Any:
        return self.model.item(self.view.selected_index)

    def items_amount(self) -> int:
        return len(self.model.items)

    def selected_index(self) -> int:
        return self.view.selected_index

    def set_items(self, items: Iterable[Any]) -> None:
        self.model.set_items(items)
        self.view.reset_index()
        self._update_names()

    def toggle_show_id(self) -> bool:
        enabled = self.view.toggle_show_id()
        self._update_names()
        return enabled

    def create_index_cache(self) -> IndexCache:
        return self.view.create_index_cache()

    def sort_by_field(self, field: SortField) -> bool:
        if self.model.sort_by_field(field):
            self._update_names()
            return True
        return False

    def toggle_sort_field(self) -> SortField:
        """Switch between ordering by name and by creation; return the new field."""
        if self.model.sort_field is SortField.NAME:
            field = SortField.CREATION_TIME
        else:
            field = SortField.NAME
        self.sort_by_field(field)
        return field

    def toggle_sort_order(self) -> bool:
        """Reverse the direction; return whether it is now ascending."""
        self.model.sort_by_order(not self.model.ascending)
        self._update_names()
        return self.model.ascending

    def render(self, width: int, height: int) -> list[str]:
        focused = self.component is not None and self.component.focused
        return self.view.render(self.name, width, height, focused)

    def _update_names(self) -> None:
        self.view.clear_options()
        for item in self.model.items:
            self.view.add_option(item.id, item.title())
        _log.debug("Update view names, size: %d", len(self.view.options))