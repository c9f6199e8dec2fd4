import pytest

from uebernotes.communicator import Communicator
from uebernotes.components import Key, border_chars
from uebernotes.menu import MenuController, MenuModel, MenuView
from uebernotes.models import Book
from uebernotes.sorter import SortField


def _books():
    return [Book("cherry", id=3), Book("apple", id=1), Book("banana", id=2)]


@pytest.fixture
def menu():
    controller = MenuController("Test")
    controller.set_items(_books())
    return controller


@pytest.fixture
def wired(menu):
    communicator = Communicator()
    menu.create_component(communicator)
    return menu, communicator


def _ids(controller):
    return [item.id for item in controller.model.items]


def _titles(controller):
    return [item.title() for item in controller.model.items]


def test_set_items_sorts_by_id(menu):
    ids = _ids(menu)
    assert ids == sorted(ids)
    assert menu.selected_item_id() == min(ids)
    assert menu.selected_item() is menu.model.items[0]
    assert menu.items_amount() == len(_books())


def test_options_follow_items(menu):
    assert menu.view.options == _titles(menu)


def test_empty_menu_has_no_selection():
    controller = MenuController("Empty")
    assert controller.selected_item_id() is None
    assert controller.selected_item() is None
    assert controller.items_amount() == 0


def test_model_index_out_of_range():
    model = MenuModel()
    model.set_items(_books())
    with pytest.raises(IndexError):
        model.item(len(_books()))
    with pytest.raises(IndexError):
        model.item_id(-1)


def test_toggle_sort_order(menu):
    assert menu.toggle_sort_order() is False
    ids = _ids(menu)
    assert ids == sorted(ids, reverse=True)
    assert menu.view.options == _titles(menu)
    assert menu.toggle_sort_order() is True
    assert _ids(menu) == sorted(ids)


def test_toggle_sort_field(menu):
    assert menu.toggle_sort_field() is SortField.NAME
    titles = _titles(menu)
    assert titles == sorted(titles)
    assert menu.view.options == titles
    assert menu.toggle_sort_field() is SortField.CREATION_TIME
    assert _ids(menu) == sorted(_ids(menu))


def test_sort_by_same_field_reports_no_change(menu):
    assert menu.sort_by_field(SortField.CREATION_TIME) is False
    assert menu.sort_by_field(SortField.NAME) is True


def test_update_time_toggles_to_name(menu):
    assert menu.sort_by_field(SortField.UPDATE_TIME) is True
    assert menu.toggle_sort_field() is SortField.NAME


def test_toggle_show_id(menu):
    assert menu.toggle_show_id() is True
    assert menu.view.options == [f"[{item.id}] {item.title()}" for item in menu.model.items]
    assert menu.toggle_show_id() is False
    assert menu.view.options == _titles(menu)


def test_view_options():
    view = MenuView()
    view.add_option(7, "x")
    assert view.options == ["x"]
    view.toggle_show_id()
    view.add_option(7, "x")
    assert view.options[-1] == "[7] x"
    view.clear_options()
    assert view.options == []


def test_index_cache_round_trip():
    view = MenuView()
    cache = view.create_index_cache()
    view.selected_index = 2
    cache.add("key")
    assert "key" in cache
    view.reset_index()
    assert view.selected_index == 0
    cache.restore("key")
    assert view.selected_index == 2
    assert view.focused_index == 2


def test_index_cache_unknown_and_removed_keys():
    view = MenuView()
    cache = view.create_index_cache()
    view.selected_index = 1
    cache.add("key")
    cache.restore("other")
    assert view.selected_index == 0
    cache.remove("key")
    view.selected_index = 1
    cache.restore("key")
    assert view.selected_index == 0


def test_index_cache_clear():
    view = MenuView()
    cache = view.create_index_cache()
    cache.add("a")
    cache.add("b")
    cache.clear()
    assert "a" not in cache
    assert "b" not in cache


def test_moving_selection_sends_view_command(wired):
    menu, communicator = wired
    assert menu.on_event("j") is True
    assert menu.selected_index() == 1
    assert menu.selected_item_id() == _ids(menu)[1]
    assert list(communicator.cmd) == [menu.view_cmd]
    assert menu.on_event(Key.ARROW_UP) is True
    assert menu.selected_index() == 0


def test_cannot_move_before_first(wired):
    menu, communicator = wired
    assert menu.on_event("k") is False
    assert menu.selected_index() == 0
    assert not communicator.cmd


def test_tab_is_ignored(wired):
    menu, communicator = wired
    assert menu.on_event(Key.TAB) is False
    assert menu.on_event(Key.TAB_REVERSE) is False
    assert menu.selected_index() == 0
    assert not communicator.cmd


def test_g_and_shift_g_post_ui_events(wired):
    menu, communicator = wired
    assert menu.on_event("G") is True
    assert menu.on_event("g") is True
    assert list(communicator.ui) == [Key.END, Key.HOME]
    assert menu.selected_index() == 0


def test_end_and_home_move_selection(wired):
    menu, _ = wired
    assert menu.on_event(Key.END) is True
    assert menu.selected_index() == len(_books()) - 1
    assert menu.on_event(Key.HOME) is True
    assert menu.selected_index() == 0


def test_refresh_key(wired):
    menu, communicator = wired
    assert menu.on_event("r") is True
    assert list(communicator.cmd) == [menu.refresh_cmd]
    assert list(communicator.ntf) == [f"[Test] Refreshed ID: {menu.selected_item_id()}"]


def test_sort_key(wired):
    menu, communicator = wired
    assert menu.on_event("s") is True
    assert list(communicator.cmd) == [menu.sort_cmd]
    assert list(communicator.ntf) == ["[Test] Sort by name"]
    menu.on_event("s")
    assert communicator.ntf[-1] == "[Test] Sort by creation time"


def test_order_key(wired):
    menu, communicator = wired
    assert menu.on_event("o") is True
    assert list(communicator.cmd) == [menu.sort_cmd]
    assert list(communicator.ntf) == ["[Test] Ascending sort order: false"]


def test_show_id_key(wired):
    menu, communicator = wired
    assert menu.on_event("i") is True
    assert list(communicator.cmd) == [menu.view_cmd]
    assert list(communicator.ntf) == ["[Test] Show ID: true"]


def test_return_without_handler_is_consumed(wired):
    menu, communicator = wired
    assert menu.on_event(Key.RETURN) is True
    assert not communicator.cmd


def test_empty_menu_does_not_take_keys():
    controller = MenuController("Test")
    communicator = Communicator()
    controller.create_component(communicator)
    assert controller.on_event("r") is False
    assert not communicator.cmd
    assert not communicator.ntf


def test_on_event_requires_component(menu):
    with pytest.raises(RuntimeError):
        menu.on_event("j")


def test_render(wired):
    menu, _ = wired
    lines = menu.render(20, 8)
    assert len(lines) == 8
    assert all(len(line) == 20 for line in lines)
    assert "Test" in lines[1]
    assert ("> " + menu.model.items[0].title()) in lines[3]
    assert lines[0][0] == border_chars(False).top_left
    menu.component.focused = True
    assert menu.render(20, 8)[0][0] == border_chars(True).top_left