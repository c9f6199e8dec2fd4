from uebernotes.components import Key
from uebernotes.pager import Pager, PagerState, pager_lines, render_pager


def test_pager_lines_basic_split():
    assert pager_lines("a\nb") == ["a", "b"]
    assert pager_lines("abc") == ["abc"]


def test_pager_lines_trailing_newline_and_empty():
    assert pager_lines("a\n") == ["a"]
    assert pager_lines("a\n\n") == ["a", ""]
    assert pager_lines("") == []
    assert pager_lines(None) == []


def test_pager_lines_from_many_texts():
    assert pager_lines(["x\ny", "z"]) == ["x", "y", "z"]


def test_shift_is_clamped():
    state = PagerState(shift=100)
    render_pager(["a", "b", "c"], state, 5, 5)
    assert state.shift == 2
    state.shift = -4
    render_pager(["a", "b", "c"], state, 5, 5)
    assert state.shift == 0
    state.shift = 3
    render_pager([], state, 5, 5)
    assert state.shift == 0


def test_render_from_shift_and_padded():
    state = PagerState(shift=1)
    rows = render_pager(["one", "two", "three"], state, 8, 5)
    assert [row.rstrip() for row in rows] == ["two", "three"]
    assert all(len(row) == 8 for row in rows)


def test_render_cuts_or_wraps():
    assert render_pager(["abcdef"], PagerState(wrap=False), 3, 5) == ["abc"]
    assert render_pager(["abcdef"], PagerState(wrap=True), 3, 5) == ["abc", "def"]


def test_render_respects_height():
    lines = ["l%d" % n for n in range(10)]
    rows = render_pager(lines, PagerState(), 4, 3)
    assert [row.rstrip() for row in rows] == lines[:3]
    wrapped = render_pager(["abcdefghij"], PagerState(wrap=True), 2, 2)
    assert wrapped == ["ab", "cd"]


def test_pager_keys():
    state = PagerState()
    pager = Pager("a\nb\nc", state)
    assert pager.on_event("j") is True
    assert pager.on_event("j") is True
    assert state.shift == 2
    assert pager.on_event("k") is True
    assert state.shift == 1
    assert pager.on_event("g") is True
    assert state.shift == 0
    assert pager.on_event("G") is True
    assert state.shift == 99999
    pager.render(5, 5)
    assert state.shift == 2


def test_pager_wrap_toggle_and_unknown():
    state = PagerState(wrap=False)
    pager = Pager("text", state)
    assert pager.on_event("w") is True
    assert state.wrap is True
    assert pager.on_event("x") is False
    assert pager.on_event(Key.RETURN) is False
    assert pager.focusable() is True


def test_pager_follows_shared_content():
    messages = ["first"]
    pager = Pager(messages, PagerState())
    messages.append("second")
    assert [row.rstrip() for row in pager.render(10, 5)] == ["first", "second"]

    current = {"text": None}
    live = Pager(lambda: current["text"], PagerState())
    assert live.render(10, 5) == []
    current["text"] = "hello"
    assert [row.rstrip() for row in live.render(10, 5)] == ["hello"]