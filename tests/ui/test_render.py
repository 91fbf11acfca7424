from __future__ import annotations

from dataclasses import replace

from rich.console import Console
from rich.table import Table
from rich.text import Text

from treepeek.config.defaults import default_config
from treepeek.models.enums import Mode
from treepeek.models.path import IndexMember, KeyMember, NavigationState
from treepeek.ui.render import SELECTED_STYLE, key_hints, render_status, render_view

DOC = {"a": [1, 2, 3], "b": "x", "e": []}


def _plain(renderable) -> str:
    console = Console(width=80, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_list_view_highlights_focused_row() -> None:
    state = NavigationState(focus_path=(KeyMember("a"), IndexMember(1)))
    view = render_view(DOC, state, default_config())
    assert isinstance(view, Table)
    assert view.row_count == 3
    assert [row.style for row in view.rows] == [None, SELECTED_STYLE, None]


def test_record_view_lists_keys_in_order() -> None:
    state = NavigationState(focus_path=(KeyMember("b"),))
    view = render_view(DOC, state, default_config())
    assert isinstance(view, Table)
    text = _plain(view)
    keys = [line.split()[0] for line in text.splitlines() if line.split() and line.split()[0] in DOC]
    assert keys == ["a", "b", "e"]
    assert "[list 3 items]" in text
    assert view.rows[1].style == SELECTED_STYLE


def test_leaf_views() -> None:
    at_bottom = NavigationState(focus_path=(KeyMember("b"),), at_leaf=True)
    assert _plain(render_view(DOC, at_bottom, default_config())).strip() == '"x"'
    assert _plain(render_view(7, NavigationState(), default_config())).strip() == "7"


def test_empty_container_view() -> None:
    state = NavigationState(focus_path=(KeyMember("e"), IndexMember(0, empty_at_creation=True)))
    view = render_view(DOC, state, default_config())
    assert isinstance(view, Text)
    assert view.plain == "(empty list)"


def test_broken_path_renders_error() -> None:
    state = NavigationState(focus_path=(KeyMember("zzz"), IndexMember(0)))
    view = render_view(DOC, state, default_config())
    assert isinstance(view, Text)
    assert "not in record" in view.plain


def test_render_does_not_touch_state() -> None:
    state = NavigationState(focus_path=(KeyMember("a"), IndexMember(2)))
    render_view(DOC, state, default_config())
    render_status(state, default_config())
    assert state == NavigationState(focus_path=(KeyMember("a"), IndexMember(2)))
    assert DOC == {"a": [1, 2, 3], "b": "x", "e": []}


def test_status_shows_mode_and_cell_path() -> None:
    state = NavigationState(focus_path=(KeyMember("a"), IndexMember(2)), at_leaf=True)
    text = render_status(state, default_config()).plain
    assert "NORMAL" in text
    assert "$.a.2" in text
    assert "(bottom)" in text


def test_status_hides_cell_path_when_disabled() -> None:
    config = replace(default_config(), show_cell_path=False)
    state = NavigationState(focus_path=(KeyMember("a"),), mode=Mode.PEEKING)
    text = render_status(state, config).plain
    assert "PEEKING" in text
    assert "$." not in text


def test_key_hints_follow_bindings() -> None:
    bindings = default_config().keybindings
    assert "a all" in key_hints(Mode.PEEKING, bindings)
    assert "n normal" in key_hints(Mode.INSERT, bindings)
    assert "h/j/k/l move" in key_hints(Mode.NORMAL, bindings)
