from __future__ import annotations

from result import Err
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from treepeek.config.schema import AppConfig, KeyBindingsMap
from treepeek.models.enums import Mode, ValueKind
from treepeek.models.path import IndexMember, NavigationState, format_cell_path
from treepeek.models.value import Value, value_kind
from treepeek.services.formatting import empty_label, format_leaf, preview_value
from treepeek.services.navigator import resolve

SELECTED_STYLE = "bold #1d1f21 on #b5bd68"


def _error(message: str) -> Text:
    return Text(message, style="bold red")


def _leaf_view(value: Value) -> Text:
    return Text(format_leaf(value), style="#c5c8c6")


def render_view(root: Value, state: NavigationState, config: AppConfig, preview_width: int = 60) -> RenderableType:
    """Build the main view for *state*: the container around the focus, or the focused leaf."""
    path = state.focus_path
    if not path:
        return _leaf_view(root)

    if state.at_leaf:
        focused = resolve(root, path)
        if isinstance(focused, Err):
            return _error(focused.unwrap_err().describe())
        return _leaf_view(focused.unwrap())

    resolved = resolve(root, path[:-1])
    if isinstance(resolved, Err):
        return _error(resolved.unwrap_err().describe())
    parent = resolved.unwrap()
    kind = value_kind(parent)
    if kind is ValueKind.LEAF:
        return _leaf_view(parent)
    if not parent:
        return Text(empty_label(kind), style="#969896")

    member = path[-1]
    table = Table(expand=True, show_edge=False, header_style="bold #81a2be")
    table.add_column("#" if kind is ValueKind.LIST else "key", no_wrap=True)
    table.add_column("value")
    if kind is ValueKind.LIST:
        selected = member.position if isinstance(member, IndexMember) else -1
        for index, item in enumerate(parent):
            table.add_row(
                str(index),
                preview_value(item, preview_width),
                style=SELECTED_STYLE if index == selected else None,
            )
    else:
        selected_key = None if isinstance(member, IndexMember) else member.name
        for key, item in parent.items():
            table.add_row(
                str(key),
                preview_value(item, preview_width),
                style=SELECTED_STYLE if key == selected_key else None,
            )
    return table


def key_hints(mode: Mode, bindings: KeyBindingsMap) -> str:
    if mode is Mode.PEEKING:
        p = bindings.peeking
        return f"{p.all} all | {p.current} current | {p.under} under | {p.quit} back"
    if mode is Mode.INSERT:
        return f"{bindings.normal} normal | {bindings.quit} quit"
    nav = bindings.navigation
    return (
        f"{nav.left}/{nav.down}/{nav.up}/{nav.right} move | "
        f"{bindings.insert} insert | {bindings.peek} peek | {bindings.quit} quit"
    )


def render_status(state: NavigationState, config: AppConfig) -> Text:
    bar_style = f"{config.status_bar.foreground} on {config.status_bar.background}"
    text = Text(f" {state.mode} ", style=f"bold {bar_style}")
    if config.show_cell_path:
        cell_path = format_cell_path(state.focus_path) or "<root>"
        text.append(f"  $.{cell_path}" if state.focus_path else f"  {cell_path}")
        if state.at_leaf:
            text.append(" (bottom)", style="#969896")
    text.append(f"    {key_hints(state.mode, config.keybindings)}", style="#969896")
    return text
