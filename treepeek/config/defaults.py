from __future__ import annotations

from treepeek.config.schema import (
    AppConfig,
    KeyBindingsMap,
    NavigationBindingsMap,
    PeekingBindingsMap,
    StatusBarConfig,
)


def default_config() -> AppConfig:
    return AppConfig(
        show_cell_path=True,
        status_bar=StatusBarConfig(background="white", foreground="black"),
        keybindings=KeyBindingsMap(
            quit="q",
            insert="i",
            normal="n",
            navigation=NavigationBindingsMap(left="h", down="j", up="k", right="l"),
            peek="p",
            peeking=PeekingBindingsMap(quit="escape", all="a", current="c", under="u"),
        ),
    )
