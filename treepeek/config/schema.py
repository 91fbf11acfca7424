from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from treepeek.models.enums import Action


@dataclass(slots=True)
class StatusBarConfig:
    background: str = "white"
    foreground: str = "black"


@dataclass(slots=True)
class NavigationBindingsMap:
    left: str = "h"
    down: str = "j"
    up: str = "k"
    right: str = "l"


@dataclass(slots=True)
class PeekingBindingsMap:
    quit: str = "escape"
    all: str = "a"
    current: str = "c"
    under: str = "u"


@dataclass(slots=True)
class KeyBindingsMap:
    quit: str = "q"
    insert: str = "i"
    normal: str = "n"
    navigation: NavigationBindingsMap = field(default_factory=NavigationBindingsMap)
    peek: str = "p"
    peeking: PeekingBindingsMap = field(default_factory=PeekingBindingsMap)

    def key_for(self, action: Action) -> str:
        return {
            Action.QUIT: self.quit,
            Action.ENTER_INSERT: self.insert,
            Action.ENTER_NORMAL: self.normal,
            Action.ENTER_PEEK: self.peek,
            Action.MOVE_DOWN: self.navigation.down,
            Action.MOVE_UP: self.navigation.up,
            Action.MOVE_RIGHT: self.navigation.right,
            Action.MOVE_LEFT: self.navigation.left,
            Action.PEEK_QUIT: self.peeking.quit,
            Action.PEEK_ALL: self.peeking.all,
            Action.PEEK_CURRENT: self.peeking.current,
            Action.PEEK_UNDER: self.peeking.under,
        }[action]


@dataclass(slots=True)
class AppConfig:
    show_cell_path: bool = True
    status_bar: StatusBarConfig = field(default_factory=StatusBarConfig)
    keybindings: KeyBindingsMap = field(default_factory=KeyBindingsMap)

    def to_dict(self) -> dict[str, Any]:
        kb = self.keybindings
        return {
            "showCellPath": self.show_cell_path,
            "statusBar": {
                "background": self.status_bar.background,
                "foreground": self.status_bar.foreground,
            },
            "keybindings": {
                "quit": kb.quit,
                "insert": kb.insert,
                "normal": kb.normal,
                "navigation": {
                    "left": kb.navigation.left,
                    "down": kb.navigation.down,
                    "up": kb.navigation.up,
                    "right": kb.navigation.right,
                },
                "peek": kb.peek,
                "peeking": {
                    "quit": kb.peeking.quit,
                    "all": kb.peeking.all,
                    "current": kb.peeking.current,
                    "under": kb.peeking.under,
                },
            },
        }


def _key(data: dict[str, Any], name: str, default: str) -> str:
    value = data.get(name, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"Key binding '{name}' must be a non-empty string.")
    return value


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' must be a JSON object.")
    return value


def _bindings_from_dict(data: dict[str, Any], defaults: KeyBindingsMap) -> KeyBindingsMap:
    nav = _section(data, "navigation")
    peeking = _section(data, "peeking")
    return KeyBindingsMap(
        quit=_key(data, "quit", defaults.quit),
        insert=_key(data, "insert", defaults.insert),
        normal=_key(data, "normal", defaults.normal),
        navigation=NavigationBindingsMap(
            left=_key(nav, "left", defaults.navigation.left),
            down=_key(nav, "down", defaults.navigation.down),
            up=_key(nav, "up", defaults.navigation.up),
            right=_key(nav, "right", defaults.navigation.right),
        ),
        peek=_key(data, "peek", defaults.peek),
        peeking=PeekingBindingsMap(
            quit=_key(peeking, "quit", defaults.peeking.quit),
            all=_key(peeking, "all", defaults.peeking.all),
            current=_key(peeking, "current", defaults.peeking.current),
            under=_key(peeking, "under", defaults.peeking.under),
        ),
    )


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    status_bar = _section(data, "statusBar")
    return AppConfig(
        show_cell_path=bool(data.get("showCellPath", defaults.show_cell_path)),
        status_bar=StatusBarConfig(
            background=str(status_bar.get("background", defaults.status_bar.background)),
            foreground=str(status_bar.get("foreground", defaults.status_bar.foreground)),
        ),
        keybindings=_bindings_from_dict(_section(data, "keybindings"), defaults.keybindings),
    )
