from __future__ import annotations

from enum import Enum


class ValueKind(str, Enum):
    LIST = "list"
    RECORD = "record"
    LEAF = "leaf"


class Mode(str, Enum):
    NORMAL = "NORMAL"
    INSERT = "INSERT"
    PEEKING = "PEEKING"

    def __str__(self) -> str:
        return self.value


class Direction(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"


class Action(str, Enum):
    QUIT = "quit"
    ENTER_INSERT = "enter-insert"
    ENTER_NORMAL = "enter-normal"
    ENTER_PEEK = "enter-peek"
    MOVE_DOWN = "move-down"
    MOVE_UP = "move-up"
    MOVE_RIGHT = "move-right"
    MOVE_LEFT = "move-left"
    PEEK_QUIT = "peek-quit"
    PEEK_ALL = "peek-all"
    PEEK_CURRENT = "peek-current"
    PEEK_UNDER = "peek-under"
