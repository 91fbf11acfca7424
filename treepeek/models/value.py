from __future__ import annotations

from typing import Any, final

from treepeek.models.enums import ValueKind

Value = Any


@final
class Nothing:
    """Result of a session that ended without peeking anything."""

    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __bool__(self) -> bool:
        return False


NOTHING = Nothing()


def value_kind(value: Value) -> ValueKind:
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.RECORD
    return ValueKind.LEAF


def is_container(value: Value) -> bool:
    return value_kind(value) is not ValueKind.LEAF
