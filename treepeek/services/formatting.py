from __future__ import annotations

import json

from treepeek.models.enums import ValueKind
from treepeek.models.value import Value, value_kind


def format_leaf(value: Value) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def preview_value(value: Value, max_width: int = 60) -> str:
    kind = value_kind(value)
    if kind is ValueKind.LIST:
        count = len(value)
        return f"[list {count} item{'' if count == 1 else 's'}]"
    if kind is ValueKind.RECORD:
        count = len(value)
        return f"{{record {count} field{'' if count == 1 else 's'}}}"
    text = format_leaf(value)
    if len(text) <= max_width:
        return text
    return text[: max_width - 1] + "…"


def empty_label(kind: ValueKind) -> str:
    return "(empty list)" if kind is ValueKind.LIST else "(empty record)"


def to_json(value: Value) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)
