from __future__ import annotations

from dataclasses import dataclass, field

from treepeek.models.enums import Mode


@dataclass(slots=True, frozen=True)
class IndexMember:
    position: int
    empty_at_creation: bool = False


@dataclass(slots=True, frozen=True)
class KeyMember:
    name: str
    empty_at_creation: bool = False


PathMember = IndexMember | KeyMember
FocusPath = tuple[PathMember, ...]


@dataclass(slots=True, frozen=True)
class NavigationState:
    focus_path: FocusPath = field(default_factory=tuple)
    at_leaf: bool = False
    mode: Mode = Mode.NORMAL


def format_cell_path(path: FocusPath) -> str:
    """Render *path* as a dotted cell path, e.g. ``a.1.name``.

    Placeholder members pointing into an empty container get a ``?`` suffix.
    """
    parts: list[str] = []
    for member in path:
        text = str(member.position) if isinstance(member, IndexMember) else member.name
        parts.append(f"{text}?" if member.empty_at_creation else text)
    return ".".join(parts)
