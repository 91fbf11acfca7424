from __future__ import annotations

from dataclasses import replace

from result import Err, Ok, Result

from treepeek.models.enums import Direction, ValueKind
from treepeek.models.path import FocusPath, IndexMember, KeyMember, NavigationState, PathMember, format_cell_path
from treepeek.models.value import Value, value_kind
from treepeek.models.violation import ContractViolation, ViolationCode

NavResult = Result[NavigationState, ContractViolation]


def _violation(code: ViolationCode, path: FocusPath, container: Value, message: str) -> Err[ContractViolation]:
    return Err(
        ContractViolation(
            code=code,
            path=format_cell_path(path),
            container_kind=value_kind(container),
            message=message,
        )
    )


def first_child(container: Value) -> PathMember | None:
    """Path member selecting the first child of *container*, ``None`` for a leaf."""
    kind = value_kind(container)
    if kind is ValueKind.LIST:
        return IndexMember(0, empty_at_creation=not container)
    if kind is ValueKind.RECORD:
        return KeyMember(next(iter(container), ""), empty_at_creation=not container)
    return None


def resolve(root: Value, path: FocusPath) -> Result[Value, ContractViolation]:
    """Follow *path* from *root*.

    Resolution stops at the first placeholder member and yields the container
    reached so far.
    """
    current = root
    for depth, member in enumerate(path):
        if member.empty_at_creation:
            return Ok(current)
        prefix = path[: depth + 1]
        kind = value_kind(current)
        if kind is ValueKind.LEAF:
            return _violation(ViolationCode.LEAF_PARENT, prefix, current, "Cannot index into a leaf value")
        if isinstance(member, IndexMember):
            if kind is not ValueKind.LIST:
                return _violation(ViolationCode.KIND_MISMATCH, prefix, current, "Index member applied to a record")
            if not 0 <= member.position < len(current):
                return _violation(
                    ViolationCode.INDEX_OUT_OF_RANGE,
                    prefix,
                    current,
                    f"Index {member.position} out of range for list of {len(current)}",
                )
            current = current[member.position]
        else:
            if kind is not ValueKind.RECORD:
                return _violation(ViolationCode.KIND_MISMATCH, prefix, current, "Key member applied to a list")
            if member.name not in current:
                return _violation(ViolationCode.MISSING_KEY, prefix, current, f"Key {member.name!r} not in record")
            current = current[member.name]
    return Ok(current)


def initial_state(root: Value) -> NavigationState:
    member = first_child(root)
    return NavigationState(focus_path=(member,) if member is not None else ())


def descend(state: NavigationState, root: Value) -> NavResult:
    if state.at_leaf:
        return Ok(state)
    path = state.focus_path
    if path and path[-1].empty_at_creation:
        # Focus is a placeholder inside an empty container; there is nothing to open.
        return Ok(replace(state, at_leaf=True))

    resolved = resolve(root, path)
    if isinstance(resolved, Err):
        return resolved
    member = first_child(resolved.unwrap())
    if member is None:
        return Ok(replace(state, at_leaf=True))
    return Ok(replace(state, focus_path=(*path, member)))


def ascend(state: NavigationState) -> NavigationState:
    if not state.at_leaf and len(state.focus_path) > 1:
        return replace(state, focus_path=state.focus_path[:-1], at_leaf=False)
    return replace(state, at_leaf=False)


def _wrap(index: int, direction: Direction, size: int) -> int:
    delta = 1 if direction is Direction.NEXT else size - 1
    return (index + delta + size) % size


def move_sibling(state: NavigationState, root: Value, direction: Direction) -> NavResult:
    if state.at_leaf or not state.focus_path:
        return Ok(state)

    *rest, current = state.focus_path
    parent_path: FocusPath = tuple(rest)
    resolved = resolve(root, parent_path)
    if isinstance(resolved, Err):
        return resolved
    parent = resolved.unwrap()
    kind = value_kind(parent)

    new: PathMember
    if kind is ValueKind.LIST:
        if not isinstance(current, IndexMember):
            return _violation(ViolationCode.KIND_MISMATCH, state.focus_path, parent, "Key member inside a list")
        size = len(parent)
        position = _wrap(current.position, direction, size) if size else current.position
        new = IndexMember(position, current.empty_at_creation)
    elif kind is ValueKind.RECORD:
        if not isinstance(current, KeyMember):
            return _violation(ViolationCode.KIND_MISMATCH, state.focus_path, parent, "Index member inside a record")
        cols = list(parent)
        if not cols:
            name = ""
        elif current.name not in parent:
            return _violation(
                ViolationCode.MISSING_KEY, state.focus_path, parent, f"Key {current.name!r} not in record"
            )
        else:
            name = cols[_wrap(cols.index(current.name), direction, len(cols))]
        new = KeyMember(name, current.empty_at_creation)
    else:
        return _violation(ViolationCode.LEAF_PARENT, state.focus_path, parent, "Sibling move under a leaf value")

    return Ok(replace(state, focus_path=(*parent_path, new)))
