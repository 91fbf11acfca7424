"""Mode state machine.

A key maps to at most one action. Candidates are checked in the order of
``ACTION_PRIORITY``; when a config binds one key to several actions the
earliest wins, even if that action does nothing in the current mode.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace

from result import Err, Ok, Result

from treepeek.config.schema import KeyBindingsMap
from treepeek.models.enums import Action, Direction, Mode
from treepeek.models.path import NavigationState
from treepeek.models.value import NOTHING, Value
from treepeek.models.violation import ContractViolation
from treepeek.services.navigator import ascend, descend, move_sibling, resolve

ACTION_PRIORITY: tuple[Action, ...] = (
    # session
    Action.QUIT,
    # mode entry / exit
    Action.ENTER_INSERT,
    Action.ENTER_NORMAL,
    Action.ENTER_PEEK,
    # navigation
    Action.MOVE_DOWN,
    Action.MOVE_UP,
    Action.MOVE_RIGHT,
    Action.MOVE_LEFT,
    # peeking
    Action.PEEK_QUIT,
    Action.PEEK_ALL,
    Action.PEEK_CURRENT,
    Action.PEEK_UNDER,
)

_MODE_TRANSITIONS: dict[tuple[Mode, Action], Mode] = {
    (Mode.NORMAL, Action.ENTER_INSERT): Mode.INSERT,
    (Mode.INSERT, Action.ENTER_NORMAL): Mode.NORMAL,
    (Mode.NORMAL, Action.ENTER_PEEK): Mode.PEEKING,
    (Mode.PEEKING, Action.PEEK_QUIT): Mode.NORMAL,
}

_NAVIGATION = frozenset({Action.MOVE_DOWN, Action.MOVE_UP, Action.MOVE_RIGHT, Action.MOVE_LEFT})
_PEEKS = frozenset({Action.PEEK_ALL, Action.PEEK_CURRENT, Action.PEEK_UNDER})


@dataclass(slots=True, frozen=True)
class Continue:
    state: NavigationState


@dataclass(slots=True, frozen=True)
class Finish:
    value: Value


Outcome = Continue | Finish
StepResult = Result[Outcome, ContractViolation]


def action_for_key(key: str, bindings: KeyBindingsMap) -> Action | None:
    for action in ACTION_PRIORITY:
        if bindings.key_for(action) == key:
            return action
    return None


def duplicate_bindings(bindings: KeyBindingsMap) -> dict[str, list[Action]]:
    """Keys bound to more than one action, actions listed in priority order."""
    by_key: dict[str, list[Action]] = {}
    for action in ACTION_PRIORITY:
        by_key.setdefault(bindings.key_for(action), []).append(action)
    return {key: actions for key, actions in by_key.items() if len(actions) > 1}


def _navigate(state: NavigationState, action: Action, root: Value) -> StepResult:
    if action is Action.MOVE_LEFT:
        return Ok(Continue(ascend(state)))
    if action is Action.MOVE_RIGHT:
        moved = descend(state, root)
    else:
        direction = Direction.NEXT if action is Action.MOVE_DOWN else Direction.PREVIOUS
        moved = move_sibling(state, root, direction)
    if isinstance(moved, Err):
        return moved
    return Ok(Continue(moved.unwrap()))


def _peek(state: NavigationState, action: Action, root: Value) -> StepResult:
    if action is Action.PEEK_ALL:
        return Ok(Finish(copy.deepcopy(root)))
    path = state.focus_path
    if action is Action.PEEK_CURRENT:
        # Pops even when the focus is parked on a leaf.
        path = path[:-1]
    resolved = resolve(root, path)
    if isinstance(resolved, Err):
        return resolved
    return Ok(Finish(copy.deepcopy(resolved.unwrap())))


def apply_action(state: NavigationState, action: Action | None, root: Value) -> StepResult:
    """Apply *action* to *state*; inapplicable actions leave it unchanged."""
    if action is None:
        return Ok(Continue(state))
    if action is Action.QUIT:
        return Ok(Finish(NOTHING))

    target = _MODE_TRANSITIONS.get((state.mode, action))
    if target is not None:
        return Ok(Continue(replace(state, mode=target)))
    if action in _NAVIGATION and state.mode is Mode.NORMAL:
        return _navigate(state, action, root)
    if action in _PEEKS and state.mode is Mode.PEEKING:
        return _peek(state, action, root)
    return Ok(Continue(state))
