from __future__ import annotations

from result import Err, Ok

from treepeek.config.defaults import default_config
from treepeek.models.enums import Mode
from treepeek.models.path import IndexMember, KeyMember, NavigationState
from treepeek.models.value import NOTHING
from treepeek.models.violation import ViolationCode
from treepeek.services.modes import Continue, Finish
from treepeek.services.session import Session


def _session(root) -> Session:
    return Session(root, default_config())


def _press(session: Session, keys: str) -> None:
    for key in keys:
        session.dispatch(key)


def test_list_scenario_wraps_after_last_item() -> None:
    session = _session([10, 20, 30])
    assert session.state.focus_path == (IndexMember(0),)
    positions = []
    for _ in range(3):
        session.dispatch("j")
        positions.append(session.state.focus_path[-1].position)
    assert positions == [1, 2, 0]


def test_descend_then_peek_under() -> None:
    session = _session({"a": [1, 2, 3], "b": "x"})
    _press(session, "lj")
    assert session.state.focus_path == (KeyMember("a"), IndexMember(1))

    assert isinstance(session.dispatch("p"), Continue)
    assert session.state.mode is Mode.PEEKING
    outcome = session.dispatch("u")
    assert outcome == Finish(2)
    assert session.finished
    assert session.result == Ok(2)


def test_peek_current_and_all() -> None:
    session = _session({"a": [1, 2, 3], "b": "x"})
    _press(session, "ljpc")
    assert session.result == Ok([1, 2, 3])

    session = _session({"a": [1, 2, 3], "b": "x"})
    _press(session, "ljpa")
    assert session.result == Ok({"a": [1, 2, 3], "b": "x"})


def test_peek_quit_returns_to_normal() -> None:
    session = _session([1, 2])
    session.dispatch("p")
    session.dispatch("escape")
    assert session.state.mode is Mode.NORMAL
    session.dispatch("j")
    assert session.state.focus_path == (IndexMember(1),)


def test_insert_mode_blocks_navigation() -> None:
    session = _session([1, 2, 3])
    _press(session, "i")
    assert session.state.mode is Mode.INSERT
    _press(session, "jjlk")
    assert session.state == NavigationState(focus_path=(IndexMember(0),), mode=Mode.INSERT)
    _press(session, "nj")
    assert session.state.mode is Mode.NORMAL
    assert session.state.focus_path == (IndexMember(1),)


def test_quit_returns_nothing_from_any_mode() -> None:
    session = _session([1])
    _press(session, "pq")
    assert session.result == Ok(NOTHING)


def test_unknown_keys_are_dropped() -> None:
    session = _session([1, 2])
    before = session.state
    for key in ("z", "enter", "ctrl+x"):
        assert isinstance(session.dispatch(key), Continue)
    assert session.state == before
    assert not session.finished


def test_leaf_root_session() -> None:
    session = _session("hello")
    _press(session, "jhl")
    assert session.state.focus_path == ()
    assert session.state.at_leaf
    _press(session, "pu")
    assert session.result == Ok("hello")


def test_dispatch_after_finish_is_ignored() -> None:
    session = _session([1])
    _press(session, "q")
    assert session.dispatch("j") is None
    assert session.result == Ok(NOTHING)


def test_contract_violation_ends_session() -> None:
    session = _session({"a": 1})
    session.state = NavigationState(focus_path=(KeyMember("vanished"),))
    assert session.dispatch("j") is None
    assert isinstance(session.result, Err)
    assert session.result.unwrap_err().code is ViolationCode.MISSING_KEY


def test_normal_navigation_never_violates_contracts() -> None:
    doc = {
        "users": [{"name": "ada", "tags": []}, {"name": "bob", "tags": ["x", "y"]}],
        "meta": {},
        "count": 2,
    }
    session = _session(doc)
    for key in "ljljlljkkhhjjhlllkjhhhhjlhjjjlll" * 3:
        session.dispatch(key)
        assert not session.finished
