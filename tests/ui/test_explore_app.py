from __future__ import annotations

import asyncio

import pytest
from result import Err, Ok

from treepeek.config.defaults import default_config
from treepeek.models.enums import Mode
from treepeek.models.path import IndexMember, KeyMember, NavigationState
from treepeek.models.value import NOTHING
from treepeek.ui import app as ui_app
from treepeek.ui.app import ExploreApp, SessionError, explore


def _drive(root, *keys: str) -> ExploreApp:
    app = ExploreApp(root, default_config())

    async def _run() -> None:
        async with app.run_test() as pilot:
            for key in keys:
                await pilot.press(key)

    asyncio.run(_run())
    return app


def test_peek_under_exits_with_value() -> None:
    app = _drive({"a": [1, 2, 3], "b": "x"}, "l", "j", "p", "u")
    assert app.return_value == Ok(2)


def test_quit_exits_with_nothing() -> None:
    app = _drive([1, 2], "j", "q")
    assert app.return_value == Ok(NOTHING)


def test_navigation_updates_session_state() -> None:
    app = _drive([10, 20, 30], "j", "j", "j", "i", "j")
    assert app.session.state == NavigationState(focus_path=(IndexMember(0),), mode=Mode.INSERT)
    assert app.return_value is None


def test_contract_violation_exits_with_error() -> None:
    app = ExploreApp({"a": 1}, default_config())

    async def _run() -> None:
        async with app.run_test() as pilot:
            app.session.state = NavigationState(focus_path=(KeyMember("gone"),))
            await pilot.press("j")

    asyncio.run(_run())
    assert isinstance(app.return_value, Err)


def test_crash_inside_app_raises_session_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_render(*args, **kwargs):
        raise OSError("terminal went away")

    monkeypatch.setattr(ui_app, "render_view", broken_render)

    with pytest.raises(SessionError):
        explore([1, 2, 3], default_config(), headless=True)
