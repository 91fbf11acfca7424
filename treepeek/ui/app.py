from __future__ import annotations

from typing import override

from result import Ok, Result
from textual.app import App, ComposeResult
from textual.containers import Container, VerticalScroll
from textual.widgets import Static

from treepeek.config.schema import AppConfig
from treepeek.models.value import NOTHING, Value
from treepeek.models.violation import ContractViolation
from treepeek.services.session import Session
from treepeek.ui.render import render_status, render_view

ExploreResult = Result[Value, ContractViolation]


class SessionError(RuntimeError):
    """The UI stopped on an unhandled error; textual has already restored the terminal."""


class ExploreApp(App[ExploreResult]):
    CSS = """
    #app-grid {
        height: 100%;
        padding: 0 1;
        background: #1d1f21;
        color: #c5c8c6;
    }
    #view-scroll {
        height: 1fr;
    }
    #separator {
        height: 1;
        color: #373b41;
    }
    #status-row {
        height: 1;
    }
    """

    def __init__(self, root: Value, config: AppConfig) -> None:
        super().__init__()
        self.config = config
        self.session = Session(root, config)

    @override
    def compose(self) -> ComposeResult:
        yield Container(
            VerticalScroll(Static(id="view"), id="view-scroll"),
            Static("─" * 200, id="separator"),
            Static(id="status-row"),
            id="app-grid",
        )

    def on_mount(self) -> None:
        self._refresh_all()

    def on_resize(self) -> None:
        self._refresh_all()

    def _refresh_all(self) -> None:
        state = self.session.state
        width = max(20, self.size.width - 20)
        self.query_one("#view", Static).update(render_view(self.session.root, state, self.config, width))
        self.query_one("#status-row", Static).update(render_status(state, self.config))

    @override
    def on_key(self, event) -> None:  # type: ignore[override]
        self.session.dispatch(event.key)
        if self.session.result is not None:
            event.stop()
            self.exit(self.session.result)
            return
        self._refresh_all()


def explore(root: Value, config: AppConfig, headless: bool = False) -> ExploreResult:
    """Browse *root* in the terminal and return the peeked value.

    Quitting, or closing the app through textual's own bindings, yields
    ``NOTHING``. Terminal state is restored by textual on every exit path;
    a crash inside the app is raised as ``SessionError`` afterwards.
    """
    app = ExploreApp(root, config)
    result = app.run(headless=headless)
    if app.return_code:
        raise SessionError(f"Session ended with exit code {app.return_code}")
    if result is None:
        return Ok(NOTHING)
    return result
