from __future__ import annotations

import structlog
from result import Err, Ok, Result

from treepeek.config.schema import AppConfig
from treepeek.models.path import NavigationState, format_cell_path
from treepeek.models.value import Value
from treepeek.models.violation import ContractViolation
from treepeek.services.modes import Finish, Outcome, action_for_key, apply_action
from treepeek.services.navigator import initial_state

logger = structlog.get_logger(__name__)


class Session:
    """Owns the navigation state of one browsing session over *root*."""

    def __init__(self, root: Value, config: AppConfig) -> None:
        self.root = root
        self.config = config
        self.state: NavigationState = initial_state(root)
        self.result: Result[Value, ContractViolation] | None = None

    @property
    def finished(self) -> bool:
        return self.result is not None

    def dispatch(self, key: str) -> Outcome | None:
        """Handle one key.

        Returns ``None`` once the session has ended (including on a contract
        violation, which is recorded in ``result``).
        """
        if self.result is not None:
            return None

        action = action_for_key(key, self.config.keybindings)
        step = apply_action(self.state, action, self.root)
        if isinstance(step, Err):
            violation = step.unwrap_err()
            logger.error(
                "contract violation",
                code=violation.code.value,
                path=violation.path,
                container=violation.container_kind.value,
                detail=violation.message,
            )
            self.result = Err(violation)
            return None

        outcome = step.unwrap()
        if isinstance(outcome, Finish):
            logger.debug("session finished", key=key, action=action.value if action else None)
            self.result = Ok(outcome.value)
            return outcome

        if action is not None:
            logger.debug(
                "dispatched",
                key=key,
                action=action.value,
                mode=str(outcome.state.mode),
                path=format_cell_path(outcome.state.focus_path),
                at_leaf=outcome.state.at_leaf,
            )
        self.state = outcome.state
        return outcome
