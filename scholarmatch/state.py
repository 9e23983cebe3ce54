"""
Global application state.

ApplicationState is immutable and only changes through ``reducer``. The
Store is built once by the application root and handed to whoever needs
it; there is no module-level singleton.
"""

import itertools
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from .logger import StructuredLogger, get_logger


class ActionType(str, Enum):
    REPLACE_RESUME = "replace_resume"
    REPLACE_PROFILE = "replace_profile"
    REPLACE_SUGGESTIONS = "replace_suggestions"
    SET_ERROR = "set_error"
    CLEAR_ERROR = "clear_error"


class Slot(str, Enum):
    RESUME = "resume"
    PROFILE = "profile"
    SUGGESTIONS = "suggestions"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None


@dataclass(frozen=True)
class ApplicationState:
    resume_record: Optional[Dict[str, Any]] = None
    profile_record: Optional[Dict[str, Any]] = None
    suggestion_list: Tuple[Dict[str, Any], ...] = ()
    last_error: Optional[str] = None


def replace_resume(record: Dict[str, Any]) -> Action:
    return Action(ActionType.REPLACE_RESUME, record)


def replace_profile(record: Dict[str, Any]) -> Action:
    return Action(ActionType.REPLACE_PROFILE, record)


def replace_suggestions(records: List[Dict[str, Any]]) -> Action:
    return Action(ActionType.REPLACE_SUGGESTIONS, tuple(records))


def set_error(message: str) -> Action:
    return Action(ActionType.SET_ERROR, message)


def clear_error() -> Action:
    return Action(ActionType.CLEAR_ERROR)


def reducer(state: ApplicationState, action: Action) -> ApplicationState:
    """Pure transition function; each action replaces exactly one field."""
    if action.type == ActionType.REPLACE_RESUME:
        return replace(state, resume_record=action.payload)
    if action.type == ActionType.REPLACE_PROFILE:
        return replace(state, profile_record=action.payload)
    if action.type == ActionType.REPLACE_SUGGESTIONS:
        return replace(state, suggestion_list=tuple(action.payload))
    if action.type == ActionType.SET_ERROR:
        return replace(state, last_error=action.payload)
    if action.type == ActionType.CLEAR_ERROR:
        return replace(state, last_error=None)
    return state


Listener = Callable[[ApplicationState, Action], None]


class Store:
    """
    Holds the current ApplicationState and applies dispatched actions.

    Per-slot request tokens let callers discard out-of-order completions:
    take a token with ``issue_token`` before starting a call, then apply the
    result with ``dispatch_if_latest``.
    """

    def __init__(
        self,
        initial: Optional[ApplicationState] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self._state = initial or ApplicationState()
        self.logger = logger or get_logger()
        self._listeners: List[Listener] = []
        self._tokens = itertools.count(1)
        self._latest: Dict[Slot, int] = {}

    @property
    def state(self) -> ApplicationState:
        return self._state

    def dispatch(self, action: Action) -> ApplicationState:
        self._state = reducer(self._state, action)
        self.logger.debug("Action dispatched", action=action.type.value)
        for listener in list(self._listeners):
            listener(self._state, action)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def issue_token(self, slot: Slot) -> int:
        token = next(self._tokens)
        self._latest[slot] = token
        return token

    def dispatch_if_latest(self, slot: Slot, token: int, action: Action) -> bool:
        """Dispatch only if ``token`` is still the newest for ``slot``."""
        if self._latest.get(slot) != token:
            self.logger.debug("Stale result discarded", slot=slot.value, token=token)
            return False
        self.dispatch(action)
        return True
