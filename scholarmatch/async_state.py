"""
Async state container.

Wraps one operation contract and exposes its lifecycle as
``{data, loading, error}``. Every ``execute`` call gets a request token;
a completion whose token is no longer the latest (a newer ``execute`` or a
``reset`` happened meanwhile) is returned to its caller but never written
to state.
"""

import itertools
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Optional

from .errors import OperationError
from .logger import StructuredLogger, get_logger
from .result import OperationResult

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


@dataclass(frozen=True)
class AsyncState:
    data: Any = None
    loading: bool = False
    error: Optional[str] = None


class AsyncStateContainer:
    """
    Lifecycle wrapper for one operation.

    Args:
        operation: Coroutine function implementing the operation contract
        name: Operation name used for logging and metrics
        logger: StructuredLogger (defaults to the global logger)
        on_change: Optional callback receiving each new AsyncState

    No de-duplication, cancellation, retry or timeout is performed. A hung
    operation leaves the container loading until it completes.
    """

    def __init__(
        self,
        operation: Callable[..., Awaitable[Any]],
        name: Optional[str] = None,
        logger: Optional[StructuredLogger] = None,
        on_change: Optional[Callable[[AsyncState], None]] = None,
    ):
        self.operation = operation
        self.name = name or getattr(operation, "__name__", "operation")
        self.logger = logger or get_logger()
        self.on_change = on_change
        self._state = AsyncState()
        self._tokens = itertools.count(1)
        self._latest = 0

    @property
    def state(self) -> AsyncState:
        return self._state

    @property
    def data(self) -> Any:
        return self._state.data

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    def _set(self, state: AsyncState) -> None:
        self._state = state
        if self.on_change:
            self.on_change(state)

    def _issue_token(self) -> int:
        self._latest = next(self._tokens)
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest

    async def execute(self, *args, **kwargs) -> OperationResult:
        """Run the operation; never raises for operation failures."""
        token = self._issue_token()
        self._set(replace(self._state, loading=True, error=None))
        self.logger.record_operation_attempt(self.name)

        try:
            value = await self.operation(*args, **kwargs)
        except OperationError as e:
            message = e.message
            self.logger.record_operation_failure(self.name, type(e).__name__)
            self.logger.warning(f"{self.name} failed", error=message, status=e.status)
        except Exception as e:
            message = UNEXPECTED_ERROR_MESSAGE
            self.logger.record_operation_failure(self.name, type(e).__name__)
            self.logger.exception(f"{self.name} raised an unexpected error")
        else:
            self.logger.record_operation_success(self.name)
            if not self.is_current(token):
                self.logger.debug(f"{self.name} result discarded as stale", token=token)
                return OperationResult.success(value, stale=True)
            self._set(AsyncState(data=value, loading=False, error=None))
            return OperationResult.success(value)

        if not self.is_current(token):
            self.logger.debug(f"{self.name} failure discarded as stale", token=token)
            return OperationResult.failure(message, stale=True)
        self._set(replace(self._state, loading=False, error=message))
        return OperationResult.failure(message)

    def reset(self) -> None:
        """Return to the empty state; in-flight calls become stale."""
        self._issue_token()
        self._set(AsyncState())
