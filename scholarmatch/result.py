from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class OperationResult:
    """
    Tagged outcome of one operation invocation.

    Exactly one of ``value`` (success) or ``error`` (failure message) is
    meaningful. ``stale`` marks a result that completed after a newer
    invocation or a reset and was therefore not applied to state.
    """

    value: Any = None
    error: Optional[str] = None
    stale: bool = False

    def __post_init__(self):
        if self.error is not None and self.value is not None:
            raise ValueError("OperationResult cannot carry both a value and an error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any, stale: bool = False) -> "OperationResult":
        return cls(value=value, stale=stale)

    @classmethod
    def failure(cls, message: str, stale: bool = False) -> "OperationResult":
        return cls(error=message, stale=stale)
