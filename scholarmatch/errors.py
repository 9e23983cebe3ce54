"""
Error taxonomy for operation contracts.

Every failure an operation can raise derives from OperationError so the
async state container can turn it into a user-facing message. The
subclasses let callers that need it tell the three failure modes apart.
"""

from typing import Optional


class OperationError(Exception):
    """Base class for failures raised by operation contracts."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
    ):
        self.message = message
        self.status = status
        self.code = code
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"status={self.status!r}, code={self.code!r})"
        )


class ValidationError(OperationError):
    """Input was rejected locally, before any external call was attempted."""


class TransportError(OperationError):
    """The call could not complete (network down, timeout, 5xx)."""


class DomainError(OperationError):
    """The call completed but the service reported a logical failure."""
