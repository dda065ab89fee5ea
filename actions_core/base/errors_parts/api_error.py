"""
Error for destination API calls that failed and must not be retried.

Most HTTP failures are classified by ``actions_core.base.http``. Raise this
from a destination that catches an HTTP failure itself and wants to surface a
better message or handle a special case.
"""
from __future__ import annotations

from typing import ClassVar

from .error_codes import ErrorCodes
from .error_kind import ErrorKind
from .integration_error import IntegrationError


class APIError(IntegrationError):
    """Destination API rejected the call. Status ``400``, never retried."""

    kind: ClassVar[ErrorKind] = ErrorKind.API_CALL

    def __init__(self, message: str = "") -> None:
        super().__init__(message, ErrorCodes.API_CALL_FAILED, 400)

    @property
    def retryable(self) -> bool:
        return False


APICallError = APIError

__all__ = ["APIError", "APICallError"]
