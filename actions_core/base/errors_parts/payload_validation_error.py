"""Error for payloads that are missing required fields or carry invalid values."""
from __future__ import annotations

from typing import ClassVar

from .error_codes import ErrorCodes
from .error_kind import ErrorKind
from .integration_error import IntegrationError


class PayloadValidationError(IntegrationError):
    """The payload failed validation; the user has to fix it. Never retried."""

    kind: ClassVar[ErrorKind] = ErrorKind.PAYLOAD_VALIDATION

    def __init__(self, message: str = "") -> None:
        super().__init__(message, ErrorCodes.PAYLOAD_VALIDATION_FAILED, 400)

    @property
    def retryable(self) -> bool:
        return False


__all__ = ["PayloadValidationError"]
