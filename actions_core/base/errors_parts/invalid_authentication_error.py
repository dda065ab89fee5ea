"""
Error for credentials that are no longer valid.

Covers expired or revoked tokens and API keys, and any other case where stored
credentials stop working. The user must fix their credentials; the engine must
not retry automatically.
"""
from __future__ import annotations

from typing import ClassVar, Union

from .error_codes import ErrorCodes
from .error_kind import ErrorKind
from .integration_error import IntegrationError

INVALID_AUTHENTICATION_STATUS = 401


class InvalidAuthenticationError(IntegrationError):
    """Authentication was rejected. Status is always ``401``."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_AUTHENTICATION

    def __init__(
        self,
        message: str = "",
        code: Union[str, ErrorCodes] = ErrorCodes.INVALID_AUTHENTICATION,
    ) -> None:
        super().__init__(message, code, INVALID_AUTHENTICATION_STATUS)

    @property
    def retryable(self) -> bool:
        return False


__all__ = ["InvalidAuthenticationError", "INVALID_AUTHENTICATION_STATUS"]
