"""
Generic integration error and the structural contract shared by all variants.

Every taxonomy error exposes ``message``, ``code``, ``status`` and a derived
``retryable`` flag. Fields are read-only once constructed; retryability is
computed from the variant and status so it can never drift from them.
"""
from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional, Union

from .error_codes import ErrorCodes
from .error_kind import ErrorKind
from .status_policy import is_retryable_status, validate_status


def _normalize_code(code: Optional[Union[str, ErrorCodes]]) -> Optional[str]:
    """Store codes as plain strings so registered and minted codes compare alike."""
    if code is None:
        return None
    if isinstance(code, ErrorCodes):
        return code.value
    if not isinstance(code, str):
        raise TypeError(f"code must be a str, got {type(code).__name__}")
    return code


class IntegrationError(Exception):
    """Error due to a misconfiguration or an otherwise unspecified failure.

    Should include a user-friendly message, and optionally a code and an HTTP
    status. Retry behaviour follows the status rule:

    - 4xx are not retried automatically, except 408, 423 and 429.
    - 5xx are retried automatically, except 501.
    - No status means no automatic retry.

    Attributes:
        message: Human-friendly message surfaced to the operator.
        code: Machine-readable reason, ideally an :class:`ErrorCodes` value.
        status: Optional HTTP status (e.g. ``400``).
        kind: Variant tag for exhaustive dispatch.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.GENERIC
    __match_args__ = ("message", "code", "status")

    def __init__(
        self,
        message: str = "",
        code: Optional[Union[str, ErrorCodes]] = None,
        status: Optional[int] = None,
    ) -> None:
        if not isinstance(message, str):
            raise TypeError(f"message must be a str, got {type(message).__name__}")
        super().__init__(message)
        self._message = message
        self._code = _normalize_code(code)
        self._status = validate_status(status)

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> Optional[str]:
        return self._code

    @property
    def status(self) -> Optional[int]:
        return self._status

    @property
    def retryable(self) -> bool:
        """Whether the execution engine should retry without user intervention."""
        return is_retryable_status(self._status)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly view for log sinks and analytics."""
        return {
            "kind": self.kind.value,
            "message": self._message,
            "code": self._code,
            "status": self._status,
            "retryable": self.retryable,
        }

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self._message!r}, "
            f"code={self._code!r}, status={self._status!r})"
        )


__all__ = ["IntegrationError"]
