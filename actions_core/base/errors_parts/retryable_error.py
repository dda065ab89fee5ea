"""
Transient failure that the execution engine may retry automatically.

Raising ``RetryableError`` halts the current attempt and tells the engine that
retrying with its own backoff is expected to succeed without user
intervention. The status must come from ``RETRYABLE_STATUS_CODES``; any other
value is normalized to ``500`` and a warning is logged, so a bad status never
reaches the engine and the original failure is still reported.

The warning goes to the shared ``actions`` logger, which does not propagate to
the root logger. Hosts must attach their own handlers to
``logging.getLogger("actions")`` to route it anywhere but the default stderr
handler.
"""
from __future__ import annotations

import logging
from typing import ClassVar

from ..logging import get_logger, log_event
from .error_codes import ErrorCodes
from .error_kind import ErrorKind
from .integration_error import IntegrationError
from .status_policy import (
    DEFAULT_RETRYABLE_STATUS,
    RETRYABLE_STATUS_CODES,
    is_http_status,
)

_logger = get_logger("actions.errors")


class RetryableError(IntegrationError):
    """Error that halts execution but allows the request to be retried.

    Attributes:
        status: One of ``RETRYABLE_STATUS_CODES`` (default ``500``).
        code: Always ``ErrorCodes.RETRYABLE_ERROR``.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.RETRYABLE

    def __init__(self, message: str = "", status: int = DEFAULT_RETRYABLE_STATUS) -> None:
        if not is_http_status(status) or status not in RETRYABLE_STATUS_CODES:
            log_event(
                _logger,
                "taxonomy.retryable_status_normalized",
                level=logging.WARNING,
                requested_status=repr(status),
                status=DEFAULT_RETRYABLE_STATUS,
            )
            status = DEFAULT_RETRYABLE_STATUS
        super().__init__(message, ErrorCodes.RETRYABLE_ERROR, status)

    @property
    def retryable(self) -> bool:
        return True


__all__ = ["RetryableError"]
