"""
Classification helpers mapping statuses and exceptions onto the taxonomy.

Implements HTTP status extraction from arbitrary exceptions, the status to
variant mapping used by the HTTP layer, and normalization of foreign
exceptions (transport failures, SDK errors) into taxonomy errors so the
execution engine only ever has to inspect one contract.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Union

import httpx

from .error_codes import ErrorCodes
from .integration_error import IntegrationError
from .invalid_authentication_error import (
    INVALID_AUTHENTICATION_STATUS,
    InvalidAuthenticationError,
)
from .retryable_error import RetryableError
from .status_policy import RETRYABLE_STATUS_CODES, is_http_status, is_retryable_status

TIMEOUT_STATUS = 408
TRANSPORT_FAILURE_STATUS = 503


def extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if is_http_status(val):
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if is_http_status(sc):
            return sc
    return None


def error_for_status(
    status: int,
    message: str,
    code: Optional[Union[str, ErrorCodes]] = None,
) -> IntegrationError:
    """Build the taxonomy error describing a failed HTTP ``status``.

    - ``401`` becomes :class:`InvalidAuthenticationError`.
    - Allow-listed retryable statuses become :class:`RetryableError`.
    - Anything else stays a generic :class:`IntegrationError` carrying the
      status, so the default retry rule still applies to it.
    """
    if status == INVALID_AUTHENTICATION_STATUS:
        if code is None:
            return InvalidAuthenticationError(message)
        return InvalidAuthenticationError(message, code)
    if status in RETRYABLE_STATUS_CODES:
        return RetryableError(message, status)
    return IntegrationError(message, code or ErrorCodes.API_CALL_FAILED, status)


def is_retryable(exc: BaseException) -> bool:
    """Return whether ``exc`` should be retried automatically.

    Taxonomy errors answer from their variant and status. Foreign exceptions
    fall back to the status rule on whatever status they carry; without one
    they are not retried.
    """
    if isinstance(exc, IntegrationError):
        return exc.retryable
    return is_retryable_status(extract_status(exc))


def to_integration_error(exc: BaseException) -> IntegrationError:
    """Normalize any exception into a taxonomy error.

    Precedence:
        1. Taxonomy errors pass through unchanged.
        2. Timeouts (httpx, sync, async) become ``RetryableError(408)``.
        3. Other httpx transport failures become ``RetryableError(503)``.
        4. Exceptions carrying a 4xx/5xx status go through :func:`error_for_status`.
        5. Anything else becomes a status-less, non-retryable ``IntegrationError``.
    """
    if isinstance(exc, IntegrationError):
        return exc
    message = str(exc) or type(exc).__name__
    if isinstance(exc, (httpx.TimeoutException, TimeoutError, asyncio.TimeoutError)):
        return RetryableError(message, TIMEOUT_STATUS)
    if isinstance(exc, httpx.TransportError):
        return RetryableError(message, TRANSPORT_FAILURE_STATUS)
    status = extract_status(exc)
    if status is not None and status >= 400:
        return error_for_status(status, message)
    return IntegrationError(message)


__all__ = [
    "extract_status",
    "error_for_status",
    "is_retryable",
    "to_integration_error",
    "TIMEOUT_STATUS",
    "TRANSPORT_FAILURE_STATUS",
]
