"""
HTTP status retry policy.

Encodes the default classification rule shared by every taxonomy variant and by
the execution engine when it interprets raw transport statuses:

- 4xx are not retried, except 408 (timeout), 423 (locked) and 429 (rate limited).
- 5xx are retried, except 501 (not implemented).
- An absent status is not retried; callers opt in with ``RetryableError``.
"""
from __future__ import annotations

from typing import FrozenSet, Optional

MIN_HTTP_STATUS = 100
MAX_HTTP_STATUS = 599

RETRYABLE_CLIENT_STATUSES: FrozenSet[int] = frozenset({408, 423, 429})
NON_RETRYABLE_SERVER_STATUSES: FrozenSet[int] = frozenset({501})

# Statuses a RetryableError may carry.
RETRYABLE_STATUS_CODES: FrozenSet[int] = frozenset(
    {408, 423, 429, 500, *range(502, 512), 598, 599}
)
DEFAULT_RETRYABLE_STATUS = 500


def is_http_status(value: object) -> bool:
    """Return True for an ``int`` (not ``bool``) inside the HTTP status range."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_HTTP_STATUS <= value <= MAX_HTTP_STATUS
    )


def is_retryable_status(status: Optional[int]) -> bool:
    """Apply the default retry rule to ``status``.

    Statuses outside 4xx/5xx (including ``None``) are never retried.
    """
    if not is_http_status(status):
        return False
    if 400 <= status < 500:
        return status in RETRYABLE_CLIENT_STATUSES
    if 500 <= status < 600:
        return status not in NON_RETRYABLE_SERVER_STATUSES
    return False


def validate_status(status: object) -> Optional[int]:
    """Return ``status`` unchanged when absent or a valid HTTP status.

    Raises:
        TypeError: ``status`` is not an integer.
        ValueError: ``status`` is outside 100-599.
    """
    if status is None:
        return None
    if not isinstance(status, int) or isinstance(status, bool):
        raise TypeError(f"status must be an int, got {type(status).__name__}")
    if not MIN_HTTP_STATUS <= status <= MAX_HTTP_STATUS:
        raise ValueError(f"status {status} is not a valid HTTP status code")
    return status


__all__ = [
    "RETRYABLE_STATUS_CODES",
    "RETRYABLE_CLIENT_STATUSES",
    "NON_RETRYABLE_SERVER_STATUSES",
    "DEFAULT_RETRYABLE_STATUS",
    "is_http_status",
    "is_retryable_status",
    "validate_status",
]
