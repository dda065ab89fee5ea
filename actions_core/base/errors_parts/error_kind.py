"""Variant tag carried by every taxonomy error."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of taxonomy variants, one per concrete error class."""

    GENERIC = "generic"
    RETRYABLE = "retryable"
    INVALID_AUTHENTICATION = "invalid_authentication"
    PAYLOAD_VALIDATION = "payload_validation"
    API_CALL = "api_call"


__all__ = ["ErrorKind"]
