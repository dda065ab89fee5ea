"""
Well-known machine-readable error codes.

Defines the `ErrorCodes` enumeration shared across destinations. Values equal
their member names and are a stable public contract for log aggregation and
analytics. The registry is open: error ``code`` fields accept any string, so a
destination may mint its own code when none of these fits.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class ErrorCodes(str, Enum):
    """Standard error codes. Use one of these whenever possible."""

    # Invalid API key or access token
    INVALID_AUTHENTICATION = "INVALID_AUTHENTICATION"
    # Payload is missing a field or has an invalid value
    PAYLOAD_VALIDATION_FAILED = "PAYLOAD_VALIDATION_FAILED"
    # Currency code is not in ISO format
    INVALID_CURRENCY_CODE = "INVALID_CURRENCY_CODE"
    # Generic retryable error
    RETRYABLE_ERROR = "RETRYABLE_ERROR"
    # Refresh token has expired
    REFRESH_TOKEN_EXPIRED = "REFRESH_TOKEN_EXPIRED"
    # OAuth refresh failed
    OAUTH_REFRESH_FAILED = "OAUTH_REFRESH_FAILED"
    # Destination API call failed
    API_CALL_FAILED = "API_CALL_FAILED"


def is_well_known_code(code: Optional[Union[str, ErrorCodes]]) -> bool:
    """Return True when ``code`` matches a registered :class:`ErrorCodes` value."""
    if code is None:
        return False
    value = code.value if isinstance(code, ErrorCodes) else code
    return value in ErrorCodes._value2member_map_


__all__ = ["ErrorCodes", "is_well_known_code"]
