"""Errors parts package public surface.

Re-exports individual taxonomy components for optional direct imports.
Prefer importing from `actions_core.base.errors` for the stable surface.
"""

from .error_codes import ErrorCodes, is_well_known_code
from .error_kind import ErrorKind
from .integration_error import IntegrationError
from .retryable_error import RetryableError
from .invalid_authentication_error import InvalidAuthenticationError
from .payload_validation_error import PayloadValidationError
from .api_error import APIError, APICallError
from .status_policy import RETRYABLE_STATUS_CODES, is_retryable_status
from .classification import (
    error_for_status,
    extract_status,
    is_retryable,
    to_integration_error,
)

__all__ = [
    "ErrorCodes",
    "ErrorKind",
    "IntegrationError",
    "RetryableError",
    "InvalidAuthenticationError",
    "PayloadValidationError",
    "APIError",
    "APICallError",
    "RETRYABLE_STATUS_CODES",
    "is_retryable_status",
    "is_well_known_code",
    "error_for_status",
    "extract_status",
    "is_retryable",
    "to_integration_error",
]
