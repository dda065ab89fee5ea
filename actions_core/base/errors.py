"""Integration error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``actions_core.base.errors_parts`` to maintain a stable import path while
keeping each variant in its own module.
"""

from .errors_parts import (
    APICallError,
    APIError,
    ErrorCodes,
    ErrorKind,
    IntegrationError,
    InvalidAuthenticationError,
    PayloadValidationError,
    RETRYABLE_STATUS_CODES,
    RetryableError,
    error_for_status,
    extract_status,
    is_retryable,
    is_retryable_status,
    is_well_known_code,
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
