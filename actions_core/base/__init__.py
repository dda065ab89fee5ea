"""
Actions Base Package

Exports destination-agnostic contracts for use by destination plugins and by
the host execution engine:
- Errors: the integration error taxonomy and retry classification
- Interfaces: normalized destination boundaries
- DTOs: validated request/response objects
"""

from .errors import (
    APICallError,
    APIError,
    ErrorCodes,
    ErrorKind,
    IntegrationError,
    InvalidAuthenticationError,
    PayloadValidationError,
    RETRYABLE_STATUS_CODES,
    RetryableError,
    is_retryable,
    is_retryable_status,
    to_integration_error,
)
from .interfaces import AudienceDestination
from .dto import CreateAudienceRequest, CreateAudienceResult

__all__ = [
    "APICallError",
    "APIError",
    "ErrorCodes",
    "ErrorKind",
    "IntegrationError",
    "InvalidAuthenticationError",
    "PayloadValidationError",
    "RETRYABLE_STATUS_CODES",
    "RetryableError",
    "is_retryable",
    "is_retryable_status",
    "to_integration_error",
    "AudienceDestination",
    "CreateAudienceRequest",
    "CreateAudienceResult",
]
