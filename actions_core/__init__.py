"""actions_core package

Integration error taxonomy and retry classification for destination plugins.

Purpose:
    Let a destination author state precisely why an operation failed and
    whether the host execution engine should retry it, without knowing the
    engine or the transport. The engine inspects ``status``, ``code`` and the
    derived ``retryable`` flag of the raised error and applies its own policy.

Public API (re-exported):
    - Version: ``__version__``
    - Errors: :class:`IntegrationError`, :class:`RetryableError`,
      :class:`InvalidAuthenticationError`, :class:`PayloadValidationError`,
      :class:`APIError` (alias ``APICallError``)
    - Registry and tags: :class:`ErrorCodes`, :class:`ErrorKind`
    - Classification: ``RETRYABLE_STATUS_CODES``, :func:`is_retryable_status`,
      :func:`is_retryable`, :func:`to_integration_error`
"""

from .base.errors import (
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
    is_well_known_code,
    to_integration_error,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
    "is_well_known_code",
    "to_integration_error",
]
