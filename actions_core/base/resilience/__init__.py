"""Error propagation helpers shared by destinations."""

from .error_handling import log_integration_error, with_error_handling

__all__ = ["log_integration_error", "with_error_handling"]
