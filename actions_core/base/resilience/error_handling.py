"""
Propagate destination failures as taxonomy errors.

Destinations decorate their operations with :func:`with_error_handling` so the
execution engine only ever receives :class:`IntegrationError` values. Taxonomy
errors pass through untouched; anything else is normalized with
``to_integration_error`` and chained to the original exception. Nothing is
swallowed: every failure is logged and re-raised.
"""
from __future__ import annotations

import functools
import logging
from typing import Callable, Optional, TypeVar

from ..errors import IntegrationError, to_integration_error
from ..logging import LogContext, get_logger, log_event

T = TypeVar("T")

_logger = get_logger("actions.destination")


def log_integration_error(
    logger: logging.Logger,
    error: IntegrationError,
    ctx: LogContext | None = None,
) -> None:
    """Emit a ``destination.error`` event describing ``error``.

    Retryable errors log at WARNING since the engine is expected to recover;
    everything else logs at ERROR.
    """
    log_event(
        logger,
        "destination.error",
        ctx,
        level=logging.WARNING if error.retryable else logging.ERROR,
        keep_none=True,
        error_kind=error.kind.value,
        error_code=error.code,
        status=error.status,
        retryable=error.retryable,
        message=error.message,
    )


def with_error_handling(
    destination: str,
    action: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Return a decorator normalizing and logging failures of a destination action."""

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        ctx = LogContext(destination=destination, action=action or func.__name__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except IntegrationError as e:
                log_integration_error(logger or _logger, e, ctx)
                raise
            except Exception as e:
                error = to_integration_error(e)
                log_integration_error(logger or _logger, error, ctx)
                raise error from e

        return wrapper

    return decorator


__all__ = ["log_integration_error", "with_error_handling"]
