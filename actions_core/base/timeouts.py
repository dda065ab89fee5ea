"""Timeout configuration for destination HTTP calls.

``get_timeout_config()`` returns a process-cached :class:`TimeoutConfig`,
parsing environment overrides on first use and again only when they change.
Supported environment variables (all optional):

    ACTIONS_TIMEOUT_HTTP_SECONDS
    ACTIONS_TIMEOUT_CONNECT_SECONDS

Timeout enforcement belongs to the execution engine; this module only
supplies the values handed to ``httpx``.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

HTTP_TIMEOUT_ENV = "ACTIONS_TIMEOUT_HTTP_SECONDS"
CONNECT_TIMEOUT_ENV = "ACTIONS_TIMEOUT_CONNECT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Baseline timeout for a whole destination request.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join([os.getenv(HTTP_TIMEOUT_ENV, ""), os.getenv(CONNECT_TIMEOUT_ENV, "")])
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, 30.0),
        connect_timeout_seconds=_parse_env_float(CONNECT_TIMEOUT_ENV, 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
