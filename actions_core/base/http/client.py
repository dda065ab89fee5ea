"""Shared HTTP client pool for destinations.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so destinations do not allocate a client per call. Timeouts
    derive exclusively from :func:`get_timeout_config`.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``. Purposes keep distinct
      pools (e.g. "taxonomy" vs "audience").
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      also call :func:`close_all_clients` explicitly.
    - :func:`register_client` installs a preconfigured client under a key,
      which is how tests route a destination through ``httpx.MockTransport``.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL set on the client so callers can use
            relative paths. ``None`` groups clients under a shared key.
        purpose: Short string discriminating separate pools. Keep stable to
            maximize reuse.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        cfg = get_timeout_config()
        timeout = httpx.Timeout(cfg.http_timeout_seconds, connect=cfg.connect_timeout_seconds)
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def register_client(base_url: Optional[str], purpose: str, client: httpx.Client) -> None:
    """Install ``client`` for ``(base_url, purpose)``, closing any previous one."""
    with _LOCK:
        previous = _CLIENTS.get((base_url, purpose))
        _CLIENTS[(base_url, purpose)] = client
    if previous is not None and previous is not client:
        previous.close()


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            # Teardown failures during shutdown are not actionable.
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "register_client", "close_all_clients"]
