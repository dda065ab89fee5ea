"""
Translate failed HTTP responses into taxonomy errors.

This is the generic HTTP-handling layer: destinations call
:func:`raise_for_integration_status` after each request and only reach for
``APIError`` when they need a custom message for a specific failure.
"""
from __future__ import annotations

from typing import Optional

import httpx

from ..errors import error_for_status

_MAX_DETAIL_CHARS = 500


def _response_detail(response: httpx.Response) -> Optional[str]:
    """Best-effort human detail from a JSON or text error body."""
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:_MAX_DETAIL_CHARS] or None
    if isinstance(body, dict):
        for key in ("message", "error_description", "error", "detail"):
            val = body.get(key)
            if isinstance(val, str) and val:
                return val
            if isinstance(val, dict) and isinstance(val.get("message"), str):
                return val["message"]
    return None


def raise_for_integration_status(response: httpx.Response, *, operation: str = "request") -> None:
    """Raise the taxonomy error for a 4xx/5xx ``response``; otherwise return.

    The message names the operation, the status and reason phrase, and any
    detail found in the body, e.g. ``"create audience failed: 404 Not Found"``.
    """
    status = response.status_code
    if status < 400:
        return
    message = f"{operation} failed: {status} {response.reason_phrase}".rstrip()
    detail = _response_detail(response)
    if detail:
        message = f"{message} ({detail})"
    raise error_for_status(status, message)


__all__ = ["raise_for_integration_status"]
