"""actions_core.config.env
=======================

Centralized environment variable mapping for destination credentials.

Purpose
-------
- Single source of truth mapping ``(destination, field)`` to the environment
  variable that holds it. Destination-owned secrets (for example Yahoo's
  taxonomy OAuth client) are provisioned by the host, not by the user.
- Small helpers to resolve those values consistently.

Failure Modes
-------------
Helpers return ``None`` for unknown destinations or unset variables; the
destination decides whether that is an ``InvalidAuthenticationError``.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

ENV_PREFIX = "ACTIONS"

# (destination, field) -> env var name
ENV_MAP: Dict[Tuple[str, str], str] = {
    ("yahoo_audiences", "taxonomy_client_id"): "ACTIONS_YAHOO_AUDIENCES_TAXONOMY_CLIENT_ID",
    ("yahoo_audiences", "taxonomy_client_secret"): "ACTIONS_YAHOO_AUDIENCES_TAXONOMY_CLIENT_SECRET",  # pragma: allowlist secret - env var name
}


def get_env_var_name(destination: str, field: str) -> str:
    """Return the environment variable name for a destination field.

    Registered names come from ``ENV_MAP``; anything else follows the
    ``ACTIONS_<DESTINATION>_<FIELD>`` convention.
    """
    key = ((destination or "").lower().strip(), (field or "").lower().strip())
    if key in ENV_MAP:
        return ENV_MAP[key]
    return "_".join([ENV_PREFIX, key[0].upper(), key[1].upper()])


def resolve_destination_credential(destination: str, field: str) -> Optional[str]:
    """Return the env value for a destination field, or ``None`` when unset or blank."""
    val = os.environ.get(get_env_var_name(destination, field))
    if not val or not val.strip():
        return None
    return val


__all__ = [
    "ENV_MAP",
    "ENV_PREFIX",
    "get_env_var_name",
    "resolve_destination_credential",
]
