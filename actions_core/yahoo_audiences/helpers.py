"""Yahoo Audiences helper functions.

Purpose:
- Validate the settings ``create_audience`` requires.
- Resolve the host-provisioned taxonomy OAuth client.
- Sign taxonomy requests (OAuth 1.0a, HMAC-SHA1, two-legged).
- Build the multipart taxonomy payload.

All failures are raised as taxonomy errors with user-facing messages.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Tuple

from oauthlib import oauth1

from ..base.dto import CreateAudienceRequest
from ..base.errors import IntegrationError, InvalidAuthenticationError
from ..config.env import resolve_destination_credential

DESTINATION_NAME = "yahoo_audiences"
# Destination-specific code; no registered ErrorCodes member covers it.
MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"


def _setting(values: Mapping[str, Any], key: str) -> str:
    val = values.get(key)
    return val.strip() if isinstance(val, str) else ""


def require_audience_settings(request: CreateAudienceRequest) -> Tuple[str, str, str]:
    """Return ``(audience_id, audience_key, engage_space_id)`` or raise.

    Raises:
        IntegrationError: A required value is blank (status 400).
    """
    audience_id = _setting(request.audience_settings, "audience_id")
    audience_key = _setting(request.audience_settings, "audience_key")
    engage_space_id = _setting(request.settings, "engage_space_id")
    if not audience_id:
        raise IntegrationError("Create Audience: missing audience Id value", MISSING_REQUIRED_FIELD, 400)
    if not audience_key:
        raise IntegrationError("Create Audience: missing audience key value", MISSING_REQUIRED_FIELD, 400)
    if not engage_space_id:
        raise IntegrationError("Create Audience: missing Engage space Id value", MISSING_REQUIRED_FIELD, 400)
    return audience_id, audience_key, engage_space_id


def resolve_taxonomy_credentials() -> Tuple[str, str]:
    """Return the taxonomy ``(client_id, client_secret)`` from the environment.

    Raises:
        InvalidAuthenticationError: Either value is missing.
    """
    client_id = resolve_destination_credential(DESTINATION_NAME, "taxonomy_client_id")
    client_secret = resolve_destination_credential(DESTINATION_NAME, "taxonomy_client_secret")
    if not client_id or not client_secret:
        raise InvalidAuthenticationError("Yahoo taxonomy API client credentials are not configured")
    return client_id, client_secret


def oauth1_header(
    method: str,
    url: str,
    client_id: str,
    client_secret: str,
    *,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> str:
    """Build a two-legged OAuth 1.0a ``Authorization`` header (HMAC-SHA1).

    ``nonce`` and ``timestamp`` are injectable so signatures are reproducible;
    oauthlib generates them when omitted.
    """
    client = oauth1.Client(
        client_id,
        client_secret=client_secret,
        signature_method=oauth1.SIGNATURE_HMAC_SHA1,
        signature_type=oauth1.SIGNATURE_TYPE_AUTH_HEADER,
        nonce=nonce,
        timestamp=str(timestamp) if timestamp is not None else None,
    )
    _, headers, _ = client.sign(url, http_method=method.upper())
    return headers["Authorization"]


def build_taxonomy_payload(
    request: CreateAudienceRequest,
    *,
    audience_id: str,
    audience_key: str,
    engage_space_id: str,
    parent_node: str,
) -> Dict[str, Tuple[None, str, str]]:
    """Return the multipart ``files`` mapping for a taxonomy append call."""
    description = _setting(request.settings, "customer_desc") or engage_space_id
    mdm_id = _setting(request.settings, "mdm_id")
    segment: Dict[str, Any] = {
        "id": audience_id,
        "name": request.audience_name or audience_key,
        "type": "SEGMENT",
        "targetingAttribute": audience_key,
    }
    if mdm_id:
        segment["users"] = {"include": [mdm_id]}
    data = [
        {
            "id": engage_space_id,
            "name": description,
            "type": parent_node,
            "subTaxonomy": [segment],
        }
    ]
    metadata = {"description": description}
    return {
        "metadata": (None, json.dumps(metadata), "application/json"),
        "data": (None, json.dumps(data), "application/json"),
    }


__all__ = [
    "DESTINATION_NAME",
    "MISSING_REQUIRED_FIELD",
    "require_audience_settings",
    "resolve_taxonomy_credentials",
    "oauth1_header",
    "build_taxonomy_payload",
]
