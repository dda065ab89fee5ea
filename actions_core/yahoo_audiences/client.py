"""Yahoo Audiences destination.

Summary:
    Creates audience segments in the Yahoo DataX taxonomy API. This is the
    reference audience destination: it validates its settings, signs the
    request and leaves classification of HTTP failures to the shared HTTP
    layer, so every failure reaches the execution engine as a taxonomy error.

Failure handling:
    - Blank ``audience_id``, ``audience_key`` or ``engage_space_id`` →
      ``IntegrationError`` (``MISSING_REQUIRED_FIELD``, 400).
    - Missing taxonomy client credentials → ``InvalidAuthenticationError``.
    - Non-2xx responses → ``raise_for_integration_status``.
    - Transport failures → ``RetryableError`` via ``with_error_handling``.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ..base.dto import CreateAudienceRequest, CreateAudienceResult
from ..base.http import get_httpx_client, raise_for_integration_status
from ..base.logging import LogContext, get_logger, log_event
from ..base.resilience import with_error_handling
from ..config import get_destination_config
from .helpers import (
    DESTINATION_NAME,
    build_taxonomy_payload,
    oauth1_header,
    require_audience_settings,
    resolve_taxonomy_credentials,
)

_logger = get_logger("actions.yahoo_audiences")


class YahooAudiencesDestination:
    """Audience destination backed by the Yahoo taxonomy API."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = get_destination_config(DESTINATION_NAME, config)
        self._client = client

    @property
    def destination_name(self) -> str:
        return DESTINATION_NAME

    def _http(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return get_httpx_client(self._config["taxonomy_base_url"], purpose="taxonomy")

    @with_error_handling(DESTINATION_NAME, "create_audience", logger=_logger)
    def create_audience(
        self, request: Union[CreateAudienceRequest, Mapping[str, Any]]
    ) -> CreateAudienceResult:
        """Register the audience under the customer's engage space.

        Returns the audience id as ``external_id`` once the API accepts it.
        """
        req = CreateAudienceRequest.parse(request)
        audience_id, audience_key, engage_space_id = require_audience_settings(req)
        client_id, client_secret = resolve_taxonomy_credentials()

        path = self._config["taxonomy_append_path"].format(engage_space_id=engage_space_id)
        url = self._config["taxonomy_base_url"].rstrip("/") + path
        files = build_taxonomy_payload(
            req,
            audience_id=audience_id,
            audience_key=audience_key,
            engage_space_id=engage_space_id,
            parent_node=self._config["parent_node"],
        )
        headers = {"Authorization": oauth1_header("PUT", url, client_id, client_secret)}
        response = self._http().put(url, files=files, headers=headers)
        raise_for_integration_status(response, operation="Create Audience")

        log_event(
            _logger,
            "destination.create_audience.success",
            LogContext(destination=DESTINATION_NAME, action="create_audience"),
            status=response.status_code,
            external_id=audience_id,
        )
        return CreateAudienceResult(external_id=audience_id)


__all__ = ["YahooAudiencesDestination"]
