"""Yahoo Audiences createAudience scenarios against a mocked taxonomy API."""
from __future__ import annotations

import base64
import hashlib
import hmac
from typing import Any, Callable, Dict, List
from urllib.parse import unquote

import httpx
import pytest

from actions_core import IntegrationError, InvalidAuthenticationError, PayloadValidationError, RetryableError
from actions_core.base.http import register_client
from actions_core.base.interfaces import AudienceDestination
from actions_core.yahoo_audiences import MISSING_REQUIRED_FIELD, YahooAudiencesDestination
from actions_core.yahoo_audiences.helpers import oauth1_header

AUDIENCE_ID = "aud_123456789012345678901234567"
AUDIENCE_KEY = "sneakers_buyers"
ENGAGE_SPACE_ID = "acme_corp_engage_space"
MDM_ID = "mdm 123"
CUST_DESC = "ACME Corp"
TAXONOMY_URL = f"https://datax.yahooapis.com/v1/taxonomy/append/{ENGAGE_SPACE_ID}"


def _input(**audience_overrides: str) -> Dict[str, Any]:
    audience_settings = {"audience_key": AUDIENCE_KEY, "audience_id": AUDIENCE_ID, "identifier": "anything"}
    audience_settings.update(audience_overrides)
    return {
        "settings": {"engage_space_id": ENGAGE_SPACE_ID, "mdm_id": MDM_ID, "customer_desc": CUST_DESC},
        "audienceName": "",
        "audienceSettings": audience_settings,
    }


def _mock_destination(handler: Callable[[httpx.Request], httpx.Response], seen: List[httpx.Request]):
    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.Client(transport=httpx.MockTransport(_record))
    register_client("https://datax.yahooapis.com", "taxonomy", client)
    return YahooAudiencesDestination()


def test_destination_satisfies_protocol():
    assert isinstance(YahooAudiencesDestination(), AudienceDestination)


def test_create_audience_success(taxonomy_credentials, captured_logs):
    seen: List[httpx.Request] = []
    destination = _mock_destination(lambda request: httpx.Response(202, json={"anything": "123"}), seen)

    result = destination.create_audience(_input())

    assert result.external_id == AUDIENCE_ID
    assert result.model_dump(by_alias=True) == {"externalId": AUDIENCE_ID}
    [request] = seen
    assert request.method == "PUT"
    assert str(request.url) == TAXONOMY_URL
    assert request.headers["Authorization"].startswith("OAuth ")
    assert 'oauth_consumer_key="luke"' in request.headers["Authorization"]
    body = request.content.decode("utf-8")
    assert AUDIENCE_ID in body and AUDIENCE_KEY in body and MDM_ID in body
    assert captured_logs.events("destination.error") == []
    [event] = captured_logs.events("destination.create_audience.success")
    assert event["external_id"] == AUDIENCE_ID


@pytest.mark.parametrize(
    "overrides, settings_override, expected",
    [
        ({"audience_id": ""}, None, "missing audience Id value"),
        ({"audience_key": ""}, None, "missing audience key value"),
        ({}, {"engage_space_id": ""}, "missing Engage space Id value"),
    ],
)
def test_create_audience_rejects_blank_required_setting(
    taxonomy_credentials, captured_logs, overrides, settings_override, expected
):
    seen: List[httpx.Request] = []
    destination = _mock_destination(lambda request: httpx.Response(202), seen)
    payload = _input(**overrides)
    if settings_override:
        payload["settings"].update(settings_override)

    with pytest.raises(IntegrationError) as ei:
        destination.create_audience(payload)

    assert expected in ei.value.message
    assert ei.value.status == 400
    assert ei.value.code == MISSING_REQUIRED_FIELD
    assert ei.value.retryable is False
    assert seen == []
    [event] = captured_logs.events("destination.error")
    assert event["destination"] == "yahoo_audiences"
    assert event["action"] == "create_audience"


def test_create_audience_malformed_input_is_payload_validation(taxonomy_credentials):
    destination = YahooAudiencesDestination()
    with pytest.raises(PayloadValidationError):
        destination.create_audience({"settings": "not-a-mapping"})


def test_create_audience_without_credentials(monkeypatch):
    monkeypatch.delenv("ACTIONS_YAHOO_AUDIENCES_TAXONOMY_CLIENT_ID", raising=False)
    monkeypatch.delenv("ACTIONS_YAHOO_AUDIENCES_TAXONOMY_CLIENT_SECRET", raising=False)
    seen: List[httpx.Request] = []
    destination = _mock_destination(lambda request: httpx.Response(202), seen)
    with pytest.raises(InvalidAuthenticationError) as ei:
        destination.create_audience(_input())
    assert ei.value.status == 401
    assert seen == []


def test_create_audience_rate_limited_is_retryable(taxonomy_credentials):
    seen: List[httpx.Request] = []
    destination = _mock_destination(lambda request: httpx.Response(429, json={"message": "slow down"}), seen)
    with pytest.raises(RetryableError) as ei:
        destination.create_audience(_input())
    assert ei.value.status == 429
    assert "slow down" in ei.value.message


def test_create_audience_rejected_credentials(taxonomy_credentials):
    seen: List[httpx.Request] = []
    destination = _mock_destination(lambda request: httpx.Response(401), seen)
    with pytest.raises(InvalidAuthenticationError):
        destination.create_audience(_input())


def test_create_audience_not_implemented_is_not_retried(taxonomy_credentials):
    seen: List[httpx.Request] = []
    destination = _mock_destination(lambda request: httpx.Response(501), seen)
    with pytest.raises(IntegrationError) as ei:
        destination.create_audience(_input())
    assert ei.value.status == 501
    assert ei.value.retryable is False


def test_create_audience_network_failure_is_retryable(taxonomy_credentials):
    def _boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(_boom))
    destination = YahooAudiencesDestination(client=client)
    with pytest.raises(RetryableError) as ei:
        destination.create_audience(_input())
    assert ei.value.status == 503
    assert isinstance(ei.value.__cause__, httpx.ConnectError)


def _header_fields(header: str) -> Dict[str, str]:
    assert header.startswith("OAuth ")
    return {k: unquote(v.strip('"')) for k, v in (part.split("=", 1) for part in header[len("OAuth "):].split(", "))}


def test_oauth1_header_is_deterministic():
    h1 = oauth1_header("PUT", TAXONOMY_URL, "luke", "yoda", nonce="abc", timestamp=1700000000)
    h2 = oauth1_header("put", TAXONOMY_URL, "luke", "yoda", nonce="abc", timestamp=1700000000)
    h3 = oauth1_header("PUT", TAXONOMY_URL, "luke", "vader", nonce="abc", timestamp=1700000000)
    assert h1 == h2
    assert h1 != h3
    fields = _header_fields(h1)
    assert fields["oauth_signature_method"] == "HMAC-SHA1"
    assert fields["oauth_timestamp"] == "1700000000"
    assert fields["oauth_nonce"] == "abc"
    assert fields["oauth_version"] == "1.0"


def test_oauth1_signature_matches_rfc5849_base_string():
    # Signature base string per RFC 5849 section 3.4.1, written out by hand.
    base_string = (
        "PUT&https%3A%2F%2Fdatax.yahooapis.com%2Fv1%2Ftaxonomy%2Fappend%2Facme_corp_engage_space&"
        "oauth_consumer_key%3Dluke%26oauth_nonce%3Dabc%26oauth_signature_method%3DHMAC-SHA1"
        "%26oauth_timestamp%3D1700000000%26oauth_version%3D1.0"
    )
    expected = base64.b64encode(hmac.new(b"yoda&", base_string.encode("ascii"), hashlib.sha1).digest()).decode("ascii")

    header = oauth1_header("PUT", TAXONOMY_URL, "luke", "yoda", nonce="abc", timestamp=1700000000)
    assert _header_fields(header)["oauth_signature"] == expected


def test_create_audience_accepts_credentials_containing_common_words(monkeypatch):
    monkeypatch.setenv("ACTIONS_YAHOO_AUDIENCES_TAXONOMY_CLIENT_ID", "dj0yJmk9example42")
    monkeypatch.setenv("ACTIONS_YAHOO_AUDIENCES_TAXONOMY_CLIENT_SECRET", "s3cr3t-changeme")
    seen: List[httpx.Request] = []
    destination = _mock_destination(lambda request: httpx.Response(202, json={"anything": "123"}), seen)

    result = destination.create_audience(_input())

    assert result.external_id == AUDIENCE_ID
    [request] = seen
    assert _header_fields(request.headers["Authorization"])["oauth_consumer_key"] == "dj0yJmk9example42"
