from __future__ import annotations

import types

import httpx
import pytest

from actions_core import (
    ErrorCodes,
    IntegrationError,
    InvalidAuthenticationError,
    PayloadValidationError,
    RetryableError,
    is_retryable,
    is_retryable_status,
    to_integration_error,
)
from actions_core.base.errors import error_for_status, extract_status


@pytest.mark.parametrize(
    "status, expected",
    [
        (400, False),
        (401, False),
        (403, False),
        (404, False),
        (408, True),
        (423, True),
        (429, True),
        (500, True),
        (501, False),
        (502, True),
        (503, True),
    ],
)
def test_status_rule(status, expected):
    assert is_retryable_status(status) is expected


@pytest.mark.parametrize("status", [None, 200, 204, 302, 99, 600, True])
def test_status_rule_outside_error_range_is_not_retried(status):
    assert is_retryable_status(status) is False


def test_unlisted_5xx_is_retried_by_rule():
    assert is_retryable_status(520) is True
    assert is_retryable_status(599) is True


def test_extract_status_shapes():
    assert extract_status(types.SimpleNamespace(status_code=404)) == 404
    assert extract_status(types.SimpleNamespace(status=429)) == 429
    assert extract_status(types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))) == 503
    assert extract_status(types.SimpleNamespace(status_code="500")) is None
    assert extract_status(types.SimpleNamespace(status=700)) is None
    assert extract_status(ValueError("plain")) is None


def test_is_retryable_for_taxonomy_errors():
    assert is_retryable(RetryableError("x")) is True
    assert is_retryable(InvalidAuthenticationError("x")) is False
    assert is_retryable(PayloadValidationError("x")) is False
    assert is_retryable(IntegrationError("x", status=429)) is True
    assert is_retryable(IntegrationError("x")) is False


def test_is_retryable_for_foreign_exceptions():
    class _SdkError(Exception):
        def __init__(self, status_code):
            super().__init__("sdk failure")
            self.status_code = status_code

    assert is_retryable(_SdkError(503)) is True
    assert is_retryable(_SdkError(501)) is False
    assert is_retryable(RuntimeError("no status")) is False


def test_error_for_status_mapping():
    auth = error_for_status(401, "bad key")
    assert isinstance(auth, InvalidAuthenticationError)
    assert auth.code == "INVALID_AUTHENTICATION"

    retry = error_for_status(429, "slow down")
    assert isinstance(retry, RetryableError)
    assert retry.status == 429

    generic = error_for_status(404, "missing")
    assert type(generic) is IntegrationError
    assert generic.status == 404
    assert generic.code == ErrorCodes.API_CALL_FAILED

    custom = error_for_status(409, "conflict", "AUDIENCE_EXISTS")
    assert custom.code == "AUDIENCE_EXISTS"


@pytest.mark.parametrize("status", [400, 401, 403, 404, 408, 409, 422, 423, 429, 500, 501, 502, 503, 520, 599])
def test_error_for_status_agrees_with_status_rule(status):
    assert error_for_status(status, "x").retryable is is_retryable_status(status)


def test_to_integration_error_passthrough():
    original = PayloadValidationError("x")
    assert to_integration_error(original) is original


def test_to_integration_error_timeouts_are_retryable():
    request = httpx.Request("GET", "https://example.test")
    for exc in (httpx.ReadTimeout("read timed out", request=request), TimeoutError("deadline")):
        err = to_integration_error(exc)
        assert isinstance(err, RetryableError)
        assert err.status == 408


def test_to_integration_error_transport_failure_is_retryable():
    request = httpx.Request("GET", "https://example.test")
    err = to_integration_error(httpx.ConnectError("connection refused", request=request))
    assert isinstance(err, RetryableError)
    assert err.status == 503
    assert err.message == "connection refused"


def test_to_integration_error_http_status_error():
    request = httpx.Request("GET", "https://example.test")
    response = httpx.Response(403, request=request)
    exc = httpx.HTTPStatusError("forbidden", request=request, response=response)
    err = to_integration_error(exc)
    assert type(err) is IntegrationError
    assert err.status == 403
    assert err.retryable is False


def test_to_integration_error_unknown_exception_is_not_retryable():
    err = to_integration_error(KeyError("audience_id"))
    assert type(err) is IntegrationError
    assert err.status is None
    assert err.retryable is False
    assert "audience_id" in err.message
