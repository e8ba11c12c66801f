import logging

import httpx
import pytest
import respx
from httpx import Response

from app.exceptions.custom import LocationServiceError, RateLimitError
from app.services.health import PROBE_ZIP_CODE, LocationHealthCheck
from app.services.location import AddressLookupClient, RestPlaceSearchTransport
from tests.payloads import SAN_DIEGO, SEARCH_URL, search_payload


def _health_check(client: httpx.AsyncClient) -> LocationHealthCheck:
    lookup_client = AddressLookupClient(RestPlaceSearchTransport(client, "k", "test-index"))
    return LocationHealthCheck(lookup_client, "test-index", "us-west-2")


@respx.mock
async def test_probe_returns_result_count():
    route = respx.post(SEARCH_URL).mock(
        return_value=Response(200, json=search_payload(SAN_DIEGO))
    )

    async with httpx.AsyncClient() as client:
        count = await _health_check(client).probe()

    assert count == 1
    body = route.calls.last.request.content
    assert PROBE_ZIP_CODE.encode() in body
    assert b'"MaxResults":1' in body.replace(b" ", b"")


@respx.mock
async def test_probe_raises_on_failure():
    respx.post(SEARCH_URL).mock(return_value=Response(403, text="Forbidden"))

    async with httpx.AsyncClient() as client:
        with pytest.raises(LocationServiceError) as exc_info:
            await _health_check(client).probe()

    assert exc_info.value.status_code == 403


@respx.mock
async def test_probe_raises_rate_limit():
    respx.post(SEARCH_URL).mock(return_value=Response(429))

    async with httpx.AsyncClient() as client:
        with pytest.raises(RateLimitError):
            await _health_check(client).probe()


@respx.mock
async def test_startup_check_success(caplog):
    caplog.set_level(logging.INFO, logger="app.services.health")
    respx.post(SEARCH_URL).mock(return_value=Response(200, json=search_payload(SAN_DIEGO)))

    async with httpx.AsyncClient() as client:
        ok = await _health_check(client).run_startup_check()

    assert ok is True
    assert "validation SUCCESSFUL" in caplog.text


@respx.mock
async def test_startup_check_failure_logs_hints(caplog):
    caplog.set_level(logging.INFO, logger="app.services.health")
    respx.post(SEARCH_URL).mock(return_value=Response(403, text="Forbidden"))

    async with httpx.AsyncClient() as client:
        ok = await _health_check(client).run_startup_check()

    assert ok is False
    assert "validation FAILED" in caplog.text
    assert "CONFIGURATION HINTS" in caplog.text
    assert "test-index" in caplog.text
