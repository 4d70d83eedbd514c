"""
Tests for the Clockify API client.
"""
import json

import httpx
import pytest
import respx

from ticktock_mcp.api.client import BASE_URL, REPORTS_URL, ClockifyApiClient
from ticktock_mcp.api.errors import RATE_LIMIT_MESSAGE, ClockifyAPIError


def test_requires_api_key():
    with pytest.raises(ValueError):
        ClockifyApiClient(api_key="")


def test_defaults():
    client = ClockifyApiClient(api_key="k")
    assert client.base_url == "https://api.clockify.me/api/v1"
    assert client.reports_url == "https://reports.api.clockify.me/v1"
    assert client.timeout == 30.0


@pytest.mark.asyncio
@respx.mock
async def test_sends_auth_and_content_type_headers(api_client):
    """Every request carries the API key and a JSON content type."""
    route = respx.get(f"{BASE_URL}/user").mock(
        return_value=httpx.Response(200, json={"id": "user123"})
    )

    data = await api_client.get("/user")

    assert data == {"id": "user123"}
    request = route.calls.last.request
    assert request.headers["X-Api-Key"] == "test_key"
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
@respx.mock
async def test_post_serializes_body(api_client):
    route = respx.post(f"{BASE_URL}/workspaces/ws123/tags").mock(
        return_value=httpx.Response(201, json={"id": "tag1", "name": "backend"})
    )

    await api_client.post("/workspaces/ws123/tags", {"name": "backend"})

    assert json.loads(route.calls.last.request.content) == {"name": "backend"}


@pytest.mark.asyncio
@respx.mock
async def test_query_params_are_encoded(api_client):
    route = respx.get(f"{BASE_URL}/workspaces/ws123/projects").mock(
        return_value=httpx.Response(200, json=[])
    )

    await api_client.get("/workspaces/ws123/projects", params={"page": 2, "page-size": 10})

    params = route.calls.last.request.url.params
    assert params["page"] == "2"
    assert params["page-size"] == "10"


@pytest.mark.asyncio
@respx.mock
async def test_empty_body_returns_none(api_client):
    respx.delete(f"{BASE_URL}/workspaces/ws123/tags/tag1").mock(
        return_value=httpx.Response(204)
    )

    assert await api_client.request("DELETE", "/workspaces/ws123/tags/tag1") is None


@pytest.mark.asyncio
@respx.mock
async def test_reports_go_to_reports_host(api_client):
    route = respx.post(f"{REPORTS_URL}/workspaces/ws123/reports/summary").mock(
        return_value=httpx.Response(200, json={"totals": []})
    )

    await api_client.post_report("/workspaces/ws123/reports/summary", {"dateRangeStart": "x"})

    assert route.called


@pytest.mark.asyncio
@respx.mock
@pytest.mark.parametrize("body", ['{"message": "Too many requests"}', "", "not json at all"])
async def test_rate_limit_maps_to_fixed_error(api_client, body):
    """429 is always the rate limit error, whatever the body says."""
    respx.get(f"{BASE_URL}/user").mock(return_value=httpx.Response(429, text=body))

    with pytest.raises(ClockifyAPIError) as exc_info:
        await api_client.get("/user")

    assert exc_info.value.code == "rate_limited"
    assert exc_info.value.status_code == 429
    assert str(exc_info.value) == RATE_LIMIT_MESSAGE


@pytest.mark.asyncio
@respx.mock
async def test_rate_limit_is_not_retried(api_client):
    route = respx.get(f"{BASE_URL}/user").mock(return_value=httpx.Response(429))

    with pytest.raises(ClockifyAPIError):
        await api_client.get("/user")

    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_error_status_carries_code_and_body(api_client):
    respx.get(f"{BASE_URL}/workspaces/ws123/projects/p1").mock(
        return_value=httpx.Response(404, text='{"message":"Project not found","code":501}')
    )

    with pytest.raises(ClockifyAPIError) as exc_info:
        await api_client.get("/workspaces/ws123/projects/p1")

    assert exc_info.value.code == "api_error"
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == (
        'clockify API error (404): {"message":"Project not found","code":501}'
    )


@pytest.mark.asyncio
@respx.mock
async def test_server_error_is_not_retried(api_client):
    route = respx.get(f"{BASE_URL}/user").mock(return_value=httpx.Response(503, text="down"))

    with pytest.raises(ClockifyAPIError) as exc_info:
        await api_client.get("/user")

    assert exc_info.value.code == "api_error"
    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_non_json_success_body_is_decode_error(api_client):
    respx.get(f"{BASE_URL}/user").mock(
        return_value=httpx.Response(200, text="<html>maintenance</html>")
    )

    with pytest.raises(ClockifyAPIError) as exc_info:
        await api_client.get("/user")

    assert exc_info.value.code == "decode_error"
    assert str(exc_info.value).startswith("unmarshal response:")


@pytest.mark.asyncio
@respx.mock
async def test_network_failure_is_transport_error(api_client):
    respx.get(f"{BASE_URL}/user").mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(ClockifyAPIError) as exc_info:
        await api_client.get("/user")

    assert exc_info.value.code == "transport_error"
    assert exc_info.value.status_code is None
    assert "connection refused" in str(exc_info.value)


@pytest.mark.asyncio
@respx.mock
async def test_timeout_is_transport_error(api_client):
    respx.get(f"{BASE_URL}/user").mock(side_effect=httpx.ReadTimeout("timed out"))

    with pytest.raises(ClockifyAPIError) as exc_info:
        await api_client.get("/user")

    assert exc_info.value.code == "transport_error"


@pytest.mark.asyncio
async def test_unserializable_body_is_encode_error_and_sends_nothing(api_client):
    with respx.mock(assert_all_called=False) as router:
        route = router.post(f"{BASE_URL}/workspaces/ws123/tags")

        with pytest.raises(ClockifyAPIError) as exc_info:
            await api_client.post("/workspaces/ws123/tags", {"name": object()})

    assert exc_info.value.code == "encode_error"
    assert not route.called
