"""
Tests for ApiClient error mapping: raw httpx failures never leak out.
"""

import httpx
import pytest

from guardian_dashboard.api_client import ApiClient
from guardian_dashboard.errors import NetworkError, ParseError, ServiceError

BASE_URL = "http://guardian.test"


def _client(handler) -> ApiClient:
    return ApiClient(base_url=BASE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_get_json_success():
    async with _client(lambda r: httpx.Response(200, json={"ok": True})) as client:
        assert await client.get_json("/api/cities") == {"ok": True}


@pytest.mark.asyncio
async def test_non_success_status_is_service_error():
    async with _client(lambda r: httpx.Response(503, json={"error": "down"})) as client:
        with pytest.raises(ServiceError) as exc_info:
            await client.get_json("/api/cities")
    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_connection_failure_is_network_error():
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(NetworkError):
            await client.get("/")


@pytest.mark.asyncio
async def test_timeout_is_network_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with _client(handler) as client:
        with pytest.raises(NetworkError, match="timed out"):
            await client.get_json("/api/analyze/lima")


@pytest.mark.asyncio
async def test_malformed_json_is_parse_error():
    handler = lambda r: httpx.Response(  # noqa: E731
        200, content=b"<html>gateway</html>", headers={"content-type": "text/html"},
    )
    async with _client(handler) as client:
        with pytest.raises(ParseError):
            await client.get_json("/api/cities")


def test_base_url_trailing_slash_is_stripped():
    client = ApiClient(base_url="http://guardian.test/", transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    assert client.base_url == "http://guardian.test"


@pytest.mark.asyncio
async def test_unbuildable_url_is_network_error():
    """A path httpx refuses to build is reported like any other network failure."""
    async with _client(lambda r: httpx.Response(200, json={})) as client:
        with pytest.raises(NetworkError):
            await client.get("/api/analyze/lima\x01")
