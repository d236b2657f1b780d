"""
Tests for the HTTP adapter.

Covers configuration validation, URL resolution and the mapping of httpx
failures onto TransportError.
"""

import asyncio

import httpx
import pytest

from pyth_benchmarks.core.exceptions import ErrorCode, TransportError
from pyth_benchmarks.core.http_adapter import HttpClient, HttpConfig


class TestHttpConfig:
    """Test HttpConfig data class."""

    def test_http_config_creation(self):
        """Test creating HttpConfig with all parameters."""
        config = HttpConfig(
            base_url="https://api.example.com",
            timeout=12.5,
            verify_ssl=False,
            user_agent="test-agent/1.0",
            headers={"Custom-Header": "value"},
        )

        assert config.base_url == "https://api.example.com"
        assert config.timeout == 12.5
        assert config.verify_ssl is False
        assert config.user_agent == "test-agent/1.0"
        assert config.headers == {"Custom-Header": "value"}

    def test_http_config_defaults(self):
        config = HttpConfig(base_url="https://api.example.com")

        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.headers == {}

    def test_http_config_validation(self):
        """Test HttpConfig validation."""
        with pytest.raises(ValueError, match="base_url cannot be empty"):
            HttpConfig(base_url="")

        with pytest.raises(ValueError, match="timeout must be positive"):
            HttpConfig(base_url="https://api.example.com", timeout=0)


class TestHttpClient:
    """Test HttpClient request handling."""

    def test_build_url(self):
        client = HttpClient(HttpConfig(base_url="https://api.example.com/base/"))

        assert str(client.build_url("v1/items")) == "https://api.example.com/base/v1/items"
        assert str(client.build_url("/v1/items")) == "https://api.example.com/v1/items"

    @pytest.mark.asyncio
    async def test_get_sends_headers_and_params(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        config = HttpConfig(
            base_url="https://api.example.com",
            user_agent="test-agent/1.0",
            headers={"X-Extra": "1"},
        )
        async with HttpClient(config, transport=httpx.MockTransport(handler)) as client:
            response = await client.get("/items", params=[("a", "1"), ("a", "2")])

        assert response.json() == {"ok": True}
        assert len(seen) == 1
        assert seen[0].headers["User-Agent"] == "test-agent/1.0"
        assert seen[0].headers["X-Extra"] == "1"
        assert seen[0].url.params.get_list("a") == ["1", "2"]

    @pytest.mark.asyncio
    async def test_close_releases_client(self):
        client = HttpClient(HttpConfig(base_url="https://api.example.com"))

        async with client:
            assert client._client is not None

        assert client._client is None

    @pytest.mark.asyncio
    async def test_server_error_not_retried(self):
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(503)

        async with HttpClient(
            HttpConfig(base_url="https://api.example.com"), transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.get("/items")

        assert calls == 1
        assert exc_info.value.status_code == 503
        assert exc_info.value.error_code == ErrorCode.HTTP_STATUS
        assert exc_info.value.details["url"] == "https://api.example.com/items"

    @pytest.mark.asyncio
    async def test_round_trip_timeout(self):
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200)

        async with HttpClient(
            HttpConfig(base_url="https://api.example.com", timeout=0.05), transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.get("/slow")

        assert exc_info.value.error_code == ErrorCode.TIMEOUT
