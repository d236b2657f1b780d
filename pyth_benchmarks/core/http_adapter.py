"""
HTTP adapter for the Benchmarks provider.

Wraps a single ``httpx.AsyncClient`` and maps httpx failures onto
:class:`TransportError`. Every call issues exactly one request: there is no
retry, backoff or rate limiting here.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from pyth_benchmarks.core.exceptions import ErrorCode, TransportError


@dataclass
class HttpConfig:
    """Configuration for HTTP client behavior."""

    base_url: str
    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = "pyth-benchmarks/0.1.0"
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate HTTP configuration."""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


class HttpClient:
    """
    Single-request HTTP client.

    ``timeout`` bounds the whole round trip (connect, send, receive) rather
    than each phase separately.
    """

    def __init__(self, http_config: HttpConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.http_config = http_config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "HttpClient":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {
                "User-Agent": self.http_config.user_agent,
                **self.http_config.headers,
            }
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.http_config.timeout),
                verify=self.http_config.verify_ssl,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def build_url(self, path: str) -> httpx.URL:
        """Resolve ``path`` against the base URL; an absolute path replaces the base path."""
        return httpx.URL(self.http_config.base_url).join(path)

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Execute one GET request and return a 2xx response.

        Raises:
            TransportError: connection failure, timeout or non-2xx status
        """
        client = self._ensure_client()
        url = self.build_url(path)
        logger.debug("GET {url}", url=str(url))

        try:
            async with asyncio.timeout(self.http_config.timeout):
                response = await client.get(url, **kwargs)
        except (TimeoutError, httpx.TimeoutException) as e:
            raise TransportError(
                f"Request to {url} timed out after {self.http_config.timeout} seconds",
                url=str(url),
                error_code=ErrorCode.TIMEOUT,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"Request to {url} failed with {type(e).__name__}: {e}",
                url=str(url),
            ) from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Request to {url} returned HTTP {response.status_code}",
                url=str(url),
                status_code=response.status_code,
                error_code=ErrorCode.HTTP_STATUS,
            ) from e

        return response


__all__ = ["HttpClient", "HttpConfig"]
