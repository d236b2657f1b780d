"""Client for the Benchmarks historical price update API."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import httpx
from loguru import logger
from pydantic import ValidationError

from pyth_benchmarks.core.assembly import assemble
from pyth_benchmarks.core.config import BenchmarksConfig, ConfigManager
from pyth_benchmarks.core.exceptions import BenchmarksError, ConfigurationError, SchemaError
from pyth_benchmarks.core.http_adapter import HttpClient, HttpConfig
from pyth_benchmarks.core.interfaces import Benchmarks
from pyth_benchmarks.core.logging import log_context
from pyth_benchmarks.core.models import BenchmarkUpdates, PriceFeedsWithUpdateData, PriceIdentifier

BENCHMARKS_REQUEST_TIMEOUT = 30.0
UPDATES_ROUTE = "/v1/updates/price/{publish_time}"
PROVIDER_NAME = "benchmarks"


def build_query_params(price_ids: Sequence[PriceIdentifier]) -> list[tuple[str, str]]:
    """Query parameters for an updates request, ``ids`` repeated once per feed."""
    params = [("encoding", "hex"), ("parsed", "true")]
    params.extend(("ids", str(price_id)) for price_id in price_ids)
    return params


def parse_updates(response: httpx.Response) -> BenchmarkUpdates:
    """Validate a response body against the provider schema.

    Raises:
        SchemaError: the body is not JSON or does not match the schema
    """
    try:
        return BenchmarkUpdates.model_validate_json(response.content)
    except ValidationError as e:
        raise SchemaError(
            f"Unexpected response body from {response.request.url}: {e.error_count()} validation error(s)",
            validation_errors=e.errors(include_url=False, include_context=False),
            details={"url": str(response.request.url)},
        ) from e


class BenchmarksClient(Benchmarks):
    """
    Fetches verified price feeds from a Benchmarks endpoint.

    Holds no per-request state, so one instance may serve concurrent calls.
    Each call opens its own HTTP client and issues exactly one request.
    """

    def __init__(
        self,
        config: BenchmarksConfig | None = None,
        *,
        endpoint: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            config: provider settings; an empty configuration leaves the endpoint unset
            endpoint: overrides ``config.endpoint`` when given
            transport: httpx transport to send requests through, e.g. ``httpx.MockTransport``
        """
        config = config or BenchmarksConfig()
        if endpoint is not None:
            config = replace(config, endpoint=endpoint)
        self.config = config
        self._transport = transport

    @classmethod
    def from_config_manager(
        cls,
        manager: ConfigManager | None = None,
        *,
        endpoint: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "BenchmarksClient":
        """Build a client from the user configuration file and environment."""
        manager = manager or ConfigManager()
        return cls(manager.get_config().benchmarks, endpoint=endpoint, transport=transport)

    def _http_config(self) -> HttpConfig:
        endpoint = self.config.endpoint
        if not endpoint:
            raise ConfigurationError("Benchmarks endpoint is not set", setting="endpoint")
        if httpx.URL(endpoint).scheme not in ("http", "https"):
            raise ConfigurationError(
                f"Benchmarks endpoint must be an http(s) URL: {endpoint!r}",
                setting="endpoint",
            )
        return HttpConfig(
            base_url=endpoint,
            timeout=BENCHMARKS_REQUEST_TIMEOUT,
            user_agent=self.config.user_agent,
        )

    async def get_verified_price_feeds(
        self,
        price_ids: Sequence[PriceIdentifier],
        publish_time: int,
    ) -> PriceFeedsWithUpdateData:
        http_config = self._http_config()
        if isinstance(publish_time, bool) or not isinstance(publish_time, int):
            raise TypeError(f"publish_time must be an integer Unix timestamp, got {type(publish_time).__name__}")

        path = UPDATES_ROUTE.format(publish_time=publish_time)
        params = build_query_params(price_ids)

        with log_context(provider=PROVIDER_NAME, publish_time=publish_time):
            logger.debug("Requesting {count} price feeds", count=len(price_ids))
            try:
                async with HttpClient(http_config, transport=self._transport) as client:
                    response = await client.get(path, params=params)
                updates = parse_updates(response)
                result = assemble(updates, strict_alignment=self.config.strict_alignment)
            except BenchmarksError as e:
                logger.bind(error_code=e.error_code).warning("Benchmarks fetch failed: {error}", error=e.message)
                raise

            logger.info(
                "Fetched {feeds} price feeds with {payloads} update payloads",
                feeds=len(result.price_feeds),
                payloads=len(result.update_data),
            )
            return result


__all__ = [
    "BENCHMARKS_REQUEST_TIMEOUT",
    "UPDATES_ROUTE",
    "BenchmarksClient",
    "build_query_params",
    "parse_updates",
]
