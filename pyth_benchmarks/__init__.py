"""pyth_benchmarks - verified historical Pyth price feeds

Fetches price feeds and their signed update data for a past publish time from
the Pyth Benchmarks API.
"""

from collections.abc import Sequence

from pyth_benchmarks.core.client import BENCHMARKS_REQUEST_TIMEOUT, BenchmarksClient
from pyth_benchmarks.core.config import BenchmarksConfig, ConfigManager
from pyth_benchmarks.core.exceptions import (
    AlignmentError,
    BenchmarksError,
    ConfigurationError,
    DecodeError,
    SchemaError,
    TransportError,
)
from pyth_benchmarks.core.interfaces import Benchmarks
from pyth_benchmarks.core.models import (
    Price,
    PriceFeed,
    PriceFeedsWithUpdateData,
    PriceFeedUpdate,
    PriceIdentifier,
)

__version__ = "0.1.0"


async def get_verified_price_feeds(
    price_ids: Sequence[PriceIdentifier | str],
    publish_time: int,
    endpoint: str | None = None,
) -> PriceFeedsWithUpdateData:
    """Fetch verified price feeds with a client built from the user configuration.

    Args:
        price_ids: identifiers, as :class:`PriceIdentifier` or hex strings
        publish_time: Unix timestamp in seconds
        endpoint: overrides the configured Benchmarks endpoint

    Examples:
        >>> import asyncio, pyth_benchmarks
        >>> asyncio.run(pyth_benchmarks.get_verified_price_feeds(
        ...     ["e62df6c8b4a85fe1a67db44dc12de5db330f7ac66b72dc658afedf0f4a415b43"],
        ...     1700000000,
        ...     endpoint="https://benchmarks.pyth.network",
        ... ))  # doctest: +SKIP
    """
    ids = [PriceIdentifier.from_hex(p) if isinstance(p, str) else p for p in price_ids]
    client = BenchmarksClient.from_config_manager(endpoint=endpoint)
    return await client.get_verified_price_feeds(ids, publish_time)


__all__ = [
    "__version__",
    "BENCHMARKS_REQUEST_TIMEOUT",
    "Benchmarks",
    "BenchmarksClient",
    "BenchmarksConfig",
    "ConfigManager",
    "get_verified_price_feeds",
    "Price",
    "PriceFeed",
    "PriceFeedUpdate",
    "PriceFeedsWithUpdateData",
    "PriceIdentifier",
    "BenchmarksError",
    "ConfigurationError",
    "TransportError",
    "SchemaError",
    "AlignmentError",
    "DecodeError",
]
