"""
Core interfaces for pyth_benchmarks.

Components that need historical price updates depend on :class:`Benchmarks`
rather than a concrete client, so a test double can stand in for the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pyth_benchmarks.core.models import PriceFeedsWithUpdateData, PriceIdentifier


class Benchmarks(ABC):
    """Something that can fetch verified historical price feeds."""

    @abstractmethod
    async def get_verified_price_feeds(
        self,
        price_ids: Sequence[PriceIdentifier],
        publish_time: int,
    ) -> PriceFeedsWithUpdateData:
        """
        Fetch the price feeds and signed update data published at ``publish_time``.

        Args:
            price_ids: feeds to retrieve; may be empty
            publish_time: Unix timestamp in seconds

        Returns:
            PriceFeedsWithUpdateData for the requested feeds

        Raises:
            ConfigurationError: the provider endpoint is not configured
            TransportError: the request failed or returned a non-2xx status
            SchemaError: the response body has an unexpected shape
            DecodeError: the update data could not be decoded
        """
        pass


__all__ = ["Benchmarks"]
