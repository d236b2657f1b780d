"""Data models module."""

from pyth_benchmarks.core.models.price_feed import PRICE_IDENTIFIER_LENGTH, Price, PriceFeed, PriceIdentifier
from pyth_benchmarks.core.models.updates import PriceFeedsWithUpdateData, PriceFeedUpdate
from pyth_benchmarks.core.models.wire import BenchmarkUpdates, BinaryBlob, BlobEncoding

__all__ = [
    "PRICE_IDENTIFIER_LENGTH",
    "Price",
    "PriceFeed",
    "PriceIdentifier",
    "PriceFeedUpdate",
    "PriceFeedsWithUpdateData",
    "BenchmarkUpdates",
    "BinaryBlob",
    "BlobEncoding",
]
