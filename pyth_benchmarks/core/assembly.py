"""Conversion of provider responses into price feed update batches."""

from __future__ import annotations

from pyth_benchmarks.core.decoding import decode_blob
from pyth_benchmarks.core.exceptions import AlignmentError
from pyth_benchmarks.core.models.updates import PriceFeedsWithUpdateData, PriceFeedUpdate
from pyth_benchmarks.core.models.wire import BenchmarkUpdates


def assemble(updates: BenchmarkUpdates, *, strict_alignment: bool = False) -> PriceFeedsWithUpdateData:
    """Pair each parsed price feed with empty update metadata and decode the blob.

    The provider usually ships a single accumulator update covering every
    requested feed, so the number of parsed feeds and decoded payloads is only
    compared when ``strict_alignment`` is set.

    Raises:
        DecodeError: propagated unchanged from :func:`decode_blob`.
        AlignmentError: ``strict_alignment`` is set and the counts differ.
    """
    price_feeds = [
        PriceFeedUpdate(
            price_feed=price_feed,
            slot=None,
            received_at=None,
            update_data=None,
            # TODO: populate once the Benchmarks API reports previous publish times.
            prev_publish_time=None,
        )
        for price_feed in updates.parsed
    ]
    update_data = decode_blob(updates.binary)

    if strict_alignment and len(price_feeds) != len(update_data):
        raise AlignmentError(len(price_feeds), len(update_data))

    return PriceFeedsWithUpdateData(price_feeds=price_feeds, update_data=update_data)


__all__ = ["assemble"]
