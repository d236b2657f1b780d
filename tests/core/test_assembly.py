"""Tests for assembling provider responses into update batches."""

from __future__ import annotations

import pytest

from pyth_benchmarks.core.assembly import assemble
from pyth_benchmarks.core.exceptions import AlignmentError, DecodeError, SchemaError
from pyth_benchmarks.core.models import BenchmarkUpdates, PriceIdentifier


def test_two_feeds_with_hex_blob(provider_body: dict) -> None:
    updates = BenchmarkUpdates.model_validate(provider_body)

    result = assemble(updates)

    assert len(result.price_feeds) == 2
    assert result.update_data == [bytes([0xAA, 0xBB]), bytes([0xCC, 0xDD])]


def test_records_preserve_order_and_leave_metadata_unset(make_body, make_feed) -> None:
    ids = [f"{i:064x}" for i in range(1, 6)]
    updates = BenchmarkUpdates.model_validate(make_body(parsed=[make_feed(i) for i in ids], data=["00"]))

    result = assemble(updates)

    assert [record.price_feed.id for record in result.price_feeds] == [PriceIdentifier.from_hex(i) for i in ids]
    for record in result.price_feeds:
        assert record.slot is None
        assert record.received_at is None
        assert record.update_data is None
        assert record.prev_publish_time is None


def test_empty_response(make_body) -> None:
    result = assemble(BenchmarkUpdates.model_validate(make_body(parsed=[], data=[])))

    assert result.price_feeds == []
    assert result.update_data == []


def test_decode_error_propagates_unchanged(make_body) -> None:
    updates = BenchmarkUpdates.model_validate(make_body(data=["aabb", "nothex"]))

    with pytest.raises(DecodeError) as exc_info:
        assemble(updates)

    assert exc_info.value.index == 1


def test_count_mismatch_allowed_by_default(make_body) -> None:
    updates = BenchmarkUpdates.model_validate(make_body(data=["aabbccdd"]))

    result = assemble(updates)

    assert len(result.price_feeds) == 2
    assert result.update_data == [b"\xaa\xbb\xcc\xdd"]


def test_strict_alignment_rejects_count_mismatch(make_body) -> None:
    updates = BenchmarkUpdates.model_validate(make_body(data=["aabbccdd"]))

    with pytest.raises(AlignmentError) as exc_info:
        assemble(updates, strict_alignment=True)

    assert isinstance(exc_info.value, SchemaError)
    assert exc_info.value.parsed_count == 2
    assert exc_info.value.update_count == 1


def test_strict_alignment_accepts_matching_counts(provider_body: dict) -> None:
    result = assemble(BenchmarkUpdates.model_validate(provider_body), strict_alignment=True)

    assert len(result.price_feeds) == len(result.update_data) == 2
