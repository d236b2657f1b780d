"""Price feed update aggregates handed to downstream consumers."""

from pydantic import BaseModel, field_serializer
from pydantic import ConfigDict as PydanticConfigDict

from .price_feed import PriceFeed


class PriceFeedUpdate(BaseModel):
    """A price feed together with the metadata of the update that produced it.

    The Benchmarks provider does not report slot, receive time, per-feed update
    data or previous publish time, so those stay ``None`` for historical fetches.
    """

    price_feed: PriceFeed
    slot: int | None = None
    received_at: int | None = None
    update_data: bytes | None = None
    prev_publish_time: int | None = None

    model_config = PydanticConfigDict(frozen=True)

    @field_serializer("update_data", when_used="json")
    def serialize_update_data(self, value: bytes | None) -> str | None:
        if value is None:
            return None
        return value.hex()


class PriceFeedsWithUpdateData(BaseModel):
    """Price feed updates plus the raw update payloads proving them."""

    price_feeds: list[PriceFeedUpdate]
    update_data: list[bytes]

    model_config = PydanticConfigDict(frozen=True)

    @field_serializer("update_data", when_used="json")
    def serialize_update_data(self, value: list[bytes]) -> list[str]:
        """Serialize payloads as lowercase hex strings."""
        return [item.hex() for item in value]
