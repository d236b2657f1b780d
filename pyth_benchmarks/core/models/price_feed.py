"""Price feed value types."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, GetCoreSchemaHandler, field_serializer
from pydantic import ConfigDict as PydanticConfigDict
from pydantic_core import core_schema

PRICE_IDENTIFIER_LENGTH = 32


class PriceIdentifier:
    """32-byte key naming one price feed.

    The canonical string form is lowercase hex without a ``0x`` prefix; the
    prefix is accepted when parsing.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes) -> None:
        if len(raw) != PRICE_IDENTIFIER_LENGTH:
            raise ValueError(f"price identifier must be {PRICE_IDENTIFIER_LENGTH} bytes, got {len(raw)}")
        self._raw = bytes(raw)

    @classmethod
    def from_hex(cls, value: str) -> PriceIdentifier:
        text = value[2:] if value[:2] in ("0x", "0X") else value
        if len(text) != PRICE_IDENTIFIER_LENGTH * 2:
            raise ValueError(f"price identifier must be {PRICE_IDENTIFIER_LENGTH * 2} hex characters: {value!r}")
        try:
            return cls(bytes.fromhex(text))
        except ValueError as exc:
            raise ValueError(f"price identifier is not valid hex: {value!r}") from exc

    @property
    def raw(self) -> bytes:
        return self._raw

    def to_hex(self) -> str:
        return self._raw.hex()

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"PriceIdentifier('{self.to_hex()}')"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PriceIdentifier):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)

    @classmethod
    def _validate(cls, value: Any) -> PriceIdentifier:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        raise ValueError(f"price identifier must be a hex string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


class Price(BaseModel):
    """A price with its confidence interval, both scaled by ``10 ** expo``."""

    price: int
    conf: int = Field(ge=0)
    expo: int
    publish_time: int

    model_config = PydanticConfigDict(frozen=True)

    @field_serializer("price", "conf", when_used="json")
    def serialize_integer(self, value: int) -> str:
        """Serialize 64-bit integers as strings, as the provider does."""
        return str(value)

    def scaled(self) -> Decimal:
        return Decimal(self.price).scaleb(self.expo)

    def scaled_conf(self) -> Decimal:
        return Decimal(self.conf).scaleb(self.expo)


class PriceFeed(BaseModel):
    """Current price and exponential moving average price of one feed."""

    id: PriceIdentifier
    price: Price
    ema_price: Price

    model_config = PydanticConfigDict(frozen=True)


__all__ = ["PRICE_IDENTIFIER_LENGTH", "Price", "PriceFeed", "PriceIdentifier"]
