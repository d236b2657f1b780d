"""Response schema of the Benchmarks ``/v1/updates/price`` route."""

from enum import Enum

from pydantic import BaseModel
from pydantic import ConfigDict as PydanticConfigDict

from .price_feed import PriceFeed


class BlobEncoding(str, Enum):
    """Encoding shared by every item of a binary blob."""

    BASE64 = "base64"
    HEX = "hex"


class BinaryBlob(BaseModel):
    """Encoded update payloads, in provider order."""

    encoding: BlobEncoding
    data: list[str]

    model_config = PydanticConfigDict(frozen=True)


class BenchmarkUpdates(BaseModel):
    """Parsed price feeds plus the signed update data they came from."""

    parsed: list[PriceFeed]
    binary: BinaryBlob

    model_config = PydanticConfigDict(frozen=True)
