"""Decoding of the provider's transport-encoded binary blobs."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable
from typing import assert_never

from pyth_benchmarks.core.exceptions import DecodeError
from pyth_benchmarks.core.models.wire import BinaryBlob, BlobEncoding


def _decode_item(datum: str, encoding: BlobEncoding) -> bytes:
    if encoding is BlobEncoding.BASE64:
        raw = base64.b64decode(datum, validate=True)
        # trailing bits of the last symbol must be zero
        if base64.b64encode(raw) != datum.encode("ascii"):
            raise binascii.Error("Non-canonical base64 encoding")
        return raw
    elif encoding is BlobEncoding.HEX:
        # unhexlify rejects whitespace, which bytes.fromhex would tolerate
        return binascii.unhexlify(datum)
    else:
        assert_never(encoding)


def decode_blob(blob: BinaryBlob) -> list[bytes]:
    """Decode every item of ``blob`` with its declared encoding.

    The first malformed item aborts the whole blob; no partial result is
    returned.

    Raises:
        DecodeError: an item is not valid for the blob's encoding. ``index``
            names the offending item.
    """
    decoded: list[bytes] = []
    for index, datum in enumerate(blob.data):
        try:
            decoded.append(_decode_item(datum, blob.encoding))
        except (binascii.Error, ValueError) as exc:
            raise DecodeError(
                f"Item {index} of binary blob is not valid {blob.encoding.value}: {exc}",
                index=index,
                encoding=blob.encoding.value,
            ) from exc
    return decoded


def encode_payloads(payloads: Iterable[bytes], encoding: BlobEncoding) -> list[str]:
    """Encode raw payloads, lowercase hex or padded standard base64."""
    if encoding is BlobEncoding.BASE64:
        return [base64.b64encode(payload).decode("ascii") for payload in payloads]
    elif encoding is BlobEncoding.HEX:
        return [payload.hex() for payload in payloads]
    else:
        assert_never(encoding)


__all__ = ["decode_blob", "encode_payloads"]
