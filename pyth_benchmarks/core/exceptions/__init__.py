"""Exception handling module."""

from pyth_benchmarks.core.exceptions.base import (
    AlignmentError,
    BenchmarksError,
    ConfigurationError,
    DecodeError,
    SchemaError,
    TransportError,
)
from pyth_benchmarks.core.exceptions.codes import ErrorCode

__all__ = [
    "BenchmarksError",
    "ConfigurationError",
    "TransportError",
    "SchemaError",
    "AlignmentError",
    "DecodeError",
    "ErrorCode",
]
