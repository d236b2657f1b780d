"""Standardised error codes."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to every :class:`BenchmarksError`."""

    GENERAL = "GENERAL_ERROR"
    CONFIGURATION = "CONFIGURATION_ERROR"
    TRANSPORT = "TRANSPORT_ERROR"
    TIMEOUT = "TIMEOUT_ERROR"
    HTTP_STATUS = "HTTP_STATUS_ERROR"
    SCHEMA = "SCHEMA_ERROR"
    ALIGNMENT = "ALIGNMENT_ERROR"
    DECODE = "DECODE_ERROR"
