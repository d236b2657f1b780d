"""Benchmarks client exception hierarchy."""

from typing import Any

from pyth_benchmarks.core.exceptions.codes import ErrorCode


class BenchmarksError(Exception):
    """Base class for every failure raised by the Benchmarks client."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.GENERAL,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: human readable error message
            error_code: standardised error code
            details: additional structured context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Return a serialisable payload representing the error."""

        return {
            "code": self.error_code.value,
            "message": self.message,
            "details": dict(self.details),
        }


class ConfigurationError(BenchmarksError):
    """The client is missing configuration required to issue a request."""

    def __init__(self, message: str, setting: str | None = None, details: dict[str, Any] | None = None):
        super_details = details or {}
        if setting:
            super_details["setting"] = setting
        super().__init__(message, ErrorCode.CONFIGURATION, super_details)
        self.setting = setting


class TransportError(BenchmarksError):
    """Connection failure, timeout or non-2xx response from the provider."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        error_code: ErrorCode = ErrorCode.TRANSPORT,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if url is not None:
            super_details["url"] = url
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, error_code, super_details)
        self.url = url
        self.status_code = status_code


class SchemaError(BenchmarksError):
    """The provider response does not match the expected wire schema."""

    def __init__(
        self,
        message: str,
        validation_errors: list[dict[str, Any]] | None = None,
        error_code: ErrorCode = ErrorCode.SCHEMA,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if validation_errors:
            super_details["validation_errors"] = validation_errors
        super().__init__(message, error_code, super_details)
        self.validation_errors = validation_errors or []


class AlignmentError(SchemaError):
    """Parsed feeds and decoded update items differ in count."""

    def __init__(self, parsed_count: int, update_count: int):
        super().__init__(
            f"Response carries {parsed_count} parsed price feeds but {update_count} update data items",
            error_code=ErrorCode.ALIGNMENT,
            details={"parsed_count": parsed_count, "update_count": update_count},
        )
        self.parsed_count = parsed_count
        self.update_count = update_count


class DecodeError(BenchmarksError):
    """An item of a binary blob is malformed for its declared encoding."""

    def __init__(self, message: str, index: int, encoding: str, details: dict[str, Any] | None = None):
        super_details = details or {}
        super_details.update({"index": index, "encoding": encoding})
        super().__init__(message, ErrorCode.DECODE, super_details)
        self.index = index
        self.encoding = encoding
