"""Logging utilities."""

from pyth_benchmarks.core.logging.config import LogConfig
from pyth_benchmarks.core.logging.logger import (
    configure_logging,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "configure_logging",
    "log_context",
    "logger",
]
