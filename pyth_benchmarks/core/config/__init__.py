"""Configuration management module."""

from pyth_benchmarks.core.config.settings import (
    BenchmarksConfig,
    ConfigManager,
    LoggingConfig,
    PythBenchmarksConfig,
    load_config_from_env,
)

__all__ = [
    "BenchmarksConfig",
    "ConfigManager",
    "LoggingConfig",
    "PythBenchmarksConfig",
    "load_config_from_env",
]
