"""Configuration management for the Benchmarks client."""

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from loguru import logger

DEFAULT_CONFIG_PATH = Path.home() / ".pyth_benchmarks" / "config.toml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class BenchmarksConfig:
    """Settings for reaching the Benchmarks provider.

    ``endpoint`` has no default: a client without one refuses to fetch.
    """

    endpoint: str | None = None
    user_agent: str = "pyth-benchmarks/0.1.0"
    strict_alignment: bool = False


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    file: str | None = None


@dataclass
class PythBenchmarksConfig:
    """Top-level configuration."""

    benchmarks: BenchmarksConfig = field(default_factory=BenchmarksConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "PythBenchmarksConfig":
        """Build a configuration from a nested dictionary."""
        return cls(
            benchmarks=_build_section(BenchmarksConfig, "benchmarks", config_dict),
            logging=_build_section(LoggingConfig, "logging", config_dict),
        )


def _build_section(section_cls: type, name: str, config_dict: dict[str, Any]) -> Any:
    """Instantiate one config section, dropping keys it does not define."""
    values = dict(config_dict.get(name, {}))
    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        logger.warning("Ignoring unknown [{section}] settings: {keys}", section=name, keys=", ".join(unknown))
    return section_cls(**{k: v for k, v in values.items() if k in known})


class ConfigManager:
    """Loads configuration from a TOML file, then applies environment overrides."""

    def __init__(self, config_path: Path | None = None, environ: dict[str, str] | None = None):
        """
        Args:
            config_path: TOML file to read; defaults to ``~/.pyth_benchmarks/config.toml``
            environ: environment mapping; defaults to ``os.environ``
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.environ = os.environ if environ is None else environ
        self.config = self._load_config()

    def _load_config(self) -> PythBenchmarksConfig:
        config_dict: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning("Ignoring unreadable config file {path}: {error}", path=str(self.config_path), error=e)
                config_dict = {}

        deep_update(config_dict, load_config_from_env(self.environ))
        return PythBenchmarksConfig.from_dict(config_dict)

    def get_config(self) -> PythBenchmarksConfig:
        return self.config


def deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``u`` into ``d`` in place."""
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = deep_update(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def load_config_from_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Read ``PYTH_BENCHMARKS_*`` variables into a nested configuration dict."""
    env = os.environ if environ is None else environ
    config: dict[str, Any] = {}

    benchmarks_config: dict[str, Any] = {}
    endpoint = env.get("PYTH_BENCHMARKS_ENDPOINT")
    if endpoint:
        benchmarks_config["endpoint"] = endpoint
    user_agent = env.get("PYTH_BENCHMARKS_USER_AGENT")
    if user_agent:
        benchmarks_config["user_agent"] = user_agent
    strict_alignment = env.get("PYTH_BENCHMARKS_STRICT_ALIGNMENT")
    if strict_alignment is not None:
        benchmarks_config["strict_alignment"] = strict_alignment.strip().lower() in _TRUE_VALUES
    if benchmarks_config:
        config["benchmarks"] = benchmarks_config

    log_level = env.get("PYTH_BENCHMARKS_LOG_LEVEL")
    if log_level:
        config["logging"] = {"level": log_level.upper()}

    return config
