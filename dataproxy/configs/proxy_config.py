"""
Configuration for dataset proxies.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger
from pydantic import BaseModel, ValidationError, field_validator

from dataproxy.errors import ConfigurationError
from dataproxy.utils.config_loader import ConfigLoader
from dataproxy.utils.logging_config import LoggingConfig

ENV_PREFIX = "DATAPROXY_"

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ProxyConfig(BaseModel):
    """Process-wide settings consulted by dataset classes."""

    # Raise on reserved names passed to forward(); skip them with a warning otherwise
    strict_forwarding: bool = True

    # Logging
    log_level: str = "INFO"
    log_to_console: bool = True
    log_file: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any], source: Optional[Path] = None) -> "ProxyConfig":
        """Create from dictionary, translating validation failures."""
        try:
            return cls(**config_dict)
        except ValidationError as e:
            first = e.errors()[0]
            field_path = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError.invalid_value(
                field_path,
                first.get("input"),
                first["msg"],
                config_path=source,
            ) from e

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ProxyConfig":
        """Load configuration from a YAML or JSON file.

        A top-level ``dataproxy`` section is used when present, so the settings
        can live inside a larger application config.
        """
        path = Path(path)
        raw = ConfigLoader.load(path)
        section = raw.get("dataproxy", raw)
        return cls.from_dict(section, source=path)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "ProxyConfig":
        """Build configuration from ``DATAPROXY_*`` environment variables."""
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for name in ("strict_forwarding", "log_level", "log_to_console", "log_file"):
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        return cls.from_dict(values)

    def merged(self, **overrides: Any) -> "ProxyConfig":
        """Return a copy with ``overrides`` applied on top."""
        merged = ConfigLoader.merge_configs(self.model_dump(), overrides)
        return self.from_dict(merged)


_default_config: Optional[ProxyConfig] = None


def get_config() -> ProxyConfig:
    """Get the process-wide configuration, creating the default lazily."""
    global _default_config
    if _default_config is None:
        _default_config = ProxyConfig()
    return _default_config


def set_config(config: Optional[ProxyConfig]) -> None:
    """Replace the process-wide configuration. ``None`` restores defaults."""
    global _default_config
    _default_config = config


def configure(config: Optional[ProxyConfig] = None) -> LoggingConfig:
    """Install ``config`` as the process-wide default and set up logging."""
    config = config or get_config()
    set_config(config)
    logging_config = LoggingConfig(
        log_level=config.log_level,
        log_to_console=config.log_to_console,
        log_file=config.log_file,
    )
    logger.debug(f"Configured data-proxy (strict_forwarding={config.strict_forwarding})")
    return logging_config
