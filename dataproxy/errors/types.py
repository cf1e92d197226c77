"""Specific error types for data-proxy."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

from .base import DataProxyError


class ConfigurationError(DataProxyError):
    """Invalid, missing or unreadable configuration."""

    default_code = "CONFIG"

    @classmethod
    def invalid_value(
        cls,
        field_path: str,
        value: Any,
        expected: str,
        config_path: Optional[Path] = None,
    ) -> "ConfigurationError":
        """A field that failed validation."""
        return cls(
            f"Invalid value for {field_path}: got {value!r}, expected {expected}",
            error_code="CONFIG_INVALID_VALUE",
            field_path=field_path,
            invalid_value=str(value),
            expected_type=expected,
            config_path=str(config_path) if config_path else None,
        ).with_suggestion(f"Ensure {field_path} is a valid {expected}")

    @classmethod
    def file_not_found(cls, path: Path) -> "ConfigurationError":
        return cls(
            f"Configuration file not found: {path}",
            error_code="CONFIG_FILE_NOT_FOUND",
            config_path=str(path),
        )

    @classmethod
    def unsupported_format(cls, path: Path) -> "ConfigurationError":
        return cls(
            f"Unsupported configuration format: {path.suffix or '<none>'}",
            error_code="CONFIG_UNSUPPORTED_FORMAT",
            config_path=str(path),
        ).with_suggestion("Use a .yaml, .yml or .json file")


class ForwardingError(ConfigurationError):
    """A dataset class declared a method it may not forward."""

    default_code = "FORWARD"

    @classmethod
    def reserved_name(cls, method_name: str, proxy_class: str) -> "ForwardingError":
        return cls(
            f"Cannot forward reserved method '{method_name}' on {proxy_class}",
            error_code="FORWARD_RESERVED_NAME",
            method_name=method_name,
            proxy_class=proxy_class,
        ).with_suggestion(
            f"Remove '{method_name}' from the forward() call; the dataset "
            "provides its own implementation"
        )

    @classmethod
    def invalid_name(cls, name: Any, proxy_class: str) -> "ForwardingError":
        return cls(
            f"Method names must be strings, got {type(name).__name__}",
            error_code="FORWARD_INVALID_NAME",
            proxy_class=proxy_class,
        )


class DataError(DataProxyError):
    """A dataset operation referred to data that is not there."""

    default_code = "DATA"

    @classmethod
    def missing_column(cls, column: str, available_columns: Sequence[str]) -> "DataError":
        available = list(available_columns)
        return cls(
            f"Column '{column}' not found in schema",
            error_code="DATA_MISSING_COLUMN",
            column=column,
            available_columns=available,
        ).with_suggestion(f"Available columns: {', '.join(map(str, available))}")
