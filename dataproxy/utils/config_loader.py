"""YAML and JSON configuration loading.

YAML values may reference environment variables as ``${NAME}`` or
``${NAME:default}``; the substituted text is parsed again as YAML, so
``${STRICT:false}`` gives a boolean.
"""

import json
import os
import re
from pathlib import Path
from typing import Any, Callable, Dict, Union

import yaml
from loguru import logger

from dataproxy.errors import ConfigurationError

_ENV_REFERENCE = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


class EnvVarLoader(yaml.SafeLoader):
    """Safe YAML loader resolving ``${VAR:default}`` references."""


def _expand_env(loader: EnvVarLoader, node: yaml.ScalarNode) -> Any:
    raw = loader.construct_scalar(node)
    expanded = _ENV_REFERENCE.sub(
        lambda match: os.environ.get(
            match.group(1),
            match.group(2) if match.group(2) is not None else match.group(0),
        ),
        raw,
    )
    return yaml.safe_load(expanded)


EnvVarLoader.add_implicit_resolver('!env', re.compile(r'.*\$\{[^}]+\}.*'), None)
EnvVarLoader.add_constructor('!env', _expand_env)


def _read_yaml(stream) -> Any:
    return yaml.load(stream, Loader=EnvVarLoader)


_READERS: Dict[str, Callable[[Any], Any]] = {
    '.yaml': _read_yaml,
    '.yml': _read_yaml,
    '.json': json.load,
}


class ConfigLoader:
    """Reads configuration mappings from YAML or JSON files."""

    @staticmethod
    def detect_format(file_path: Union[str, Path]) -> str:
        """Return ``'yaml'`` or ``'json'`` based on the file extension."""
        path = Path(file_path)
        suffix = path.suffix.lower()
        if suffix not in _READERS:
            raise ConfigurationError.unsupported_format(path)
        return 'json' if suffix == '.json' else 'yaml'

    @classmethod
    def load(cls, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Load a configuration mapping; an empty file gives ``{}``."""
        path = Path(file_path)
        if not path.exists():
            raise ConfigurationError.file_not_found(path)

        fmt = cls.detect_format(path)
        reader = _READERS[path.suffix.lower()]
        try:
            with open(path, 'r') as f:
                config = reader(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError.from_exception(
                e, f"Failed to parse {path}", config_path=str(path)
            ) from e

        config = {} if config is None else config
        if not isinstance(config, dict):
            raise ConfigurationError.invalid_value("<root>", config, "mapping", config_path=path)

        logger.debug(f"Loaded {fmt} configuration from {path}")
        return config

    @classmethod
    def merge_configs(cls, *configs: Dict[str, Any], deep: bool = True) -> Dict[str, Any]:
        """Merge configuration layers; later layers win."""
        result: Dict[str, Any] = {}
        for config in configs:
            result = cls._deep_merge(result, config) if deep else {**result, **config}
        return result

    @staticmethod
    def _deep_merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
        result = dict(base)
        for key, value in update.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
