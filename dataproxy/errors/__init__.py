"""Errors raised by data-proxy."""

from .base import DataProxyError, ErrorContext
from .types import ConfigurationError, DataError, ForwardingError

__all__ = [
    "DataProxyError",
    "ErrorContext",
    "ConfigurationError",
    "DataError",
    "ForwardingError",
]
