"""
Configuration system for dataset proxies.
"""

from .proxy_config import ProxyConfig, configure, get_config, set_config

__all__ = [
    "ProxyConfig",
    "configure",
    "get_config",
    "set_config",
]
