"""mdinclude configuration: layered YAML, env overrides, schema validation."""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config
from .domains import IncludesConfig, LoggingConfig
from .manager import ConfigManager

__all__ = [
    "BaseDomainConfig",
    "ConfigManager",
    "IncludesConfig",
    "LoggingConfig",
    "clear_all_caches",
    "get_cached_config",
]
