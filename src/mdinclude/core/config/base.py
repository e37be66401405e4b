"""Base class for domain-specific configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional

from .cache import get_cached_config


class BaseDomainConfig(ABC):
    """Abstract base class for domain-specific configuration accessors.

    Usage:
        class MyConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "mySection"

            @cached_property
            def my_setting(self) -> str:
                return self.section.get("mySetting", "default")
    """

    def __init__(self, repo_root: Optional[Path] = None, *, config: Optional[Dict[str, Any]] = None) -> None:
        """Initialize domain config.

        Args:
            repo_root: Repository root path. Uses auto-detection if None.
            config: Pre-loaded configuration; skips the cache when given.
        """
        self._repo_root = repo_root
        self._config = config if config is not None else get_cached_config(repo_root=repo_root)

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """This domain's configuration section, or an empty dict."""
        return self._config.get(self._config_section(), {}) or {}


__all__ = ["BaseDomainConfig"]
