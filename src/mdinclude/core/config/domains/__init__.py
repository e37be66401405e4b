"""Domain-specific configuration accessors."""
from __future__ import annotations

from .includes import IncludesConfig
from .logging import LoggingConfig

__all__ = ["IncludesConfig", "LoggingConfig"]
