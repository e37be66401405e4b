"""Configuration for CLI logging (``logging`` section)."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from ..base import BaseDomainConfig


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def level(self) -> str:
        return str(self.section.get("level") or "WARNING").upper()

    @cached_property
    def file(self) -> Optional[Path]:
        value = self.section.get("file")
        if isinstance(value, str) and value.strip():
            return Path(value.strip()).expanduser()
        return None


__all__ = ["LoggingConfig"]
