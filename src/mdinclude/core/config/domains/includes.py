"""Configuration for @include resolution (``includes`` section)."""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict

from mdinclude.core.includes.models import DEFAULT_MAX_DEPTH, UnresolvedMode

from ..base import BaseDomainConfig


class IncludesConfig(BaseDomainConfig):
    """Accessor for ``includes.*`` settings."""

    def _config_section(self) -> str:
        return "includes"

    @cached_property
    def max_depth(self) -> int:
        return int(self.section.get("max_depth", DEFAULT_MAX_DEPTH))

    @cached_property
    def unresolved(self) -> UnresolvedMode:
        return UnresolvedMode.parse(self.section.get("unresolved", UnresolvedMode.KEEP.value))

    @cached_property
    def encoding(self) -> str:
        return str(self.section.get("encoding") or "utf-8")

    def resolver_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``IncludeResolver`` (excluding the reader)."""
        return {"max_depth": self.max_depth, "unresolved": self.unresolved}


__all__ = ["IncludesConfig"]
