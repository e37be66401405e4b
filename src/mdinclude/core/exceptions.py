from __future__ import annotations

from typing import Any, Dict, Mapping


class MdIncludeError(Exception):
    """Base exception for mdinclude."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(MdIncludeError, ValueError):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        MdIncludeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class IncludeReadError(MdIncludeError, OSError):
    """Raised by file readers for read failures other than a missing file."""

    def __init__(
        self,
        message: str = "",
        *,
        path: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if path:
            ctx["path"] = path
        MdIncludeError.__init__(self, message, context=ctx)
        OSError.__init__(self, message)


class ProjectRootError(MdIncludeError, RuntimeError):
    """Raised when the project root cannot be determined."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        MdIncludeError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


__all__ = [
    "MdIncludeError",
    "ConfigError",
    "IncludeReadError",
    "ProjectRootError",
]
