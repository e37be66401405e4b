"""Data records produced by the directive scanner and the inclusion resolver."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

# Default maximum include depth
DEFAULT_MAX_DEPTH = 10


class ErrorKind(str, Enum):
    """Category of a resolve-time error."""

    FILE_NOT_FOUND = "file_not_found"
    CIRCULAR_INCLUDE = "circular_include"
    MAX_DEPTH = "max_depth"
    READ_ERROR = "read_error"
    PARSE_ERROR = "parse_error"


class UnresolvedMode(str, Enum):
    """How a directive that could not be expanded appears in merged output."""

    KEEP = "keep"  # directive line left verbatim
    MARKER = "marker"  # <!-- ERROR: ... --> comment
    REMOVE = "remove"  # empty line

    @classmethod
    def parse(cls, value: "UnresolvedMode | str") -> "UnresolvedMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown unresolved mode {value!r} (expected one of: {allowed})") from None


@dataclass(frozen=True)
class IncludeDirective:
    """A recognised ``@include <path>`` line."""

    original_line: str
    line_number: int  # 1-indexed
    raw_path: str
    resolved_path: str


@dataclass(frozen=True)
class ScanError:
    """A line that starts an ``@include`` directive but carries no path."""

    line_number: int
    line: str
    message: str


@dataclass(frozen=True)
class ScanResult:
    original_content: str
    directives: Tuple[IncludeDirective, ...] = ()
    errors: Tuple[ScanError, ...] = ()


@dataclass(frozen=True)
class ResolveError:
    """An error recorded while walking the inclusion tree.

    ``file_path`` names the include target for directive-level errors and the
    scanned document for parse errors. ``source_path`` is the document holding
    the offending line when it is known.
    """

    file_path: str
    message: str
    kind: ErrorKind
    line_number: Optional[int] = None
    source_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "filePath": self.file_path,
            "message": self.message,
            "type": self.kind.value,
        }
        if self.line_number is not None:
            payload["lineNumber"] = self.line_number
        if self.source_path is not None:
            payload["sourcePath"] = self.source_path
        return payload


@dataclass
class ResolveResult:
    """Merged content plus everything included and every error recorded."""

    content: str
    included_paths: List[str] = field(default_factory=list)
    errors: List[ResolveError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def errors_of(self, kind: ErrorKind) -> List[ResolveError]:
        return [e for e in self.errors if e.kind is kind]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "includedPaths": list(self.included_paths),
            "errors": [e.to_dict() for e in self.errors],
        }


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ErrorKind",
    "UnresolvedMode",
    "IncludeDirective",
    "ScanError",
    "ScanResult",
    "ResolveError",
    "ResolveResult",
]
