"""``@include`` directive engine.

- ``scanner``: finds directives in a document and normalises their paths (pure).
- ``resolver``: recursively expands directives via an injected read capability.
- ``readers``: filesystem and in-memory read capabilities.
"""

from .models import (
    DEFAULT_MAX_DEPTH,
    ErrorKind,
    IncludeDirective,
    ResolveError,
    ResolveResult,
    ScanError,
    ScanResult,
    UnresolvedMode,
)
from .readers import MemoryReader, ReadFile, make_file_reader, read_text_file
from .resolver import IncludeResolver, ResolveOptions, resolve, resolve_file, resolve_sync
from .scanner import (
    extract_include_path,
    is_include_directive,
    normalize_path,
    parse_include_line,
    scan,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ErrorKind",
    "IncludeDirective",
    "ResolveError",
    "ResolveResult",
    "ScanError",
    "ScanResult",
    "UnresolvedMode",
    "MemoryReader",
    "ReadFile",
    "make_file_reader",
    "read_text_file",
    "IncludeResolver",
    "ResolveOptions",
    "resolve",
    "resolve_file",
    "resolve_sync",
    "extract_include_path",
    "is_include_directive",
    "normalize_path",
    "parse_include_line",
    "scan",
]
