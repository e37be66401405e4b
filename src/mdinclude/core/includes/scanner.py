"""Directive scanner for ``@include <path>`` lines.

Supported path formats:
- Absolute: ``@include /home/user/.claude/rules.md``
- Home-relative: ``@include ~/.claude/languages/go.md``
- Relative: ``@include ./local-rules.md`` (relative to the including file)

The keyword must start the line (leading spaces or tabs allowed) and is
case-sensitive, so prose mentioning ``@include`` mid-line and the legacy
``@path/to/file.md`` syntax are never picked up.

Scanning is pure: no filesystem access, no exceptions for any string input.
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import List, Optional, Union

from .models import IncludeDirective, ScanError, ScanResult

PathLike = Union[str, os.PathLike]

# Directive with a path: keyword, at least one whitespace, then the rest of the line
_INCLUDE_RE = re.compile(r"^\s*@include\s+(.+)$")

# Keyword with nothing but optional whitespace after it
_INCOMPLETE_INCLUDE_RE = re.compile(r"^\s*@include\s*$")

EMPTY_PATH_MESSAGE = "Invalid @include directive: path cannot be empty"

_HOME_TOKEN = "~"


def _separators() -> str:
    seps = {"/", os.sep}
    if os.altsep:
        seps.add(os.altsep)
    return "".join(sorted(seps))


def _home_prefixes() -> tuple[str, ...]:
    return tuple(_HOME_TOKEN + s for s in _separators())


def _normpath(path: str) -> str:
    normalized = os.path.normpath(path)
    # POSIX keeps a leading "//" as implementation-defined; collapse it like any other run.
    if os.sep == "/" and normalized.startswith("//") and not normalized.startswith("///"):
        normalized = normalized[1:]
    return normalized


def normalize_path(raw_path: str, base_path: PathLike) -> str:
    """Resolve ``raw_path`` to an absolute, normalised path string.

    Args:
        raw_path: Path as written in the directive (surrounding whitespace is ignored)
        base_path: Directory that relative paths are resolved against

    Returns:
        Absolute path. ``..`` and ``.`` segments and repeated separators are
        collapsed; symlinks are not resolved and the filesystem is not touched.
    """
    trimmed = raw_path.strip()

    if trimmed == _HOME_TOKEN:
        return _normpath(str(Path.home()))
    if trimmed.startswith(_home_prefixes()):
        # "~//x" still means a path under home, never the filesystem root
        remainder = trimmed[2:].lstrip(_separators())
        return _normpath(os.path.join(str(Path.home()), remainder))

    if os.path.isabs(trimmed):
        return _normpath(trimmed)

    base = os.path.abspath(os.fspath(base_path))
    return _normpath(os.path.join(base, trimmed))


def extract_include_path(line: str) -> Optional[str]:
    """Return the trimmed path of a directive line, or None."""
    match = _INCLUDE_RE.match(line)
    if not match:
        return None
    raw_path = match.group(1).strip()
    return raw_path or None


def is_include_directive(line: str) -> bool:
    """True when ``line`` is an ``@include`` directive carrying a path."""
    return extract_include_path(line) is not None


def parse_include_line(line: str, line_number: int, base_path: PathLike) -> Optional[IncludeDirective]:
    """Parse a single line.

    Returns:
        The directive, or None when the line is not a directive or its path is empty.
    """
    raw_path = extract_include_path(line)
    if raw_path is None:
        return None
    return IncludeDirective(
        original_line=line,
        line_number=line_number,
        raw_path=raw_path,
        resolved_path=normalize_path(raw_path, base_path),
    )


def scan(content: str, base_path: PathLike) -> ScanResult:
    """Find every ``@include`` directive in ``content``.

    Args:
        content: Document text (split on line feeds only)
        base_path: Directory of the document, used for relative paths

    Returns:
        ScanResult with directives in line order and one ScanError for every
        keyword line without a usable path.
    """
    directives: List[IncludeDirective] = []
    errors: List[ScanError] = []

    for index, line in enumerate(content.split("\n")):
        line_number = index + 1

        if _INCLUDE_RE.match(line):
            directive = parse_include_line(line, line_number, base_path)
            if directive is not None:
                directives.append(directive)
            else:
                errors.append(ScanError(line_number=line_number, line=line, message=EMPTY_PATH_MESSAGE))
            continue

        if _INCOMPLETE_INCLUDE_RE.match(line):
            errors.append(ScanError(line_number=line_number, line=line, message=EMPTY_PATH_MESSAGE))

    return ScanResult(
        original_content=content,
        directives=tuple(directives),
        errors=tuple(errors),
    )


__all__ = [
    "EMPTY_PATH_MESSAGE",
    "normalize_path",
    "extract_include_path",
    "is_include_directive",
    "parse_include_line",
    "scan",
]
