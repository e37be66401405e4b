"""Text rendering shared by the includes commands."""
from __future__ import annotations

from typing import List

from mdinclude.core.includes import ResolveError, ResolveResult


def format_error(error: ResolveError) -> str:
    where = error.source_path or error.file_path
    if error.line_number is not None:
        where = f"{where}:{error.line_number}"
    return f"{where}: [{error.kind.value}] {error.message}"


def error_lines(result: ResolveResult) -> List[str]:
    return [format_error(e) for e in result.errors]


def summary_line(result: ResolveResult) -> str:
    n_paths = len(result.included_paths)
    n_errors = len(result.errors)
    return f"{n_paths} include(s) resolved, {n_errors} error(s)"
