"""Recursive ``@include`` resolution.

Walks the directives found by the scanner depth-first, reads each target via
an injected read capability, resolves the fetched text against the target's
directory and splices it in place of the directive line.

Nothing raised by a single include aborts the walk: missing files, read
failures, cycles, depth overflow and malformed directives are recorded on the
returned ``ResolveResult`` and processing continues with the next directive.
The only exceptions that escape are those a read capability raises outside
its contract (anything that is not an ``OSError``).

Cycle detection uses the ancestor chain of the current branch only, so the
same file included from two independent branches (diamond inclusion) is
expanded twice rather than reported as circular.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Optional, Tuple

from .models import (
    DEFAULT_MAX_DEPTH,
    ErrorKind,
    IncludeDirective,
    ResolveError,
    ResolveResult,
    UnresolvedMode,
)
from .readers import ReadFile, make_file_reader
from .scanner import PathLike, normalize_path, scan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolveOptions:
    """Per-call resolution settings.

    ``ancestors`` is the chain of files being expanded above the current
    document (outermost first) and ``current_depth`` its length below the
    top-level call; both are advanced by the resolver itself and only seeded
    by callers.
    """

    read_file: Optional[ReadFile] = None
    ancestors: Tuple[str, ...] = ()
    max_depth: int = DEFAULT_MAX_DEPTH
    current_depth: int = 0
    unresolved: UnresolvedMode = UnresolvedMode.KEEP
    source_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        object.__setattr__(self, "ancestors", _normalize_ancestors(self.ancestors))
        object.__setattr__(self, "unresolved", UnresolvedMode.parse(self.unresolved))

    def descend(self, path: str) -> "ResolveOptions":
        """Options for expanding ``path`` one level below the current document."""
        return replace(
            self,
            ancestors=self.ancestors + (path,),
            current_depth=self.current_depth + 1,
            source_path=path,
        )


def _normalize_ancestors(ancestors: Iterable[str]) -> Tuple[str, ...]:
    chain: List[str] = []
    for p in ancestors:
        normalized = normalize_path(os.fspath(p), os.getcwd())
        if normalized not in chain:
            chain.append(normalized)
    return tuple(chain)


async def _call_reader(read_file: ReadFile, path: str) -> str:
    value: Any = read_file(path)
    if inspect.isawaitable(value):
        value = await value
    if not isinstance(value, str):
        raise TypeError(f"Read capability returned {type(value).__name__} for {path}, expected str")
    return value


def _strip_final_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


def _unresolved_line(directive: IncludeDirective, error: ResolveError, mode: UnresolvedMode) -> str:
    if mode is UnresolvedMode.MARKER:
        return f"<!-- ERROR: {error.message} -->"
    if mode is UnresolvedMode.REMOVE:
        return ""
    return directive.original_line


@dataclass
class _Walk:
    """Mutable accumulators for one document level."""

    lines: List[str]
    included_paths: List[str] = field(default_factory=list)
    errors: List[ResolveError] = field(default_factory=list)


class IncludeResolver:
    """Resolve ``@include`` directives using an injected read capability.

    Args:
        read_file: Read capability; defaults to UTF-8 filesystem reads
        max_depth: Maximum nesting of includes below the top-level document
        unresolved: Rendering of directives that could not be expanded
    """

    def __init__(
        self,
        read_file: Optional[ReadFile] = None,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        unresolved: UnresolvedMode | str = UnresolvedMode.KEEP,
    ) -> None:
        self.read_file: ReadFile = read_file or make_file_reader()
        self.max_depth = max_depth
        self.unresolved = UnresolvedMode.parse(unresolved)

    def options(self, **overrides: Any) -> ResolveOptions:
        base = {
            "read_file": self.read_file,
            "max_depth": self.max_depth,
            "unresolved": self.unresolved,
        }
        base.update(overrides)
        return ResolveOptions(**base)

    async def resolve(
        self,
        content: str,
        base_path: PathLike,
        *,
        source_path: Optional[str] = None,
        ancestors: Iterable[str] = (),
    ) -> ResolveResult:
        """Resolve every directive in ``content`` relative to ``base_path``."""
        opts = self.options(source_path=source_path, ancestors=tuple(ancestors))
        return await resolve(content, base_path, opts)

    async def resolve_file(self, path: PathLike) -> ResolveResult:
        """Read ``path`` and resolve it; the file itself seeds the ancestor chain."""
        return await resolve_file(path, self.options())


async def resolve(
    content: str,
    base_path: PathLike,
    options: Optional[ResolveOptions] = None,
    **overrides: Any,
) -> ResolveResult:
    """Resolve ``content`` against ``base_path``.

    Args:
        content: Document text
        base_path: Directory that relative include paths are resolved against
        options: Resolution options; keyword ``overrides`` replace single fields

    Returns:
        ResolveResult with the merged content, every included path (in
        expansion order, duplicates kept) and every error recorded.
    """
    opts = options or ResolveOptions()
    if overrides:
        opts = replace(opts, **overrides)
    if opts.read_file is None:
        opts = replace(opts, read_file=make_file_reader())

    result = await _resolve_level(content, os.path.abspath(os.fspath(base_path)), opts)
    if opts.current_depth == 0:
        logger.debug(
            "Resolved %d include(s) with %d error(s) under %s",
            len(result.included_paths),
            len(result.errors),
            base_path,
        )
    return result


async def _resolve_level(content: str, base_path: str, options: ResolveOptions) -> ResolveResult:
    scanned = scan(content, base_path)
    walk = _Walk(lines=content.split("\n"))
    document = options.source_path or base_path

    for scan_error in scanned.errors:
        walk.errors.append(
            ResolveError(
                file_path=document,
                message=scan_error.message,
                kind=ErrorKind.PARSE_ERROR,
                line_number=scan_error.line_number,
                source_path=options.source_path,
            )
        )

    for directive in scanned.directives:
        await _expand_directive(directive, options, walk)

    return ResolveResult(
        content="\n".join(walk.lines),
        included_paths=walk.included_paths,
        errors=walk.errors,
    )


async def _expand_directive(directive: IncludeDirective, options: ResolveOptions, walk: _Walk) -> None:
    target = directive.resolved_path
    index = directive.line_number - 1

    def _fail(kind: ErrorKind, message: str) -> None:
        error = ResolveError(
            file_path=target,
            message=message,
            kind=kind,
            line_number=directive.line_number,
            source_path=options.source_path,
        )
        walk.errors.append(error)
        walk.lines[index] = _unresolved_line(directive, error, options.unresolved)
        logger.debug("Skipped include %s (%s): %s", target, kind.value, message)

    if options.current_depth >= options.max_depth:
        _fail(ErrorKind.MAX_DEPTH, f"Include depth exceeded (max {options.max_depth}) at {target}")
        return

    if target in options.ancestors:
        chain = " -> ".join([*options.ancestors, target])
        _fail(ErrorKind.CIRCULAR_INCLUDE, f"Circular include detected: {chain}")
        return

    try:
        included = await _call_reader(options.read_file, target)
    except FileNotFoundError:
        _fail(ErrorKind.FILE_NOT_FOUND, f"Include not found: {target}")
        return
    except OSError as exc:
        _fail(ErrorKind.READ_ERROR, f"Failed to read include {target}: {exc}")
        return

    logger.debug("Including %s (depth %d)", target, options.current_depth + 1)
    walk.included_paths.append(target)
    nested = await _resolve_level(included, os.path.dirname(target), options.descend(target))
    walk.lines[index] = _strip_final_newline(nested.content)
    walk.included_paths.extend(nested.included_paths)
    walk.errors.extend(nested.errors)


async def resolve_file(path: PathLike, options: Optional[ResolveOptions] = None, **overrides: Any) -> ResolveResult:
    """Read the document at ``path`` and resolve its includes.

    A root document that cannot be read yields an empty result carrying a
    single ``file_not_found`` or ``read_error`` error.
    """
    opts = options or ResolveOptions()
    if overrides:
        opts = replace(opts, **overrides)
    if opts.read_file is None:
        opts = replace(opts, read_file=make_file_reader())

    root = normalize_path(os.fspath(path), os.getcwd())
    try:
        content = await _call_reader(opts.read_file, root)
    except FileNotFoundError:
        return ResolveResult(
            content="",
            errors=[ResolveError(file_path=root, message=f"File not found: {root}", kind=ErrorKind.FILE_NOT_FOUND)],
        )
    except OSError as exc:
        return ResolveResult(
            content="",
            errors=[ResolveError(file_path=root, message=f"Failed to read {root}: {exc}", kind=ErrorKind.READ_ERROR)],
        )

    opts = replace(opts, ancestors=opts.ancestors + (root,), source_path=root)
    return await resolve(content, os.path.dirname(root), opts)


def resolve_sync(content: str, base_path: PathLike, options: Optional[ResolveOptions] = None, **overrides: Any) -> ResolveResult:
    """Blocking wrapper around :func:`resolve` for callers without an event loop."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(resolve(content, base_path, options, **overrides))
    raise RuntimeError("resolve_sync() cannot be called from a running event loop; await resolve() instead")


__all__ = [
    "IncludeResolver",
    "ResolveOptions",
    "resolve",
    "resolve_file",
    "resolve_sync",
]
