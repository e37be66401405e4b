"""Read capabilities consumed by the inclusion resolver.

A read capability maps an absolute path to the file's text. It signals a
missing file with ``FileNotFoundError`` and any other I/O failure with an
``OSError`` (``IncludeReadError`` for the readers defined here). It may be a
plain function or a coroutine function.
"""
from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Mapping, Union

from mdinclude.core.exceptions import IncludeReadError

ReadFile = Callable[[str], Union[str, Awaitable[str]]]


def _read_text(path: str, encoding: str) -> str:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if p.is_dir():
        raise IncludeReadError(f"Is a directory: {path}", path=path)
    try:
        return p.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise IncludeReadError(f"Cannot decode {path} as {encoding}: {exc.reason}", path=path) from exc


async def read_text_file(path: str, *, encoding: str = "utf-8") -> str:
    """Read ``path`` off the event loop.

    Raises:
        FileNotFoundError: If the path does not exist
        IncludeReadError: If the path is a directory or cannot be decoded
        OSError: For permission and other filesystem failures
    """
    return await asyncio.to_thread(_read_text, path, encoding)


def make_file_reader(encoding: str = "utf-8") -> Callable[[str], Awaitable[str]]:
    """Return a filesystem read capability bound to ``encoding``."""

    async def reader(path: str) -> str:
        return await read_text_file(path, encoding=encoding)

    return reader


class MemoryReader:
    """In-memory read capability keyed by absolute path.

    Keys are normalised with ``os.path.normpath`` so fixtures may be written
    with either separator style. Every lookup is recorded in ``calls``.
    """

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self.files: Dict[str, str] = {}
        self.calls: List[str] = []
        for path, text in (files or {}).items():
            self.add(path, text)

    def add(self, path: str, text: str) -> None:
        self.files[os.path.normpath(path)] = text

    async def __call__(self, path: str) -> str:
        self.calls.append(path)
        try:
            return self.files[os.path.normpath(path)]
        except KeyError:
            raise FileNotFoundError(f"File not found: {path}") from None


__all__ = [
    "ReadFile",
    "read_text_file",
    "make_file_reader",
    "MemoryReader",
]
