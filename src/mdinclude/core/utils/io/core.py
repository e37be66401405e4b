"""Core file-writing helpers.

Writes go through a temp file in the target directory that is fsync'd and
renamed into place, so a merged document is never left half-written.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

PathLike = Union[str, Path]


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory for ``path`` exists."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def ensure_directory(path: Path, create: bool = True) -> Path:
    """Ensure directory exists.

    Raises:
        FileNotFoundError: If create=False and directory doesn't exist
        NotADirectoryError: If path exists but is not a directory
    """
    path = Path(path)

    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {path}")
        return path

    if create:
        path.mkdir(parents=True, exist_ok=True)
        return path
    raise FileNotFoundError(f"Directory does not exist: {path}")


def atomic_write(path: Path, write_fn: Callable[[TextIO], None], *, encoding: str = "utf-8") -> None:
    """Write to ``path`` atomically using a temp file + fsync + rename."""
    path = Path(path)
    ensure_parent_dir(path)

    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=str(path.parent),
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(str(tmp_path), str(path))
    finally:
        if tmp_path is not None and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> None:
    """Atomically write text to ``path``."""

    def _writer(f: TextIO) -> None:
        f.write(content)

    atomic_write(Path(path), _writer, encoding=encoding)


__all__ = [
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "atomic_write",
    "write_text",
]
