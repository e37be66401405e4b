"""I/O utilities: atomic text writes and YAML loading."""
from __future__ import annotations

from .core import PathLike, atomic_write, ensure_directory, ensure_parent_dir, write_text
from .yaml import iter_yaml_files, merge_yaml_directory, read_yaml

__all__ = [
    "PathLike",
    "atomic_write",
    "ensure_directory",
    "ensure_parent_dir",
    "write_text",
    "iter_yaml_files",
    "merge_yaml_directory",
    "read_yaml",
]
