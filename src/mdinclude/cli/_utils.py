"""Shared CLI utilities."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mdinclude.core.config import ConfigManager, IncludesConfig, LoggingConfig
from mdinclude.core.includes import IncludeResolver, make_file_reader
from mdinclude.core.stdlib_logging import configure_stdlib_logging
from mdinclude.core.utils.paths import resolve_project_root

logger = logging.getLogger(__name__)


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get project root from args or auto-detect."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).expanduser().resolve()
    return resolve_project_root()


def setup_logging(args: argparse.Namespace, repo_root: Path) -> None:
    """Configure logging from config, with --verbose forcing DEBUG."""
    cfg = LoggingConfig(repo_root=repo_root)
    level = "DEBUG" if getattr(args, "verbose", False) else cfg.level
    configure_stdlib_logging(level=level, log_path=cfg.file)


@dataclass(frozen=True)
class Document:
    """A document loaded for a CLI command."""

    content: str
    base_dir: Path
    source_path: Optional[str]

    @property
    def label(self) -> str:
        return self.source_path or "<stdin>"


def load_document(path_arg: str, *, encoding: str = "utf-8") -> Document:
    """Load the document named on the command line.

    Raises:
        FileNotFoundError: If the document does not exist
        OSError: If it cannot be read
    """
    if path_arg == "-":
        return Document(content=sys.stdin.read(), base_dir=Path.cwd(), source_path=None)
    path = Path(path_arg).expanduser()
    path = Path(os.path.abspath(path))
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    return Document(
        content=path.read_text(encoding=encoding),
        base_dir=path.parent,
        source_path=str(path),
    )


def build_resolver(args: argparse.Namespace, repo_root: Path) -> IncludeResolver:
    """Build an IncludeResolver from validated config plus command-line overrides.

    Raises:
        ConfigError: If the merged configuration fails schema validation
        ValueError: If --max-depth is below 1
    """
    cfg = IncludesConfig(repo_root=repo_root, config=ConfigManager(repo_root).load_config(validate=True))
    kwargs = cfg.resolver_kwargs()
    if getattr(args, "max_depth", None) is not None:
        if args.max_depth < 1:
            raise ValueError("--max-depth must be >= 1")
        kwargs["max_depth"] = args.max_depth
    if getattr(args, "unresolved", None):
        kwargs["unresolved"] = args.unresolved
    logger.debug("Resolver settings: %s (encoding %s)", kwargs, cfg.encoding)
    return IncludeResolver(make_file_reader(cfg.encoding), **kwargs)


__all__ = [
    "Document",
    "build_resolver",
    "get_repo_root",
    "load_document",
    "setup_logging",
]
