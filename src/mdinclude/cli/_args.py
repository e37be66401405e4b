"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse

from mdinclude.core.includes.models import UnresolvedMode


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag for project root override (config lookup)."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override project root path used for configuration lookup",
    )


def add_document_arg(parser: argparse.ArgumentParser) -> None:
    """Add the positional document path ('-' reads stdin)."""
    parser.add_argument(
        "document",
        help="Document to process ('-' reads stdin and resolves relative includes from the cwd)",
    )


def add_resolution_flags(parser: argparse.ArgumentParser) -> None:
    """Add --max-depth and --unresolved overrides."""
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum include nesting (default from config: includes.max_depth)",
    )
    parser.add_argument(
        "--unresolved",
        choices=[m.value for m in UnresolvedMode],
        default=None,
        help="How unexpanded directives appear in output (default from config: includes.unresolved)",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json and --repo-root."""
    add_json_flag(parser)
    add_repo_root_flag(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_document_arg",
    "add_resolution_flags",
    "add_standard_flags",
]
