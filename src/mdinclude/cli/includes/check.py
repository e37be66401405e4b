"""
mdinclude includes check command.

SUMMARY: Resolve a document and report included files and errors without printing content
"""

from __future__ import annotations

import argparse
import asyncio

from mdinclude.cli import (
    OutputFormatter,
    add_document_arg,
    add_resolution_flags,
    add_standard_flags,
    build_resolver,
    get_repo_root,
    load_document,
)
from mdinclude.core.config import IncludesConfig
from mdinclude.core.exceptions import ConfigError, MdIncludeError

from ._render import error_lines, summary_line

SUMMARY = "Resolve a document and report included files and errors without printing content"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_document_arg(parser)
    add_resolution_flags(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    try:
        repo_root = get_repo_root(args)
        resolver = build_resolver(args, repo_root)
        doc = load_document(args.document, encoding=IncludesConfig(repo_root=repo_root).encoding)
    except ConfigError as exc:
        formatter.error(exc, error_code="config_error")
        return 1
    except (MdIncludeError, OSError, ValueError) as exc:
        formatter.error(exc, error_code="document_error")
        return 1

    ancestors = [doc.source_path] if doc.source_path else []
    result = asyncio.run(
        resolver.resolve(doc.content, doc.base_dir, source_path=doc.source_path, ancestors=ancestors)
    )

    if formatter.json_mode:
        payload = result.to_dict()
        payload.pop("content")
        formatter.success(
            {"document": doc.label, **payload},
            message="",
            status="ok" if result.ok else "errors",
        )
    else:
        for path in result.included_paths:
            formatter.text(f"  + {path}")
        for line in error_lines(result):
            formatter.text(f"  ! {line}")
        formatter.text(f"{doc.label}: {summary_line(result)}")

    return 0 if result.ok else 1
