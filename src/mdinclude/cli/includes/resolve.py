"""
mdinclude includes resolve command.

SUMMARY: Resolve @include directives and print (or write) the merged document

Exit codes:
    0 - merged without errors (or --allow-errors given)
    1 - the document could not be loaded, or errors were recorded
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

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
from mdinclude.core.utils.io import write_text

from ._render import error_lines, summary_line

SUMMARY = "Resolve @include directives and print (or write) the merged document"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_document_arg(parser)
    add_resolution_flags(parser)
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write the merged document to this path instead of stdout",
    )
    parser.add_argument(
        "--allow-errors",
        action="store_true",
        help="Exit 0 even when errors were recorded",
    )
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

    if args.output:
        out_path = Path(args.output).expanduser()
        try:
            write_text(out_path, result.content)
        except OSError as exc:
            formatter.error(exc, f"Cannot write {out_path}: {exc}", error_code="document_error")
            return 1

    if formatter.json_mode:
        payload = {"document": doc.label, **result.to_dict()}
        if args.output:
            payload["output"] = str(out_path)
            payload.pop("content")
        formatter.json_output(payload)
    else:
        if not args.output:
            formatter.text(result.content)
        for line in error_lines(result):
            formatter.warn(line)
        if args.output:
            formatter.warn(f"Wrote {out_path} ({summary_line(result)})")

    if result.errors and not args.allow_errors:
        return 1
    return 0
