"""
mdinclude includes scan command.

SUMMARY: List @include directives and malformed directive lines in a document
"""

from __future__ import annotations

import argparse
from dataclasses import asdict

from mdinclude.cli import (
    OutputFormatter,
    add_document_arg,
    add_standard_flags,
    get_repo_root,
    load_document,
)
from mdinclude.core.config import IncludesConfig
from mdinclude.core.exceptions import MdIncludeError
from mdinclude.core.includes import scan

SUMMARY = "List @include directives and malformed directive lines in a document"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_document_arg(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Scan a document without reading any included file."""
    formatter = OutputFormatter(json_mode=args.json)

    try:
        repo_root = get_repo_root(args)
        doc = load_document(args.document, encoding=IncludesConfig(repo_root=repo_root).encoding)
    except (MdIncludeError, OSError) as exc:
        formatter.error(exc, error_code="document_error")
        return 1

    result = scan(doc.content, doc.base_dir)

    if formatter.json_mode:
        formatter.json_output(
            {
                "document": doc.label,
                "directives": [
                    {
                        "lineNumber": d.line_number,
                        "rawPath": d.raw_path,
                        "resolvedPath": d.resolved_path,
                    }
                    for d in result.directives
                ],
                "errors": [asdict(e) for e in result.errors],
            }
        )
    else:
        for d in result.directives:
            formatter.text(f"{d.line_number}: {d.raw_path} -> {d.resolved_path}")
        for e in result.errors:
            formatter.warn(f"{doc.label}:{e.line_number}: {e.message}")
        if not result.directives and not result.errors:
            formatter.text("No @include directives found.")

    return 1 if result.errors else 0
