"""
mdinclude CLI package.

Commands are auto-discovered from subfolders (includes/, config/).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, format_json
from ._args import (
    add_document_arg,
    add_json_flag,
    add_repo_root_flag,
    add_resolution_flags,
    add_standard_flags,
)
from ._utils import Document, build_resolver, get_repo_root, load_document, setup_logging

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_json",
    # Argument helpers
    "add_document_arg",
    "add_json_flag",
    "add_repo_root_flag",
    "add_resolution_flags",
    "add_standard_flags",
    # Utilities
    "Document",
    "build_resolver",
    "get_repo_root",
    "load_document",
    "setup_logging",
]
