"""Unified CLI output formatting utilities.

Supports both JSON and text output modes. Command results go to stdout,
errors and diagnostics to stderr.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(
        self,
        data: Dict[str, Any],
        message: str,
        *,
        status: str = "success",
    ) -> None:
        """Output success result.

        Args:
            data: Result data dictionary
            message: Human-readable success message (used in text mode)
            status: Status string for JSON output
        """
        if self.json_mode:
            output = {"status": status, **data}
            print(json.dumps(output, indent=self.indent, default=str))
        else:
            print(message)

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr."""
        msg = message or str(error)
        if self.json_mode:
            output = {
                "error": error_code,
                "message": msg,
            }
            print(json.dumps(output, indent=self.indent), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        print(message)

    def warn(self, message: str) -> None:
        """Diagnostic line on stderr (text mode only)."""
        if not self.json_mode:
            print(message, file=sys.stderr)


def format_json(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, default=str)


__all__ = ["OutputFormatter", "format_json"]
