"""
mdinclude config show command.

SUMMARY: Show the effective configuration (bundled, user, project and env layers merged)
"""

from __future__ import annotations

import argparse

import yaml

from mdinclude.cli import OutputFormatter, add_standard_flags, get_repo_root
from mdinclude.core.config import ConfigManager
from mdinclude.core.exceptions import MdIncludeError

SUMMARY = "Show the effective configuration (bundled, user, project and env layers merged)"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--key",
        type=str,
        help="Dot-notation key to show (e.g. includes.max_depth)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    try:
        manager = ConfigManager(get_repo_root(args))
        cfg = manager.load_config(validate=True)
    except MdIncludeError as exc:
        formatter.error(exc, error_code="config_error")
        return 1

    value = cfg
    if args.key:
        missing = object()
        value = manager.get(args.key, missing)
        if value is missing:
            formatter.error(KeyError(args.key), f"Unknown config key: {args.key}", error_code="unknown_key")
            return 1

    if formatter.json_mode:
        formatter.json_output({"key": args.key, "value": value} if args.key else value)
    elif isinstance(value, (dict, list)):
        formatter.text(yaml.safe_dump(value, sort_keys=True, default_flow_style=False).rstrip())
    else:
        formatter.text(str(value))
    return 0
