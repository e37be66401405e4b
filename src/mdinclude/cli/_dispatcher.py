"""
Auto-discovery CLI dispatcher for mdinclude.

Scans subfolders for commands and automatically registers them.
Adding new commands = just add a .py file to the appropriate subfolder
exporting SUMMARY, register_args(parser) and main(args) -> int.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from mdinclude.core.exceptions import MdIncludeError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """Discover all CLI domain subfolders (includes, config, ...)."""
    cli_dir = Path(__file__).parent
    domains = {}
    for item in cli_dir.iterdir():
        if item.is_dir() and not item.name.startswith("_"):
            # Must have at least one non-init .py file
            has_commands = any(
                f.suffix == ".py" and not f.name.startswith("_")
                for f in item.iterdir()
            )
            if has_commands:
                domains[item.name] = item
    return domains


@lru_cache(maxsize=32)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """Discover all commands in a domain subfolder.

    Returns:
        Dict mapping command name to command info dict
    """
    domain_dir = discover_domains()[domain]
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(domain_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"mdinclude.cli.{domain}.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import {domain}.{cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", f"{domain} {cmd_name}"),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def _domain_summary(domain: str) -> str:
    try:
        pkg = importlib.import_module(f"mdinclude.cli.{domain}")
    except ImportError:
        return f"{domain.title()} commands"
    doc = (pkg.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else f"{domain.title()} commands"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with auto-discovered domains and commands."""
    parser = argparse.ArgumentParser(
        prog="mdinclude",
        description="Resolve @include directives into a single merged document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(
        dest="domain",
        title="domains",
        description="Available command domains",
        metavar="<domain>",
    )

    for domain_name in sorted(discover_domains().keys()):
        domain_commands = discover_commands(domain_name)
        if not domain_commands:
            continue

        domain_parser = subparsers.add_parser(domain_name, help=_domain_summary(domain_name))
        cmd_subparsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            description=f"Available {domain_name} commands",
            metavar="<command>",
        )

        for cmd_name, cmd_info in sorted(domain_commands.items()):
            primary_name = cmd_name.replace("_", "-")
            aliases = [cmd_name] if primary_name != cmd_name else []
            cmd_parser = cmd_subparsers.add_parser(
                primary_name,
                aliases=aliases,
                help=cmd_info["summary"],
            )
            if cmd_info["register_args"]:
                cmd_info["register_args"](cmd_parser)
            if cmd_info["main"]:
                cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    try:
        from mdinclude import __version__
        return __version__
    except ImportError:
        return "unknown"


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the mdinclude CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.domain:
        parser.print_help()
        return 0

    if not getattr(args, "_func", None):
        domain_parser = parser._subparsers._group_actions[0].choices.get(args.domain)
        if domain_parser:
            domain_parser.print_help()
        return 0

    from mdinclude.cli._utils import get_repo_root, setup_logging

    try:
        setup_logging(args, get_repo_root(args))
    except MdIncludeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Running %s %s", args.domain, getattr(args, "command", ""))
    return int(args._func(args) or 0)


if __name__ == "__main__":
    sys.exit(main())
