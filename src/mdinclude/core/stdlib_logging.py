from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from mdinclude.core.utils.io import ensure_directory

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_TARGET: str | None = None
_MDINCLUDE_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Handler:
    """Install the mdinclude handler on the ``mdinclude`` logger.

    Logs go to ``log_path`` when given, else to stderr (stdout stays reserved
    for command output). Idempotent per-process: calling again with the same
    target only updates the level.
    """
    global _CONFIGURED_TARGET, _MDINCLUDE_HANDLER

    target = str(Path(log_path).expanduser().resolve()) if log_path else "<stderr>"
    pkg_logger = logging.getLogger("mdinclude")
    pkg_logger.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _MDINCLUDE_HANDLER is not None:
        _MDINCLUDE_HANDLER.setLevel(_level_from_name(level))
        return _MDINCLUDE_HANDLER

    # Replace the previously installed handler when switching targets.
    if _MDINCLUDE_HANDLER is not None:
        pkg_logger.removeHandler(_MDINCLUDE_HANDLER)
        _MDINCLUDE_HANDLER.close()
        _MDINCLUDE_HANDLER = None

    handler: logging.Handler
    if log_path:
        ensure_directory(Path(target).parent)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False

    _MDINCLUDE_HANDLER = handler
    _CONFIGURED_TARGET = target
    return handler


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the installed handler."""
    global _CONFIGURED_TARGET, _MDINCLUDE_HANDLER
    pkg_logger = logging.getLogger("mdinclude")
    if _MDINCLUDE_HANDLER is not None:
        pkg_logger.removeHandler(_MDINCLUDE_HANDLER)
        _MDINCLUDE_HANDLER.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
    _CONFIGURED_TARGET = None
    _MDINCLUDE_HANDLER = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests", "LOG_FORMAT"]
