"""Path utilities for mdinclude.

- Resolver: project root resolution
- Project: project and user config directory detection
"""
from __future__ import annotations

from .project import (
    DEFAULT_CONFIG_DIR_NAME,
    get_project_config_dir,
    get_user_config_dir,
)
from .resolver import PROJECT_ROOT_ENV, resolve_project_root

__all__ = [
    "DEFAULT_CONFIG_DIR_NAME",
    "PROJECT_ROOT_ENV",
    "get_project_config_dir",
    "get_user_config_dir",
    "resolve_project_root",
]
