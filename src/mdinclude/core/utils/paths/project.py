"""Config directory resolution.

Precedence (highest to lowest) for both the project and the user directory:
1. Environment variable: MDINCLUDE_paths__project_config_dir / MDINCLUDE_paths__user_config_dir
2. Bundled defaults: mdinclude.data/config/paths.yaml
3. Hardcoded fallback: ".mdinclude"

The user directory is relative to the home directory unless absolute.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from mdinclude.data import get_data_path

DEFAULT_CONFIG_DIR_NAME = ".mdinclude"


def _bundled_paths_value(key: str) -> Optional[str]:
    from mdinclude.core.utils.io import read_yaml

    data = read_yaml(get_data_path("config", "paths.yaml"), default={})
    if not isinstance(data, dict):
        return None
    section = data.get("paths")
    if isinstance(section, dict):
        value = section.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _resolve_dir_name(key: str) -> str:
    env_override = os.environ.get(f"MDINCLUDE_paths__{key}")
    if env_override and env_override.strip():
        return env_override.strip()
    return _bundled_paths_value(key) or DEFAULT_CONFIG_DIR_NAME


def project_config_dir_name() -> str:
    return _resolve_dir_name("project_config_dir")


def get_project_config_dir(repo_root: Path) -> Path:
    """Return ``<repo_root>/<project config dir>`` (absolute overrides win)."""
    name = Path(project_config_dir_name()).expanduser()
    if name.is_absolute():
        return name
    return Path(repo_root) / name


def get_user_config_dir() -> Path:
    """Return the user-level config directory (default ``~/.mdinclude``)."""
    name = Path(_resolve_dir_name("user_config_dir")).expanduser()
    if name.is_absolute():
        return name
    return Path.home() / name


__all__ = [
    "DEFAULT_CONFIG_DIR_NAME",
    "project_config_dir_name",
    "get_project_config_dir",
    "get_user_config_dir",
]
