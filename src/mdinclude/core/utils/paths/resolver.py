"""Project root resolution.

Resolution priority:
1. MDINCLUDE_PROJECT_ROOT environment variable
2. Nearest ancestor of the start directory holding the config dir or ``.git``
3. The start directory itself
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from mdinclude.core.exceptions import ProjectRootError

from .project import project_config_dir_name

PROJECT_ROOT_ENV = "MDINCLUDE_PROJECT_ROOT"


def resolve_project_root(start: Optional[Path] = None) -> Path:
    """Resolve the project root.

    Raises:
        ProjectRootError: If MDINCLUDE_PROJECT_ROOT points at a missing path,
            or at the config directory itself
    """
    config_dir_name = project_config_dir_name()

    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if not env_path.is_dir():
            raise ProjectRootError(
                f"{PROJECT_ROOT_ENV} points at missing directory: {env_path}",
                context={"path": str(env_path)},
            )
        if env_path.name == config_dir_name:
            raise ProjectRootError(
                f"{PROJECT_ROOT_ENV} points to the {config_dir_name} directory: {env_path}. "
                "It must point to the project root.",
                context={"path": str(env_path)},
            )
        return env_path

    cwd = (start or Path.cwd()).expanduser().resolve()
    for candidate in [cwd, *cwd.parents]:
        if candidate.name == config_dir_name:
            continue
        if (candidate / config_dir_name).is_dir() or (candidate / ".git").exists():
            return candidate
    return cwd


__all__ = ["PROJECT_ROOT_ENV", "resolve_project_root"]
