"""Centralized configuration caching.

A loaded configuration is cached per repository root. The cache key also
fingerprints ``MDINCLUDE_*`` environment variables and the mtimes of every
config file in every layer, so edits and env changes are picked up without
an explicit reset.
"""
from __future__ import annotations

import copy
import hashlib
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

_config_cache: Dict[str, Dict[str, Any]] = {}


def _env_fingerprint() -> str:
    env_items = sorted((k, os.environ.get(k, "")) for k in os.environ if k.startswith("MDINCLUDE_"))
    return hashlib.sha256(repr(env_items).encode("utf-8")).hexdigest()[:12]


def _files_fingerprint(repo_root: Path) -> str:
    from mdinclude.core.utils.io import iter_yaml_files
    from mdinclude.core.utils.paths import get_project_config_dir, get_user_config_dir

    project_dir = get_project_config_dir(repo_root)
    dirs = [get_user_config_dir() / "config", project_dir / "config", project_dir / "config.local"]
    files: List[Tuple[str, int, int]] = []
    for d in dirs:
        for p in iter_yaml_files(d):
            try:
                st = p.stat()
                files.append((str(p), int(st.st_mtime_ns), int(st.st_size)))
            except OSError:
                files.append((str(p), 0, 0))
    return hashlib.sha256(repr(files).encode("utf-8")).hexdigest()[:12]


def _cache_key(repo_root: Path) -> str:
    root = Path(repo_root).expanduser().resolve()
    return f"{root}:{_env_fingerprint()}:{_files_fingerprint(root)}"


def get_cached_config(
    repo_root: Optional[Path] = None,
    loader: Optional[Callable[[], Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Return the merged configuration for ``repo_root``, loading it once.

    Args:
        repo_root: Project root (auto-detected when None)
        loader: Loader used on a cache miss (defaults to a fresh ConfigManager)

    Returns:
        A deep copy of the cached configuration.
    """
    if repo_root is None:
        from mdinclude.core.utils.paths import resolve_project_root

        repo_root = resolve_project_root()

    key = _cache_key(repo_root)
    cached = _config_cache.get(key)
    if cached is None:
        if loader is None:
            from .manager import ConfigManager

            loader = ConfigManager(repo_root)._load_config_uncached
        cached = loader()
        _config_cache[key] = cached
    return copy.deepcopy(cached)


def clear_all_caches() -> None:
    """Drop every cached configuration (tests, long-running processes)."""
    _config_cache.clear()


__all__ = ["get_cached_config", "clear_all_caches"]
