"""
mdinclude configuration management (layered YAML + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from mdinclude.core.exceptions import ConfigError
from mdinclude.core.utils.io import merge_yaml_directory
from mdinclude.core.utils.merge import deep_merge as _deep_merge
from mdinclude.core.utils.paths import get_project_config_dir, get_user_config_dir, resolve_project_root
from mdinclude.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "MDINCLUDE_"

# Environment variables under the prefix that are not config overrides.
RESERVED_ENV_KEYS = frozenset({"PROJECT_ROOT"})

CONFIG_SCHEMA = "config/config.schema.yaml"


class ConfigManager:
    """Load, merge, and validate mdinclude configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: MDINCLUDE_<section>__<key>
    2. Project-local config: <project-config-dir>/config.local/*.yaml (uncommitted)
    3. Project config: <project-config-dir>/config/*.yaml
    4. User config: <user-config-dir>/config/*.yaml
    5. Bundled defaults: mdinclude.data/config/*.yaml

    Files within one directory are merged in alphabetical order.
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root).expanduser().resolve() if repo_root else resolve_project_root()

        project_root_dir = get_project_config_dir(self.repo_root)

        self.core_config_dir = get_data_path("config")
        self.user_config_dir = get_user_config_dir() / "config"
        self.project_config_dir = project_root_dir / "config"
        self.project_local_config_dir = project_root_dir / "config.local"

    def layer_dirs(self) -> List[Tuple[str, Path]]:
        """Config directories in merge order (lowest priority first)."""
        return [
            ("core", self.core_config_dir),
            ("user", self.user_config_dir),
            ("project", self.project_config_dir),
            ("project-local", self.project_local_config_dir),
        ]

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _parse_env_key(self, raw: str, *, strict: bool) -> List[str]:
        if not raw:
            return []
        segs = raw.split("__") if "__" in raw else raw.split("_")
        processed: List[str] = []
        for seg in segs:
            if seg == "":
                if strict:
                    raise ConfigError(
                        f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                        context={"key": f"{ENV_PREFIX}{raw}"},
                    )
                return []
            processed.append(seg.lower())
        return processed

    def _iter_env_overrides(self, *, strict: bool) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX) :]
            if raw.upper() in RESERVED_ENV_KEYS:
                continue
            path = self._parse_env_key(raw, strict=strict)
            if not path:
                continue
            yield path, self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur: Dict[str, Any] = root
        for part in path[:-1]:
            key_candidates = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            key_to_use = key_candidates.get(part, part)
            nxt = cur.get(key_to_use)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[key_to_use] = nxt
            cur = nxt
        leaf = path[-1]
        lower_map = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
        cur[lower_map.get(leaf, leaf)] = value

    def apply_env_overrides(self, cfg: Dict[str, Any], *, strict: bool) -> None:
        for path, typed_value in self._iter_env_overrides(strict=strict):
            self._set_nested(cfg, path, typed_value)

    # ========== Loading ==========

    def _load_config_uncached(self) -> Dict[str, Any]:
        cfg: Dict[str, Any] = {}
        for layer, directory in self.layer_dirs():
            try:
                cfg = merge_yaml_directory(cfg, directory)
            except (OSError, ValueError) as exc:
                raise ConfigError(
                    f"Failed to load {layer} config from {directory}: {exc}",
                    context={"layer": layer, "directory": str(directory)},
                ) from exc
        self.apply_env_overrides(cfg, strict=False)
        return cfg

    def validate_schema(self, config: Dict[str, Any]) -> None:
        from mdinclude.core.schemas import SchemaValidationError, validate_payload

        try:
            validate_payload(config, CONFIG_SCHEMA)
        except SchemaValidationError as exc:
            raise ConfigError(str(exc)) from exc

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load configuration using the centralized cache.

        Notes:
        - ``validate=True`` checks env override keys strictly and validates the
          merged config against the bundled schema.
        - Returned dict should be treated as immutable.
        """
        from .cache import get_cached_config

        cfg = get_cached_config(repo_root=self.repo_root, loader=self._load_config_uncached)
        if validate:
            _ = list(self._iter_env_overrides(strict=True))
            self.validate_schema(cfg)
        return cfg

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        return _deep_merge(base, override)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key.

        Example:
            >>> manager.get('includes.max_depth')
            10
        """
        current: Any = self.load_config(validate=False)
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


__all__ = ["ConfigManager", "ENV_PREFIX", "CONFIG_SCHEMA"]
