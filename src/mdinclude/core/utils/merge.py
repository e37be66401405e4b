"""Dictionary merge used for layered configuration.

Arrays follow override semantics:
  - Default: replace array entirely
  - First element "+": append the remaining items to the existing array
  - First element "=": explicit replace (same as default)
"""
from __future__ import annotations

from typing import Any, Dict, List


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Example:
        >>> deep_merge({"includes": {"max_depth": 10}}, {"includes": {"unresolved": "marker"}})
        {'includes': {'max_depth': 10, 'unresolved': 'marker'}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if key in result:
            if isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            elif isinstance(result[key], list) and isinstance(value, list):
                result[key] = merge_arrays(result[key], value)
            else:
                result[key] = value
        else:
            result[key] = value
    return result


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Merge arrays with override semantics.

    Example:
        >>> merge_arrays([1, 2], [3, 4])
        [3, 4]
        >>> merge_arrays([1, 2], ["+", 3, 4])
        [1, 2, 3, 4]
    """
    if not override:
        return base
    first = override[0]
    if isinstance(first, str) and first in {"+", "="}:
        if first == "+":
            return [*base, *override[1:]]
        return list(override[1:])
    return list(override)


__all__ = ["deep_merge", "merge_arrays"]
