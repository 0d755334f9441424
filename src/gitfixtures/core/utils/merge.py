"""Deep merge used to layer configuration sources."""
from __future__ import annotations

from typing import Any, Dict


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Mappings merge key by key; any other value, lists included, replaces the
    one underneath.

    Example:
        >>> deep_merge({"git": {"clone_depth": 1}}, {"git": {"default_branch": "main"}})
        {'git': {'clone_depth': 1, 'default_branch': 'main'}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


__all__ = ["deep_merge"]
