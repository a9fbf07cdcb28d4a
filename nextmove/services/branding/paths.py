# nextmove/services/branding/paths.py
from __future__ import annotations

from typing import Any, Dict, Mapping


def split_path(path: str) -> list[str]:
    parts = path.split(".")
    if not all(parts):
        raise ValueError(f"invalid settings path: {path!r}")
    return parts


def set_path(settings: Mapping[str, Any], path: str, value: Any) -> Dict[str, Any]:
    """
    Return a copy of ``settings`` with the leaf at dot-path ``path`` set.

    Every level along the path is copied, and a missing or non-object level
    is replaced by a new dict. ``settings`` and its nested objects are never
    mutated; untouched branches are shared with the input.
    """
    parts = split_path(path)
    updated = dict(settings)
    node = updated
    for part in parts[:-1]:
        child = node.get(part)
        child = dict(child) if isinstance(child, Mapping) else {}
        node[part] = child
        node = child
    node[parts[-1]] = value
    return updated


def get_path(settings: Mapping[str, Any], path: str, default: Any = None) -> Any:
    node: Any = settings
    for part in split_path(path):
        if not isinstance(node, Mapping) or part not in node:
            return default
        node = node[part]
    return node
