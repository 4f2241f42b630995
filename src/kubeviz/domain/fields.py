"""Typed accessors for nested manifest fields.

Manifests are arbitrary user input: any level of nesting may be missing
or hold a value of the wrong type. Every read of an optional field goes
through these helpers so the default substitution points are explicit.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MISSING = object()


def dig(source: Any, *path: str, default: Any = None) -> Any:
    """Walk *path* through nested mappings, returning *default* when any step is absent.

    A ``None`` value at the end of the path is treated as absent, matching
    YAML documents that spell out ``key:`` with no value.
    """
    current = source
    for key in path:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return default
    if current is None:
        return default
    return current


def dig_mapping(source: Any, *path: str) -> Mapping[str, Any]:
    """Return the mapping at *path*, or an empty mapping."""
    value = dig(source, *path)
    if isinstance(value, Mapping):
        return value
    return {}


def dig_list(source: Any, *path: str) -> list[Any]:
    """Return the list at *path*, or an empty list."""
    value = dig(source, *path)
    if isinstance(value, list):
        return value
    return []


def dig_str(source: Any, *path: str, default: str = "") -> str:
    """Return the scalar at *path* as a string, or *default*.

    Empty strings and non-scalar values fall back to *default*.
    """
    value = dig(source, *path)
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return default
    text = str(value)
    return text or default


def label_map(value: Any) -> dict[str, Any]:
    """Copy a label or selector mapping with string keys.

    Non-mapping input yields an empty dict. Values are kept as parsed, so
    ``version: 1`` and ``version: "1"`` do not compare equal.
    """
    if not isinstance(value, Mapping):
        return {}
    return {str(k): v for k, v in value.items()}


def replica_count(value: Any) -> int:
    """Normalize a ``spec.replicas`` value.

    Absent, negative, boolean, or non-numeric values count as 1. Zero is
    preserved (a scaled-down workload has no pods).
    """
    if value is None or isinstance(value, bool):
        return 1
    if isinstance(value, float):
        if not value.is_integer():
            return 1
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return 1
    if not isinstance(value, int) or value < 0:
        return 1
    return value
