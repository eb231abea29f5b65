"""Utilities."""

from typing import Any

__all__ = ["merge"]


def merge(merged: dict[str, Any], obj2: dict[str, Any]) -> dict[str, Any]:
    """Merge the content of `obj2` into `merged`, recursively.

    Nested tables are merged, lists are concatenated and any other value
    from `obj2` replaces the existing one.

    Eg:
        merge({"a": {"b": 1}}, {"a": {"c": 2}}) == {"a": {"b": 1, "c": 2}}

    Returns:
        `merged` dictionary with the merged content
    """
    for key, value in obj2.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merge(merged[key], value)
        elif isinstance(merged.get(key), list) and isinstance(value, list):
            merged[key] = merged[key] + value
        else:
            merged[key] = value
    return merged
