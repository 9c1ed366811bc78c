"""Canonical config merge utilities.

Site and theme configs are merged with one rule set:
- Mappings merge recursively
- Lists concatenate (left items first, no de-duplication)
- ``None`` on the right keeps the left value
- Any other right value replaces the left value

Top-level keys that need a different policy are listed in ``MERGE_POLICIES``.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_copy(v) for v in value]
    return value


def merge_values(base: Any, override: Any) -> Any:
    """Merge two values of any shape without mutating either."""
    if override is None:
        return _copy(base)
    if base is None:
        return _copy(override)
    if isinstance(base, Mapping) and isinstance(override, Mapping):
        return deep_merge(base, override)
    if isinstance(base, list) and isinstance(override, list):
        return [*_copy(base), *_copy(override)]
    return _copy(override)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Args:
        base: Base dictionary (lower priority)
        override: Override dictionary (higher priority)

    Returns:
        New merged dictionary

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}, "l": [1]}, {"b": {"d": 3}, "l": [2]})
        {'a': 1, 'b': {'c': 2, 'd': 3}, 'l': [1, 2]}
    """
    result: Dict[str, Any] = _copy(dict(base or {}))
    for key, value in (override or {}).items():
        if key in result:
            result[key] = merge_values(result[key], value)
        else:
            result[key] = _copy(value)
    return result


def concat_lists(base: Optional[List[Any]], override: Optional[List[Any]]) -> List[Any]:
    return [*_copy(list(base or [])), *_copy(list(override or []))]


MERGE_POLICIES: Dict[str, Callable[[Any, Any], Any]] = {
    "plugins": concat_lists,
}


def merge_configs(a: Mapping[str, Any], b: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge two site/theme configs, ``b`` taking precedence.

    Usable as a ``functools.reduce`` step seeded with ``{}``.

    Example:
        >>> merge_configs({"plugins": ["p1"], "title": "a"}, {"plugins": ["p2"]})
        {'plugins': ['p1', 'p2'], 'title': 'a'}
    """
    a = a or {}
    b = b or {}
    merged: Dict[str, Any] = {}
    for key in [*a.keys(), *(k for k in b.keys() if k not in a)]:
        policy = MERGE_POLICIES.get(key, merge_values)
        merged[key] = policy(a.get(key), b.get(key))
    return merged


__all__ = ["MERGE_POLICIES", "concat_lists", "deep_merge", "merge_configs", "merge_values"]
