"""
Argument normalization for component invocations.

Components accept several historical calling conventions::

    ux.widget("discussions", data={"x": 1})            # class string first
    ux.widget({"class": "discussions"}, {"data": ...})  # mapping first
    ux.widget(class_="discussions", data={"x": 1})      # keywords only

All of them collapse into one canonical options mapping with string keys.
Malformed input never raises; it degrades to an empty mapping.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

# Python keywords cannot be used as keyword arguments, so accept a trailing
# underscore and strip it: ``class_="x"`` -> ``class``.
_KEYWORD_ALIASES = {"class_": "class", "for_": "for", "type_": "type"}


def canonical_key(key: Any) -> str:
    """Single key representation used by every downstream stage."""
    text = str(key)
    return _KEYWORD_ALIASES.get(text, text)


def canonicalize(mapping: Mapping[Any, Any]) -> dict[str, Any]:
    """Copy a mapping with canonical keys; nested ``data`` keys too."""
    result: dict[str, Any] = {}
    for key, value in mapping.items():
        name = canonical_key(key)
        if name == "data" and isinstance(value, Mapping):
            value = {str(k): v for k, v in value.items()}
        result[name] = value
    return result


def normalize_arguments(args: Sequence[Any], kwargs: Any) -> dict[str, Any]:
    """Merge positional and keyword arguments into one options mapping.

    Precedence on key collisions, lowest first: the first positional argument
    (a class string or a mapping), the second positional argument when it is a
    mapping, then keyword arguments.
    """
    keywords = canonicalize(kwargs) if isinstance(kwargs, Mapping) else {}

    merged: Any
    if args:
        first = args[0]
        second = args[1] if len(args) > 1 else None
        second_map = canonicalize(second) if isinstance(second, Mapping) else {}

        if isinstance(first, str):
            merged = {"class": first, **second_map, **keywords}
        elif isinstance(first, Mapping):
            merged = {**canonicalize(first), **second_map, **keywords}
        else:
            merged = {"class": "" if first is None else str(first), **second_map, **keywords}
    else:
        merged = keywords

    if isinstance(merged, str):
        merged = {"class": merged}

    if not isinstance(merged, dict):
        return {}
    return merged
