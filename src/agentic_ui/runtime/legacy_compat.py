"""
Legacy calling-convention support.

Older templates use a compact option vocabulary borrowed from Semantic UI
grids and Stimulus controllers. These transforms expand it into plain
classes and ``data-*`` entries. Each transform returns a new mapping; the
input is never mutated.

    apply_legacy_compat({"only": "mobile", "size": 4, "mobile": 2, "c": "dropdown"})
    # {"class": "ui mobile only four two wide mobile", "controller": "dropdown"}
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# Cardinal breakpoints, largest first.
_NUMBER_NAMES: tuple[tuple[int, str], ...] = (
    (1_000_000, "million"),
    (1000, "thousand"),
    (100, "hundred"),
    (90, "ninety"),
    (80, "eighty"),
    (70, "seventy"),
    (60, "sixty"),
    (50, "fifty"),
    (40, "forty"),
    (30, "thirty"),
    (20, "twenty"),
    (19, "nineteen"),
    (18, "eighteen"),
    (17, "seventeen"),
    (16, "sixteen"),
    (15, "fifteen"),
    (14, "fourteen"),
    (13, "thirteen"),
    (12, "twelve"),
    (11, "eleven"),
    (10, "ten"),
    (9, "nine"),
    (8, "eight"),
    (7, "seven"),
    (6, "six"),
    (5, "five"),
    (4, "four"),
    (3, "three"),
    (2, "two"),
    (1, "one"),
)

RESPONSIVE_DEVICES = ("computer", "tablet", "mobile")

STIMULUS_SHORTCUTS = {
    "c": "controller",
    "a": "action",
    "t": "target",
    "p": "params",
    "v": "values",
}

_SLUG_RE = re.compile(r"[^a-z0-9]+")


# =============================================================================
# Helpers
# =============================================================================


def number_in_words(value: Any) -> str:
    """Spell out a non-negative integer: ``21`` -> ``"twenty one"``.

    0, negative numbers and values that are not integers give ``""``.
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        return ""
    if number <= 0:
        return ""

    for amount, name in _NUMBER_NAMES:
        if number < amount:
            continue
        if amount < 100:
            rest = number_in_words(number - amount) if number < 100 else ""
            return " ".join(part for part in (name, rest) if part)
        quotient, remainder = divmod(number, amount)
        return " ".join(
            part for part in (number_in_words(quotient), name, number_in_words(remainder)) if part
        )
    return ""


def build_size(device: str | None, size: Any) -> str:
    """``build_size("mobile", 2)`` -> ``"two wide mobile"``."""
    words = number_in_words(size)
    if device is None or not words:
        return words
    return f"{words} wide {device}"


def build_only(value: Any) -> str:
    """``build_only("mobile")`` -> ``"mobile only"``."""
    return f"{value} only"


def slugify_name(name: Any) -> str:
    """``"User Profile"`` -> ``"user_profile"`` (ASCII only)."""
    return _SLUG_RE.sub("_", str(name).lower()).strip("_")


def join_classes(*parts: Any) -> str:
    """Space-join class fragments, dropping empty ones."""
    return " ".join(str(part) for part in parts if part is not None and str(part) != "")


def _with_data(options: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``options['data']`` that is guaranteed to be a dict."""
    data = options.get("data")
    return dict(data) if isinstance(data, Mapping) else {}


# =============================================================================
# Transforms
# =============================================================================


def build_ui_class(options: Mapping[str, Any]) -> dict[str, Any]:
    """Prepend ``ui`` unless ``ui=False`` was passed; always drops the key."""
    result = dict(options)
    disabled = result.pop("ui", None) is False
    if disabled:
        return result
    result["class"] = join_classes("ui", result.get("class"))
    return result


def build_dynamic_class(options: Mapping[str, Any]) -> dict[str, Any]:
    """Append ``dynamic`` when ``dynamic`` is truthy; always drops the key."""
    result = dict(options)
    if "dynamic" not in result:
        return result
    if result.pop("dynamic"):
        result["class"] = join_classes(result.get("class"), "dynamic")
    return result


def build_responsiveness(options: Mapping[str, Any]) -> dict[str, Any]:
    """Turn ``only``/``size``/``computer``/``tablet``/``mobile`` into grid classes."""
    result = dict(options)
    fragments: list[str] = []

    if "only" in result:
        fragments.append(build_only(result.pop("only")))
    if "size" in result:
        fragments.append(number_in_words(result.pop("size")))
    for device in RESPONSIVE_DEVICES:
        if device in result:
            fragments.append(build_size(device, result.pop(device)))

    if fragments:
        result["class"] = join_classes(result.get("class"), *fragments)
    return result


def build_name(options: Mapping[str, Any]) -> dict[str, Any]:
    """Add ``name`` as a class and as a slugged ``data-name``."""
    result = dict(options)
    if "name" not in result:
        return result

    name = result.pop("name")
    result["class"] = join_classes(result.get("class"), name)
    data = _with_data(result)
    data["name"] = slugify_name(name)
    result["data"] = data
    return result


def apply_stimulus_shortcuts(options: Mapping[str, Any]) -> dict[str, Any]:
    """Expand ``c``/``a``/``t``/``p``/``v``; a shortcut overwrites its long key."""
    result = dict(options)
    for short, long in STIMULUS_SHORTCUTS.items():
        if short in result:
            result[long] = result.pop(short)
    return result


def add_target_data(data: dict[str, Any], targets: Any) -> dict[str, Any]:
    """``{"dropdown": "button"}`` -> ``data["dropdown-target"] = "button"``."""
    if isinstance(targets, Mapping):
        for controller, target in targets.items():
            data[f"{controller}-target"] = str(target)
    return data


def add_params_data(data: dict[str, Any], params: Any) -> dict[str, Any]:
    """``{"dropdown": {"url": "/api"}}`` -> ``data["dropdown-url-param"] = "/api"``."""
    return _add_nested_data(data, params, "param")


def add_values_data(data: dict[str, Any], values: Any) -> dict[str, Any]:
    """``{"dropdown": {"count": 0}}`` -> ``data["dropdown-count-value"] = "0"``."""
    return _add_nested_data(data, values, "value")


def _add_nested_data(data: dict[str, Any], source: Any, suffix: str) -> dict[str, Any]:
    if not isinstance(source, Mapping):
        return data
    for controller, entries in source.items():
        if not isinstance(entries, Mapping):
            continue
        for name, value in entries.items():
            data[f"{controller}-{name}-{suffix}"] = _stringify(value)
    return data


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def process_stimulus(options: Mapping[str, Any]) -> dict[str, Any]:
    """Expand shortcuts, then fold target/params/values into ``data``.

    ``controller`` and ``action`` stay in place for the attribute builder.
    """
    result = apply_stimulus_shortcuts(options)
    if not any(key in result for key in ("target", "params", "values")):
        return result

    data = _with_data(result)
    add_target_data(data, result.pop("target", None))
    add_params_data(data, result.pop("params", None))
    add_values_data(data, result.pop("values", None))
    result["data"] = data
    return result


def apply_legacy_compat(options: Mapping[str, Any]) -> dict[str, Any]:
    """Run every legacy transform in its fixed order."""
    result = build_ui_class(options)
    result = build_dynamic_class(result)
    result = build_responsiveness(result)
    result = build_name(result)
    return process_stimulus(result)
