"""
Shared helpers for the content renderers.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from markupsafe import Markup

from agentic_ui.runtime.html import content_tag, link_to, safe_join

EMPTY = Markup("")
MAX_COLUMNS = 4
DEFAULT_COLUMNS = 3


def present(value: Any) -> bool:
    """Non-None and, for strings and collections, non-empty."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (Sequence, Mapping)):
        return len(value) > 0
    return True


def field(item: Any, *keys: str) -> Any:
    """First present value among ``keys`` of a mapping item."""
    if not isinstance(item, Mapping):
        return None
    for key in keys:
        value = item.get(key)
        if present(value):
            return value
    return None


def collection(value: Any) -> list[Any]:
    """Sequence payload as a list; anything else is empty."""
    if isinstance(value, Sequence) and not isinstance(value, str):
        return list(value)
    return []


def column_class(prefix: str, columns: Any) -> str:
    try:
        count = int(columns)
    except (TypeError, ValueError):
        count = DEFAULT_COLUMNS
    return f"{prefix}{min(count, MAX_COLUMNS)}"


def icon_class(icon: Any) -> str:
    """Namespaced icons keep their name; bare names use the Phosphor set."""
    name = str(icon)
    return f"i-{name}" if "-" in name else f"i-ph-{name}"


def cta_group(
    primary_text: Any, primary_url: Any, secondary_text: Any = None, secondary_url: Any = None
) -> Markup:
    """Primary call to action plus an optional secondary; both need text and url."""
    if not (present(primary_text) and present(primary_url)):
        return EMPTY
    buttons = [link_to(primary_text, primary_url, class_="hero-cta primary")]
    if present(secondary_text) and present(secondary_url):
        buttons.append(link_to(secondary_text, secondary_url, class_="hero-cta secondary"))
    return content_tag(
        "div", safe_join(buttons), class_="hero-cta-group", data={"animate": "fade-up"}
    )

