"""
HTML tag primitives.

Small helpers that build escaped markup with MarkupSafe. Every helper returns
``Markup`` so results nest without double escaping; plain strings passed as
content are escaped.

    content_tag("div", "Hi & bye", class_="note", data={"user_id": 7})
    # Markup('<div class="note" data-user-id="7">Hi &amp; bye</div>')
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

BOOLEAN_ATTRIBUTES = frozenset(
    {
        "autoplay",
        "checked",
        "controls",
        "disabled",
        "hidden",
        "loop",
        "multiple",
        "muted",
        "playsinline",
        "readonly",
        "required",
        "selected",
    }
)


def _attribute_name(key: Any) -> str:
    name = str(key)
    if name.endswith("_") and len(name) > 1:
        name = name[:-1]
    return name


def _data_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value)
    return str(value)


def tag_attributes(attrs: Mapping[str, Any] | None) -> Markup:
    """Serialize attributes, leading space included; ``data`` expands to ``data-*``."""
    if not attrs:
        return Markup("")

    parts: list[str] = []
    for key, value in attrs.items():
        name = _attribute_name(key)
        if name == "data" and isinstance(value, Mapping):
            for data_key, data_value in value.items():
                if data_value is None:
                    continue
                data_name = str(data_key).replace("_", "-")
                parts.append(f'data-{data_name}="{escape(_data_value(data_value))}"')
            continue
        if value is None:
            continue
        if name in BOOLEAN_ATTRIBUTES:
            if value:
                parts.append(name)
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        parts.append(f'{name}="{escape(value)}"')

    if not parts:
        return Markup("")
    return Markup(" " + " ".join(parts))


def tag(name: str, attrs: Mapping[str, Any] | None = None) -> Markup:
    """Opening tag only; the form used for void elements."""
    return Markup(f"<{name}{tag_attributes(attrs)}>")


def content_tag(
    name: str, content: Any = None, attrs: Mapping[str, Any] | None = None, **kwargs: Any
) -> Markup:
    """Build ``<name attrs>content</name>``; void elements drop content."""
    merged = {**(attrs or {}), **kwargs}
    if name in VOID_ELEMENTS:
        return tag(name, merged)
    inner = escape(content) if content is not None else Markup("")
    return Markup(f"<{name}{tag_attributes(merged)}>{inner}</{name}>")


def safe_join(parts: Iterable[Any], separator: str = "") -> Markup:
    """Join fragments, escaping anything that is not already markup."""
    return Markup(escape(separator)).join(escape(part) for part in parts if part is not None)


def link_to(
    content: Any, href: Any, attrs: Mapping[str, Any] | None = None, **kwargs: Any
) -> Markup:
    return content_tag("a", content, {"href": href, **(attrs or {}), **kwargs})


def image_tag(src: Any, attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> Markup:
    return tag("img", {"src": src, **(attrs or {}), **kwargs})


def form_tag(
    content: Any, action: Any = None, attrs: Mapping[str, Any] | None = None, **kwargs: Any
) -> Markup:
    merged = {"action": action, **(attrs or {}), **kwargs}
    merged["method"] = merged.get("method") or "post"
    return content_tag("form", content, merged)
