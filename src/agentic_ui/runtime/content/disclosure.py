"""
Disclosure renderers: accordion and tabs.

Both emit Stimulus hooks (``data-controller``, ``data-action`` and targets)
for the client-side controllers of the same name.
"""

from __future__ import annotations

from markupsafe import Markup

from agentic_ui.runtime.html import content_tag, safe_join
from agentic_ui.runtime.render_state import RenderOptions

from .common import EMPTY, collection, field


def render_accordion(state: RenderOptions) -> Markup:
    items = collection(state.get("items", "sections"))
    if not items:
        return EMPTY

    rendered = []
    for index, item in enumerate(items, start=1):
        header = content_tag(
            "button",
            field(item, "title", "header") or f"Item {index}",
            class_="accordion-header",
            data={"action": "accordion#toggle"},
        )
        body = content_tag(
            "div",
            content_tag("p", field(item, "content", "description") or ""),
            class_="accordion-content",
        )
        rendered.append(
            content_tag(
                "div",
                safe_join([header, body]),
                class_="accordion-item",
                data={"accordion_target": "item"},
            )
        )

    return content_tag(
        "div", safe_join(rendered), class_="accordion", data={"controller": "accordion"}
    )


def render_tabs(state: RenderOptions) -> Markup:
    """Header row plus one panel per tab; the first of each is active."""
    tabs = collection(state.get("tabs", "items"))
    if not tabs:
        return EMPTY

    buttons = []
    panels = []
    for index, item in enumerate(tabs):
        active = " active" if index == 0 else ""
        buttons.append(
            content_tag(
                "button",
                field(item, "label", "title") or f"Tab {index + 1}",
                class_=f"tab-button{active}",
                role="tab",
                data={"action": "tabs#select", "tabs_target": "tab"},
            )
        )
        panels.append(
            content_tag(
                "div",
                content_tag("p", field(item, "content", "description") or ""),
                class_=f"tab-panel{active}",
                role="tabpanel",
                data={"tabs_target": "panel"},
            )
        )

    header = content_tag("div", safe_join(buttons), class_="tabs-header", role="tablist")
    return content_tag(
        "div", safe_join([header, *panels]), class_="tabs", data={"controller": "tabs"}
    )
