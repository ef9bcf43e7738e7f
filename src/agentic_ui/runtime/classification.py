"""
Content-shape classification.

Decides whether an invocation is a hero block and whether it renders from
structured data at all.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from agentic_ui.specs.component import ComponentDefinition

HERO_TYPES = frozenset(
    {
        "hero_wrapper",
        "hero_section",
        "hero_video_background",
        "ux.hero_wrapper",
        "ux.hero_section",
    }
)

NON_HERO_TYPES = frozenset(
    {
        # primitives
        "icon",
        "button",
        "item",
        "link",
        "menu",
        "dropdown",
        "divider",
        "header",
        "label",
        "badge",
        "image",
        "avatar",
        # form controls
        "input",
        "checkbox",
        "radio",
        "toggle",
        # layout
        "segment",
        "container",
        "grid",
        "column",
        "row",
        # data displays
        "timeline",
        "timeline_vertical",
        "timeline_display",
        "team_grid",
        "cards",
        "statistics",
        "accordion",
        "tabs",
        "table",
        "list",
        "featured_grid",
        "certifications_grid",
        "values_grid",
        "testimonials",
        "pricing",
        "faq",
        # page sections
        "navigation",
        "footer",
        "cta",
        "cta_section",
        "split_layout",
        "bento_grid",
        "stats_counter",
        "kpi_dashboard",
        "logo_cloud",
        "feature_grid",
        "testimonial_grid",
        "contact_cards",
        "comparison_table",
        "pricing_cards",
    }
)

NAMESPACE_PREFIX = "ux."

COLLECTION_KEYS = ("statistics", "cards", "items", "entries", "rows")
HERO_TEXT_KEYS = ("headline", "title", "subtitle")


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, Sequence, Mapping)):
        return len(value) > 0
    return True


def _non_empty_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str) and len(value) > 0


def is_hero_component(
    name: str, definition: ComponentDefinition | None, options: Mapping[str, Any]
) -> bool:
    """Hero classification, first matching rule wins.

    Names always win, then an explicit non-hero render method, then the
    exclusion list and namespace convention; otherwise hero text in the
    payload decides.
    """
    name = name.lower()
    if name in HERO_TYPES or "hero" in name:
        return True

    render_method = definition.render_method if definition is not None else None
    if render_method and render_method != "hero":
        return False

    if name in NON_HERO_TYPES:
        return False

    if name.startswith(NAMESPACE_PREFIX):
        return False

    return any(_present(options.get(key)) for key in HERO_TEXT_KEYS)


def is_data_driven(
    name: str, definition: ComponentDefinition | None, options: Mapping[str, Any]
) -> bool:
    if is_hero_component(name, definition, options):
        return True
    if any(_non_empty_sequence(options.get(key)) for key in COLLECTION_KEYS):
        return True
    return bool(definition is not None and definition.data_driven)
