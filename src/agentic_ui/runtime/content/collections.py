"""
Collection renderers: statistics, cards, grid/list and the generic fallback.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from agentic_ui.runtime.html import content_tag, link_to, safe_join, tag
from agentic_ui.runtime.render_state import RenderOptions

from .common import DEFAULT_COLUMNS, EMPTY, collection, column_class, field, icon_class

# =============================================================================
# Statistics
# =============================================================================


def _statistic_item(stat: Any) -> Markup:
    inner: list[Markup] = []
    icon = field(stat, "icon")
    if icon is not None:
        color = field(stat, "color")
        inner.append(
            content_tag(
                "div",
                "",
                class_=f"stat-icon {icon_class(icon)}",
                style=f"color: {color}" if color is not None else None,
            )
        )
    inner.append(content_tag("div", field(stat, "value"), class_="stat-value"))
    inner.append(content_tag("div", field(stat, "label"), class_="stat-label"))
    return content_tag("div", safe_join(inner), class_="stat-item")


def render_statistics(state: RenderOptions) -> Markup:
    statistics = collection(state.attrs.get("statistics"))
    if not statistics:
        return EMPTY

    layout = "stats-vertical" if state.attrs.get("layout") == "vertical" else "stats-horizontal"
    grid = content_tag(
        "div",
        safe_join(_statistic_item(stat) for stat in statistics),
        class_=f"stats-grid {layout}",
    )

    section_title = state.get("section_title")
    if section_title is None:
        return grid
    return safe_join([content_tag("h2", section_title, class_="stats-title"), grid])


# =============================================================================
# Cards
# =============================================================================


def _card_item(card: Any) -> Markup:
    inner: list[Markup] = []
    image = field(card, "image")
    if image is not None:
        alt = field(card, "title") or ""
        inner.append(
            content_tag(
                "div",
                tag("img", {"src": image, "alt": alt, "loading": "lazy"}),
                class_="card-image",
            )
        )

    body: list[Markup] = []
    title = field(card, "title", "header")
    if title is not None:
        body.append(content_tag("h3", title, class_="card-title"))
    description = field(card, "description")
    if description is not None:
        body.append(content_tag("p", description, class_="card-desc"))
    meta = field(card, "meta")
    if meta is not None:
        body.append(content_tag("div", meta, class_="card-meta"))
    link = field(card, "link")
    if link is not None:
        body.append(link_to("Learn more", link, class_="card-link"))
    inner.append(content_tag("div", safe_join(body), class_="card-content"))

    return content_tag("div", safe_join(inner), class_="card-item")


def render_cards(state: RenderOptions) -> Markup:
    cards = collection(state.attrs.get("cards"))
    if not cards:
        return EMPTY

    columns = state.attrs.get("columns") or DEFAULT_COLUMNS
    grid = content_tag(
        "div",
        safe_join(_card_item(card) for card in cards),
        class_=f"cards-grid {column_class('cards-cols-', columns)}",
    )

    header: list[Markup] = []
    section_title = state.get("section_title")
    if section_title is not None:
        header.append(content_tag("h2", section_title, class_="cards-title"))
    section_subtitle = state.get("section_subtitle")
    if section_subtitle is not None:
        header.append(content_tag("p", section_subtitle, class_="cards-subtitle"))
    if not header:
        return grid
    return safe_join([*header, grid])


# =============================================================================
# Grid / list
# =============================================================================


def _grid_item(item: Any) -> Markup:
    if not isinstance(item, Mapping):
        return content_tag("div", str(item), class_="grid-item")

    inner: list[Markup] = []
    icon = field(item, "icon")
    if icon is not None:
        inner.append(content_tag("div", "", class_=f"grid-icon {icon_class(icon)}"))
    title = field(item, "title", "header")
    if title is not None:
        inner.append(content_tag("h4", title, class_="grid-item-title"))
    description = field(item, "description", "content")
    if description is not None:
        inner.append(content_tag("p", description, class_="grid-item-desc"))
    return content_tag("div", safe_join(inner), class_="grid-item")


def render_grid(state: RenderOptions) -> Markup:
    items = collection(state.attrs.get("items"))
    if not items:
        return EMPTY

    columns = state.attrs.get("columns") or DEFAULT_COLUMNS
    grid = content_tag(
        "div",
        safe_join(_grid_item(item) for item in items),
        class_=f"items-grid {column_class('grid-cols-', columns)}",
    )

    section_title = state.get("section_title")
    if section_title is None:
        return grid
    return safe_join([content_tag("h2", section_title, class_="grid-title"), grid])


# =============================================================================
# Generic
# =============================================================================


def _data_item(item: Any) -> Markup:
    if not isinstance(item, Mapping):
        return content_tag("div", str(item), class_="data-item")

    inner: list[Markup] = []
    primary = field(item, "value", "title")
    if primary is not None:
        inner.append(content_tag("span", primary, class_="item-primary"))
    secondary = field(item, "label", "description")
    if secondary is not None:
        inner.append(content_tag("span", secondary, class_="item-secondary"))
    return content_tag("div", safe_join(inner), class_="data-item")


def render_generic(state: RenderOptions) -> Markup:
    """Primary/secondary text pairs from the first non-empty collection."""
    for key in ("items", "entries", "statistics", "cards"):
        entries = collection(state.attrs.get(key))
        if entries:
            return safe_join(_data_item(item) for item in entries)
    return EMPTY

