"""
Table and timeline renderers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from agentic_ui.runtime.html import content_tag, safe_join
from agentic_ui.runtime.render_state import RenderOptions

from .common import EMPTY, collection, field


def _header_label(header: Any) -> Any:
    if isinstance(header, Mapping):
        label = field(header, "label", "title")
        if label is not None:
            return label
        return next(iter(header.values()), "")
    return header


def _row_cells(row: Any) -> list[Any]:
    if isinstance(row, Mapping):
        return list(row.values())
    if isinstance(row, (list, tuple)):
        return list(row)
    return [row]


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def render_table(state: RenderOptions) -> Markup:
    """Headers are optional; no rows means no table at all."""
    rows = collection(state.attrs.get("rows"))
    if not rows:
        return EMPTY
    headers = collection(state.get("headers", "columns"))

    parts: list[Markup] = []
    if headers:
        header_cells = safe_join(content_tag("th", _header_label(h)) for h in headers)
        parts.append(content_tag("thead", content_tag("tr", header_cells)))

    body_rows = (
        content_tag(
            "tr", safe_join(content_tag("td", _cell_text(cell)) for cell in _row_cells(row))
        )
        for row in rows
    )
    parts.append(content_tag("tbody", safe_join(body_rows)))

    table = content_tag("table", safe_join(parts), class_="data-table")
    return content_tag("div", table, class_="table-wrapper")


def render_timeline(state: RenderOptions) -> Markup:
    events = collection(state.get("events", "items"))
    if not events:
        return EMPTY

    rendered = []
    for event in events:
        content: list[Markup] = []
        title = field(event, "title", "header")
        if title is not None:
            content.append(content_tag("h4", title, class_="timeline-title"))
        description = field(event, "description", "content")
        if description is not None:
            content.append(content_tag("p", description, class_="timeline-desc"))

        rendered.append(
            content_tag(
                "div",
                safe_join(
                    [
                        content_tag(
                            "div", field(event, "date", "time") or "", class_="timeline-date"
                        ),
                        content_tag("div", safe_join(content), class_="timeline-content"),
                    ]
                ),
                class_="timeline-item",
            )
        )

    return content_tag("div", safe_join(rendered), class_="timeline")
