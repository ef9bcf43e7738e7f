"""
Layout renderers: split, sidebar, modal and article.

Sidebar, modal and article bodies are escaped unless passed as
``markupsafe.Markup``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from agentic_ui.runtime.html import content_tag, safe_join, tag
from agentic_ui.runtime.render_state import RenderOptions

from .common import field, present

IMAGE_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif|webp|svg)", re.IGNORECASE)


def _text(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, Markup):
        return value
    return str(value)


def render_split(state: RenderOptions) -> Markup:
    left = state.get("left", "content")
    right = state.get("right", "image")
    reversed_class = " reversed" if state.attrs.get("reversed") else ""

    if isinstance(left, Mapping):
        inner: list[Markup] = []
        headline = field(left, "headline", "title")
        if headline is not None:
            inner.append(content_tag("h2", headline, class_="split-headline"))
        description = field(left, "description", "text")
        if description is not None:
            inner.append(content_tag("p", description, class_="split-desc"))
        left_column = content_tag("div", safe_join(inner), class_="split-content")
    else:
        left_column = content_tag("div", content_tag("p", _text(left)), class_="split-content")

    if isinstance(right, str) and IMAGE_PATTERN.search(right):
        media = tag("img", {"src": right, "alt": "", "loading": "lazy", "class": "split-image"})
    else:
        media = content_tag("p", _text(right))
    right_column = content_tag("div", media, class_="split-media")

    return content_tag(
        "div", safe_join([left_column, right_column]), class_=f"split-layout{reversed_class}"
    )


def render_sidebar(state: RenderOptions) -> Markup:
    """``sidebar_position`` is ``right`` by default; ``left`` puts the aside first."""
    main = _text(state.get("main", "content"))
    aside = _text(state.get("sidebar", "aside"))
    position = str(state.get("sidebar_position") or "right")

    main_column = content_tag("main", main, class_="sidebar-main")
    aside_column = content_tag("aside", aside, class_="sidebar-aside")
    columns = [aside_column, main_column] if position == "left" else [main_column, aside_column]
    return content_tag("div", safe_join(columns), class_=f"sidebar-layout sidebar-{position}")


def render_modal(state: RenderOptions) -> Markup:
    title = state.get("title")
    body = _text(state.get("content", "body"))

    header: list[Markup] = []
    if present(title):
        header.append(content_tag("h2", title, class_="modal-title"))
    header.append(
        content_tag("button", "×", class_="modal-close", data={"action": "modal#close"})
    )

    dialog = content_tag(
        "div",
        safe_join(
            [
                content_tag("header", safe_join(header), class_="modal-header"),
                content_tag("div", body, class_="modal-body"),
            ]
        ),
        class_="modal-dialog",
        role="dialog",
    )
    backdrop = content_tag(
        "div", dialog, class_="modal-backdrop", data={"action": "click->modal#close"}
    )
    return content_tag("div", backdrop, class_="modal", data={"controller": "modal"})


def render_article(state: RenderOptions) -> Markup:
    title = state.get("title", "headline")
    author = state.get("author")
    date = state.get("date", "published_at")
    image = state.get("image", "featured_image")
    body = _text(state.get("content", "body"))

    parts: list[Markup] = []
    if present(image):
        parts.append(
            content_tag(
                "figure",
                tag("img", {"src": image, "alt": title or "", "loading": "lazy"}),
                class_="article-image",
            )
        )

    header: list[Markup] = []
    if present(title):
        header.append(content_tag("h1", title, class_="article-title"))
    meta: list[Markup] = []
    if present(author):
        meta.append(content_tag("span", author, class_="article-author"))
    if present(date):
        meta.append(content_tag("time", date, class_="article-date"))
    if meta:
        header.append(content_tag("div", safe_join(meta, " · "), class_="article-meta"))
    parts.append(content_tag("header", safe_join(header), class_="article-header"))

    parts.append(content_tag("div", body, class_="article-content"))
    return content_tag("article", safe_join(parts), class_="article")

