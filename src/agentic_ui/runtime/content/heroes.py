"""
Hero renderers: standard, background video, and split layout.

The background image is applied to the outer container's style, not to the
inner block these renderers return.
"""

from __future__ import annotations

from markupsafe import Markup

from agentic_ui.runtime.html import content_tag, image_tag, safe_join
from agentic_ui.runtime.render_state import RenderOptions

from .common import EMPTY, cta_group, present


def render_hero(state: RenderOptions) -> Markup:
    headline = state.get("headline", "title")
    subtitle = state.get("subtitle", "description")

    state.add_hero_background(state.get("background_image", "image_url"))

    inner: list[Markup] = []
    if present(headline):
        inner.append(
            content_tag("h1", headline, class_="hero-headline", data={"animate": "fade-up"})
        )
    if present(subtitle):
        inner.append(
            content_tag("p", subtitle, class_="hero-subtitle", data={"animate": "fade-up"})
        )
    inner.append(
        cta_group(
            state.get("cta_text", "button_text"),
            state.get("cta_url", "button_link"),
            state.get("secondary_cta_text"),
            state.get("secondary_cta_url"),
        )
    )
    return content_tag("div", safe_join(inner), class_="hero-content")


def render_hero_video(state: RenderOptions) -> Markup:
    """Video layer beneath the standard hero block."""
    video_url = state.get("video_url")
    video = EMPTY
    if present(video_url):
        poster = state.get("poster", "background_image")
        video = content_tag(
            "div",
            content_tag(
                "video",
                None,
                {
                    "src": video_url,
                    "poster": poster,
                    "autoplay": True,
                    "muted": True,
                    "loop": True,
                    "playsinline": True,
                    "class": "hero-video",
                },
            ),
            class_="hero-video-container",
        )
    return safe_join([video, render_hero(state)])


def render_hero_split(state: RenderOptions) -> Markup:
    """Content column and media column; ``reverse`` only adds a modifier class."""
    headline = state.get("headline", "title")
    subtitle = state.get("subtitle", "description")
    media_url = state.get("media_url", "image_url", "background_image")
    media_alt = state.get("media_alt") or headline or ""

    layout_class = "hero-split-layout"
    if state.attrs.get("reverse"):
        layout_class += " hero-split-layout--reverse"

    content: list[Markup] = []
    if present(headline):
        content.append(
            content_tag("h1", headline, class_="hero-headline", data={"animate": "fade-up"})
        )
    if present(subtitle):
        content.append(
            content_tag("p", subtitle, class_="hero-subtitle", data={"animate": "fade-up"})
        )
    content.append(
        cta_group(
            state.get("cta_text"),
            state.get("cta_url"),
            state.get("secondary_cta_text"),
            state.get("secondary_cta_url"),
        )
    )

    media = EMPTY
    if present(media_url):
        media = image_tag(media_url, alt=media_alt, class_="hero-split-image")

    return content_tag(
        "div",
        safe_join(
            [
                content_tag("div", safe_join(content), class_="hero-split-content"),
                content_tag(
                    "div", media, class_="hero-split-media", data={"animate": "fade-left"}
                ),
            ]
        ),
        class_=layout_class,
    )
