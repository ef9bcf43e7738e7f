"""
Final attribute assembly.

Folds the accumulated classes, styles and ``data`` entries into the attribute
mapping handed to the tag primitive, and strips every option that is a
content payload or a pipeline instruction rather than an HTML attribute.
"""

from __future__ import annotations

from typing import Any

from agentic_ui.core.settings import AgenticUISettings
from agentic_ui.specs.component import ComponentDefinition

from .render_state import RenderOptions

# Inputs of the content renderers; never serialized as attributes.
DATA_DRIVEN_KEYS = frozenset(
    {
        # hero
        "headline",
        "title",
        "subtitle",
        "description",
        "cta_text",
        "cta_url",
        "button_text",
        "button_link",
        "secondary_cta_text",
        "secondary_cta_url",
        "background_image",
        "image_url",
        "fallback_image",
        "video_url",
        "poster",
        "media_url",
        "media_alt",
        "reverse",
        # collections
        "statistics",
        "cards",
        "items",
        "entries",
        "rows",
        "headers",
        "columns",
        "tabs",
        "sections",
        "events",
        "section_title",
        "section_subtitle",
        "layout",
        # layouts
        "left",
        "right",
        "content",
        "image",
        "reversed",
        "main",
        "sidebar",
        "aside",
        "sidebar_position",
        # article
        "body",
        "author",
        "date",
        "published_at",
        "featured_image",
        # section presets
        "stats",
        "cta_primary",
        "cta_secondary",
        "primary_cta_text",
        "primary_cta_url",
        "grid_title",
        "show_icons",
        "features",
        "benefits",
        "faqs",
        "plans",
        "gap",
        "min_height",
        "text_alignment",
        "overlay_opacity",
        "duration_ms",
        "animate_on_scroll",
    }
)

# Pipeline instructions consumed before serialization.
INSTRUCTION_KEYS = frozenset(
    {"text", "tag", "controller", "action", "variant", "css_overrides", "agent"}
)

BACKGROUND_IMAGE_KEYS = ("background_image", "image_url", "fallback_image")


def _append_token(existing: Any, token: str) -> str:
    if existing in (None, ""):
        return token
    return f"{existing} {token}"


def resolve_tag(definition: ComponentDefinition, state: RenderOptions) -> str | None:
    """Explicit ``tag`` option overrides the definition's tag."""
    override = state.attrs.get("tag")
    if override:
        return str(override)
    return definition.tag


def background_image(state: RenderOptions) -> Any:
    return state.get(*BACKGROUND_IMAGE_KEYS)


def resolve_controller(
    definition: ComponentDefinition, state: RenderOptions, settings: AgenticUISettings
) -> str | None:
    explicit = state.attrs.get("controller")
    if explicit:
        return str(explicit)
    if not settings.stimulus_integration:
        return None
    if state.variant is not None and state.variant.stimulus_controller:
        return state.variant.stimulus_controller
    return definition.stimulus_controller


def build_attributes(
    definition: ComponentDefinition,
    state: RenderOptions,
    settings: AgenticUISettings,
    *,
    hero: bool = False,
) -> dict[str, Any]:
    """Produce the attribute mapping for the tag primitive."""
    data = dict(state.data)

    controller = resolve_controller(definition, state, settings)
    if controller:
        data["controller"] = _append_token(data.get("controller"), controller)

    action = state.attrs.get("action")
    if action:
        data["action"] = _append_token(data.get("action"), str(action))

    if hero:
        state.add_hero_background(background_image(state))

    attributes: dict[str, Any] = {
        key: value
        for key, value in state.attrs.items()
        if key not in DATA_DRIVEN_KEYS and key not in INSTRUCTION_KEYS and key != "class"
    }

    if definition.type and "type" not in attributes:
        attributes["type"] = definition.type

    result: dict[str, Any] = {}
    if state.class_string:
        result["class"] = state.class_string
    result.update(attributes)
    if state.style_string:
        result["style"] = state.style_string
    result["data"] = data
    return result
