"""
Content dispatch.

Picks exactly one renderer per invocation. Priority: the active variant's
render method, the definition's render method, hero classification, then the
component name, defaulting to the generic renderer. Unknown render method
names are logged and skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from markupsafe import Markup

from agentic_ui.runtime.render_state import RenderOptions
from agentic_ui.specs.component import ComponentDefinition

from .collections import render_cards, render_generic, render_grid, render_statistics
from .disclosure import render_accordion, render_tabs
from .heroes import render_hero, render_hero_split, render_hero_video
from .layouts import render_article, render_modal, render_sidebar, render_split
from .tabular import render_table, render_timeline

logger = logging.getLogger(__name__)

Renderer = Callable[[RenderOptions], Markup]

RENDERERS: dict[str, Renderer] = {
    "hero": render_hero,
    "hero_video": render_hero_video,
    "hero_split": render_hero_split,
    "statistics": render_statistics,
    "cards": render_cards,
    "grid": render_grid,
    "list": render_grid,
    "accordion": render_accordion,
    "tabs": render_tabs,
    "table": render_table,
    "timeline": render_timeline,
    "split": render_split,
    "sidebar": render_sidebar,
    "modal": render_modal,
    "article": render_article,
    "generic_data": render_generic,
    "generic": render_generic,
}

# Component names routed by name when nothing more specific applies.
NAME_RENDERERS: dict[str, Renderer] = {
    "statistics": render_statistics,
    "cards": render_cards,
    "grid": render_grid,
    "list": render_grid,
}


def _lookup(method: str | None, source: str, component: str) -> Renderer | None:
    if not method:
        return None
    renderer = RENDERERS.get(method)
    if renderer is None:
        logger.warning(f"Unknown render_method '{method}' on {source} of component '{component}'")
    return renderer


def select_renderer(
    name: str, definition: ComponentDefinition, state: RenderOptions, *, hero: bool
) -> Renderer:
    """The renderer for this invocation."""
    if state.variant is not None:
        renderer = _lookup(state.variant.render_method, f"variant '{state.variant_name}'", name)
        if renderer is not None:
            return renderer

    renderer = _lookup(definition.render_method, "definition", name)
    if renderer is not None:
        return renderer

    if hero:
        return render_hero

    return NAME_RENDERERS.get(name, render_generic)


def dispatch(
    name: str, definition: ComponentDefinition, state: RenderOptions, *, hero: bool
) -> Markup:
    return select_renderer(name, definition, state, hero=hero)(state)
