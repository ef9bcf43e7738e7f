"""
Variant resolution.

A variant is a named override declared under a component's ``variants`` key.
It contributes a modifier class, inline CSS variables and ``data-variant``,
and may swap the content renderer or reactive controller for one render.
"""

from __future__ import annotations

import logging

from agentic_ui.specs.component import ComponentDefinition

from .render_state import RenderOptions

logger = logging.getLogger(__name__)


def resolve_variant(definition: ComponentDefinition, state: RenderOptions) -> None:
    """Apply the ``variant`` option to ``state`` in place.

    An unknown variant logs a warning and leaves the base styling alone.
    """
    requested = state.attrs.pop("variant", None)
    if requested is None or requested == "":
        return

    name = str(requested)
    variant = definition.get_variant(name)
    if variant is None:
        available = ", ".join(definition.variants) or "none"
        logger.warning(
            f"Unknown variant '{name}' for component '{definition.name}' "
            f"(available: {available})"
        )
        return

    state.variant_name = name
    state.variant = variant
    state.append_class(variant.css_modifier)
    for prop, value in variant.css_variables.items():
        state.add_css_variable(prop, value)
    state.data["variant"] = name
