"""
Learned-preference integration.

A PreferenceBridge is an optional collaborator that, given an agent and a
component, returns the preferences it learned (or is A/B testing). Its result
shape::

    {
        "preferences_applied": {"learned": True, "ab_test": False},
        "rendered": {
            "theme_variables": {"--card-radius": "12px"},
            "html_attributes": {
                "layout": {...}, "animation": {...}, "accessibility": {...},
                "responsive": {...}, "interaction": {...},
            },
        },
    }

Only theme variables prefixed with ``--<component>`` are applied. Bridge
failures and cross-tenant agents are logged and skipped; rendering always
continues with the base configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from .render_state import RenderOptions
from .tenancy import get_current_tenant_id

logger = logging.getLogger(__name__)


class PreferenceBridge(Protocol):
    def __call__(
        self,
        *,
        agent: Any,
        tenant_id: str | None,
        component_type: str,
        base_config: dict[str, Any],
        component_data: dict[str, Any],
    ) -> Mapping[str, Any]: ...


def _section(source: Any, key: str) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    value = source.get(key)
    return value if isinstance(value, Mapping) else {}


def _copy_present(
    target: dict[str, Any], source: Mapping[str, Any], mapping: Mapping[str, str]
) -> None:
    """Copy ``source`` values to renamed keys of ``target``, skipping None and False."""
    for source_key, target_key in mapping.items():
        value = source.get(source_key)
        if value is not None and value is not False:
            target[target_key] = value


def _copy_defined(
    target: dict[str, Any], source: Mapping[str, Any], mapping: Mapping[str, str]
) -> None:
    """Copy ``source`` values whose key is present, falsy ones included."""
    for source_key, target_key in mapping.items():
        if source_key in source:
            target[target_key] = source[source_key]


# =============================================================================
# Attribute categories
# =============================================================================


def apply_layout_attributes(state: RenderOptions, layout: Mapping[str, Any]) -> None:
    _copy_present(
        state.data,
        layout,
        {
            "display": "layout",
            "flex_direction": "flex-direction",
            "justify_content": "justify",
            "align_items": "align",
            "grid_columns": "grid-cols",
            "gap": "gap",
        },
    )


def apply_animation_attributes(state: RenderOptions, animation: Mapping[str, Any]) -> None:
    _copy_present(
        state.data,
        animation,
        {
            "type": "animation",
            "duration": "animation-duration",
            "delay": "animation-delay",
            "transition": "transition",
        },
    )


def apply_accessibility_attributes(state: RenderOptions, a11y: Mapping[str, Any]) -> None:
    """ARIA attributes land on the element itself, not under ``data``."""
    _copy_present(
        state.attrs,
        a11y,
        {
            "role": "role",
            "label": "aria-label",
            "labelledby": "aria-labelledby",
            "describedby": "aria-describedby",
            "live": "aria-live",
            "tabindex": "tabindex",
        },
    )
    _copy_defined(state.attrs, a11y, {"expanded": "aria-expanded", "hidden": "aria-hidden"})


def apply_responsive_attributes(state: RenderOptions, responsive: Mapping[str, Any]) -> None:
    if responsive.get("enabled"):
        state.data["responsive"] = "true"
    _copy_defined(
        state.data,
        responsive,
        {
            "mobile_visible": "mobile-visible",
            "tablet_visible": "tablet-visible",
            "desktop_visible": "desktop-visible",
        },
    )
    _copy_present(state.data, responsive, {"breakpoint": "breakpoint"})


def apply_interaction_attributes(state: RenderOptions, interaction: Mapping[str, Any]) -> None:
    if interaction.get("enabled"):
        state.data["interactive"] = "true"
    _copy_present(
        state.data,
        interaction,
        {
            "hover_effect": "hover-effect",
            "focus_style": "focus-style",
            "click_action": "click-action",
            "touch_target": "touch-target",
        },
    )


_CATEGORIES = {
    "layout": apply_layout_attributes,
    "animation": apply_animation_attributes,
    "accessibility": apply_accessibility_attributes,
    "responsive": apply_responsive_attributes,
    "interaction": apply_interaction_attributes,
}


def apply_theme_variables(
    state: RenderOptions, component_type: str, theme_variables: Mapping[str, Any]
) -> None:
    prefix = f"--{component_type}"
    for name, value in theme_variables.items():
        if str(name).startswith(prefix):
            state.add_style(f"{name}: {value}")


def apply_html_attributes(state: RenderOptions, html_attributes: Mapping[str, Any]) -> None:
    for category, apply in _CATEGORIES.items():
        section = _section(html_attributes, category)
        if section:
            apply(state, section)


# =============================================================================
# Bridge
# =============================================================================


def resolve_tenant_id(agent: Any) -> str | None:
    """Request tenant first, then the agent's own."""
    current = get_current_tenant_id()
    if current:
        return current
    return getattr(agent, "tenant_id", None)


def apply_agent_preferences(
    bridge: PreferenceBridge,
    agent: Any,
    component_type: str,
    base_config: Mapping[str, Any],
    state: RenderOptions,
) -> None:
    """Merge the bridge's learned preferences into ``state``."""
    tenant_id = resolve_tenant_id(agent)
    agent_tenant = getattr(agent, "tenant_id", None)
    if tenant_id and agent_tenant is not None and str(agent_tenant) != str(tenant_id):
        logger.warning(
            f"Cross-tenant agent rejected: agent {getattr(agent, 'id', None)} "
            f"for tenant {tenant_id}"
        )
        return

    try:
        result = bridge(
            agent=agent,
            tenant_id=tenant_id,
            component_type=component_type,
            base_config=dict(base_config),
            component_data=dict(state.attrs),
        )

        applied = _section(result, "preferences_applied")
        if applied.get("learned") or applied.get("ab_test"):
            rendered = _section(result, "rendered")
            apply_theme_variables(state, component_type, _section(rendered, "theme_variables"))
            apply_html_attributes(state, _section(rendered, "html_attributes"))

        agent_id = getattr(agent, "id", None)
        if agent_id not in (None, ""):
            state.data["agent-session"] = str(agent_id)
        state.data["agent-aware"] = "true"
    except Exception as e:
        logger.warning(f"Agent preference application failed: {e}")
        logger.debug("Preference bridge traceback", exc_info=True)
