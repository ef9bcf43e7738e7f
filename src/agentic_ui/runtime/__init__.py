"""
AgenticUI rendering runtime.

Usage:
    from agentic_ui.runtime import get_display, agent_context

    ux = get_display()
    with agent_context(ctx):
        html = ux.widget("stats", statistics=[{"value": "42", "label": "Users"}])
"""

from .agent_context import (
    agent_context,
    get_current_agent_context,
    reset_current_agent_context,
    set_current_agent_context,
)
from .arguments import normalize_arguments
from .component import Component
from .display import Display, get_display, reset_display, set_display
from .legacy_compat import apply_legacy_compat, number_in_words
from .preferences import PreferenceBridge
from .registry import ComponentRegistry
from .render_state import RenderOptions
from .tenancy import get_current_tenant_id, set_current_tenant_id, tenant_scope

__all__ = [
    "Component",
    "ComponentRegistry",
    "Display",
    "PreferenceBridge",
    "RenderOptions",
    "agent_context",
    "apply_legacy_compat",
    "get_current_agent_context",
    "get_current_tenant_id",
    "get_display",
    "normalize_arguments",
    "number_in_words",
    "reset_current_agent_context",
    "reset_display",
    "set_current_agent_context",
    "set_current_tenant_id",
    "set_display",
    "tenant_scope",
]
