"""
Built-in component table for AgenticUI.

Used when a project ships no ``config/agentic_ui.yml``. Each entry is the
raw mapping form of a ComponentDefinition, exactly as it would appear under
the ``ui:`` key of a YAML file.
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Default Component Table
# =============================================================================

DEFAULT_COMPONENTS: dict[str, dict[str, Any]] = {
    # Layout
    "container": {
        "tag": "div",
        "css_class": "container",
        "ai_controllable": True,
        "ai_commands": ["theme", "layout", "responsive"],
        "css_layer": "agentic-layout",
        "unified_theme_vars": ["--container-width", "--container-padding"],
    },
    "grid": {
        "tag": "div",
        "css_class": "grid",
        "ai_controllable": True,
        "ai_commands": ["layout", "columns", "gap"],
        "css_layer": "agentic-layout",
    },
    "column": {
        "tag": "div",
        "css_class": "column",
        "ai_controllable": True,
        "ai_commands": ["width", "responsive", "order"],
        "css_layer": "agentic-layout",
    },
    # Agent-aware components
    "widget": {
        "tag": "div",
        "css_class": "widget",
        "ai_controllable": True,
        "ai_commands": ["theme", "layout", "animate", "personality"],
        "css_layer": "agentic-components",
        "agent_aware": True,
        "stimulus_controller": "agentic-widget",
    },
    "card": {
        "tag": "div",
        "css_class": "card",
        "ai_controllable": True,
        "ai_commands": ["theme", "layout", "animate", "elevation"],
        "css_layer": "agentic-components",
        "agent_aware": True,
        "stimulus_controller": "enhanced-card",
    },
    "button": {
        "tag": "button",
        "css_class": "btn",
        "ai_controllable": True,
        "ai_commands": ["theme", "style", "animate", "resize", "personality"],
        "css_layer": "agentic-interactive",
        "agent_aware": True,
        "stimulus_controller": "enhanced-button",
    },
    # Content
    "content": {
        "tag": "div",
        "css_class": "content",
        "ai_controllable": True,
        "ai_commands": ["typography", "spacing", "theme"],
        "css_layer": "agentic-content",
    },
    "meta": {
        "tag": "div",
        "css_class": "meta",
        "ai_controllable": True,
        "ai_commands": ["theme", "typography"],
        "css_layer": "agentic-content",
    },
    "description": {
        "tag": "div",
        "css_class": "description",
        "ai_controllable": True,
        "ai_commands": ["typography", "theme"],
        "css_layer": "agentic-content",
    },
    "header": {
        "tag": "div",
        "css_class": "header",
        "ai_controllable": True,
        "ai_commands": ["typography", "theme", "hierarchy"],
        "css_layer": "agentic-content",
    },
    # Interactive
    "input": {
        "tag": "input",
        "css_class": "field",
        "ai_controllable": True,
        "ai_commands": ["theme", "validate", "format", "personality"],
        "css_layer": "agentic-interactive",
        "agent_aware": True,
        "stimulus_controller": "enhanced-input",
    },
    "overlay": {
        "tag": "div",
        "css_class": "overlay",
        "ai_controllable": True,
        "ai_commands": ["theme", "animate", "backdrop"],
        "css_layer": "agentic-overlay",
    },
    "icon": {
        "tag": "i",
        "css_class": "icon",
        "ai_controllable": True,
        "ai_commands": ["theme", "size", "animate"],
        "css_layer": "agentic-components",
    },
    "item": {
        "tag": "div",
        "css_class": "item",
        "ai_controllable": True,
        "ai_commands": ["theme", "layout", "interactive"],
        "css_layer": "agentic-components",
    },
}


# =============================================================================
# Legacy Table Enhancements
# =============================================================================

# Merged onto matching entries of a legacy ``config/ui.yml`` table.
LEGACY_ENHANCEMENTS: dict[str, dict[str, Any]] = {
    "widget": {
        "ai_controllable": True,
        "ai_commands": ["theme", "layout", "animate", "personality"],
        "css_layer": "agentic-components",
        "agent_aware": True,
        "stimulus_controller": "agentic-widget",
    },
    "card": {
        "ai_controllable": True,
        "ai_commands": ["theme", "layout", "animate", "elevation"],
        "css_layer": "agentic-components",
        "agent_aware": True,
        "stimulus_controller": "enhanced-card",
    },
    "button": {
        "ai_controllable": True,
        "ai_commands": ["theme", "style", "animate", "resize"],
        "css_layer": "agentic-interactive",
        "stimulus_controller": "enhanced-button",
    },
    "input": {
        "ai_controllable": True,
        "ai_commands": ["theme", "validate", "format"],
        "css_layer": "agentic-interactive",
        "stimulus_controller": "enhanced-input",
    },
}

DEFAULT_CSS_LAYER = "agentic-components"


def default_ui_table() -> dict[str, Any]:
    """Return a fresh copy of the built-in table in ``{"ui": {...}}`` form."""
    return {"ui": {name: copy_entry(entry) for name, entry in DEFAULT_COMPONENTS.items()}}


def copy_entry(entry: dict[str, Any]) -> dict[str, Any]:
    """Shallow copy with list values copied too."""
    return {key: list(value) if isinstance(value, list) else value for key, value in entry.items()}
