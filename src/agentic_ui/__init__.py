"""
AgenticUI - configuration-driven HTML components with agent-aware theming.

Component markup (tag, classes, data attributes, structured content) comes
from a declarative component table instead of hand-written templates, and a
per-request agent context personalizes the output.

Usage:
    import agentic_ui

    ux = agentic_ui.boot(project_root)
    ux.widget("discussions", data={"x": 1})
"""

from __future__ import annotations

from pathlib import Path

from ._version import get_version
from .core import (
    AgenticUIError,
    AgenticUISettings,
    ComponentConfiguration,
    ComponentError,
    ConfigurationError,
    configure,
    get_configuration,
    reset_configuration,
)
from .runtime import (
    Display,
    agent_context,
    get_current_agent_context,
    get_display,
    reset_display,
    set_display,
)
from .specs import AgentContext, ComponentDefinition, VariantDefinition

__version__ = get_version()


def boot(project_root: Path | str | None = None) -> Display:
    """Load and validate the component table, then (re)build the shared display.

    Raises:
        ConfigurationError: If the table cannot be loaded or is invalid.
    """
    configuration = get_configuration()
    configuration.load_defaults(Path(project_root) if project_root is not None else None)
    configuration.validate()
    display = Display(configuration)
    set_display(display)
    return display


__all__ = [
    "__version__",
    "AgentContext",
    "AgenticUIError",
    "AgenticUISettings",
    "ComponentConfiguration",
    "ComponentDefinition",
    "ComponentError",
    "ConfigurationError",
    "Display",
    "VariantDefinition",
    "agent_context",
    "boot",
    "configure",
    "get_configuration",
    "get_current_agent_context",
    "get_display",
    "reset_configuration",
    "reset_display",
]
