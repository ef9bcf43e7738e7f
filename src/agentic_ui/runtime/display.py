"""
Component dispatch entry point.

``Display.render(name, *args, caller=None, **kwargs)`` looks the component up
in the registry, normalizes the call, expands the legacy vocabulary and
renders. Every registered name is also reachable as an attribute:

    ux = get_display()
    ux.widget("discussions", data={"x": 1})
    ux.render("card", text="Hello")
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from markupsafe import Markup

from agentic_ui.core.config import ComponentConfiguration, get_configuration

from .agent_context import get_current_agent_context
from .arguments import normalize_arguments
from .component import Component
from .legacy_compat import apply_legacy_compat
from .preferences import PreferenceBridge
from .registry import ComponentRegistry


class Display:
    """Renders configured components by name."""

    def __init__(
        self,
        configuration: ComponentConfiguration | None = None,
        registry: ComponentRegistry | None = None,
        preference_bridge: PreferenceBridge | None = None,
    ) -> None:
        self.configuration = configuration or get_configuration()
        self.registry = registry or ComponentRegistry.from_configuration(self.configuration)
        self.preference_bridge = preference_bridge

    def reinitialize(self) -> None:
        """Rebuild the registry from the configuration's current table."""
        self.registry.reload(self.configuration.components)

    def component(
        self, name: str, /, *args: Any, caller: Callable[[], Any] | None = None, **kwargs: Any
    ) -> Component:
        """Build the Component for one call without rendering it.

        Raises:
            ComponentError: If the component is unknown or has no tag.
        """
        definition = self.registry.snapshot.get(str(name))
        options = apply_legacy_compat(normalize_arguments(args, kwargs))
        return Component(
            name,
            definition,
            options,
            block=caller,
            settings=self.configuration.settings,
            agent_context=get_current_agent_context(),
            preference_bridge=self.preference_bridge,
        )

    def render(
        self, name: str, /, *args: Any, caller: Callable[[], Any] | None = None, **kwargs: Any
    ) -> Markup:
        return self.component(name, *args, caller=caller, **kwargs).render()

    def __getattr__(self, name: str) -> Callable[..., Markup]:
        registry = self.__dict__.get("registry")
        if name.startswith("_") or registry is None or name not in registry:
            raise AttributeError(f"{type(self).__name__!s} has no component {name!r}")
        return functools.partial(self.render, name)

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.registry.names()))


# Module-level singleton
_display: Display | None = None


def get_display() -> Display:
    """Get the shared Display (lazy singleton).

    Falls back to the built-in component table when nothing was loaded.
    """
    global _display
    if _display is None:
        configuration = get_configuration()
        configuration.load_defaults()
        _display = Display(configuration)
    return _display


def set_display(display: Display | None) -> None:
    global _display
    _display = display


def reset_display() -> None:
    set_display(None)
