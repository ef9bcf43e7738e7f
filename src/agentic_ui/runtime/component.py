"""
Single component invocation.

A Component is built from a definition and the canonical options of one
call, runs the enhancement stages in order, and renders to Markup:

1. validate (unknown component or missing tag raises ComponentError)
2. class assembly (definition ``css_class`` + caller classes)
3. variant
4. ``css_overrides``
5. agent context enhancer
6. theme integration and AI markers
7. learned preferences (only with an ``agent`` option)

Content comes from the block, else structured data, else ``text``, else
nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from markupsafe import Markup

from agentic_ui.core.errors import ComponentError
from agentic_ui.core.settings import AgenticUISettings
from agentic_ui.specs.agent import AgentContext
from agentic_ui.specs.component import ComponentDefinition

from .agent_context import enhance_with_agent_context
from .attributes import build_attributes, resolve_tag
from .classification import is_data_driven, is_hero_component
from .content import dispatch
from .html import VOID_ELEMENTS, content_tag, form_tag, link_to, tag
from .preferences import PreferenceBridge, apply_agent_preferences
from .render_state import RenderOptions
from .variants import resolve_variant


class Component:
    """One invocation of a named component."""

    def __init__(
        self,
        name: str,
        definition: ComponentDefinition | None,
        options: Mapping[str, Any],
        *,
        block: Callable[[], Any] | None = None,
        settings: AgenticUISettings | None = None,
        agent_context: AgentContext | None = None,
        preference_bridge: PreferenceBridge | None = None,
    ) -> None:
        self.name = str(name)
        self.settings = settings or AgenticUISettings()
        self.definition = self._validate(definition)
        self.state = RenderOptions.from_options(dict(options), block=block)
        self.agent = self.state.attrs.pop("agent", None)

        self._process_classes()
        resolve_variant(self.definition, self.state)
        self._process_css_overrides()
        if self.definition.agent_aware and self.settings.agent_context_enabled:
            enhance_with_agent_context(self.state, agent_context)
        self._integrate_theme()
        if self.agent is not None and preference_bridge is not None and self.definition.agent_aware:
            apply_agent_preferences(
                preference_bridge,
                self.agent,
                self.name,
                self.definition.model_dump(exclude_none=True),
                self.state,
            )

    # =========================================================================
    # Stages
    # =========================================================================

    def _validate(self, definition: ComponentDefinition | None) -> ComponentDefinition:
        if definition is None or definition.is_empty:
            raise ComponentError(f"Unknown component type: {self.name}")
        if not definition.tag:
            raise ComponentError(f"Component {self.name} missing tag configuration")
        return definition

    def _process_classes(self) -> None:
        self.state.append_class(self.definition.css_class)
        self.state.append_class(self.state.attrs.pop("class", None))

    def _process_css_overrides(self) -> None:
        overrides = self.state.attrs.pop("css_overrides", None)
        if not isinstance(overrides, Mapping):
            return
        for key, value in overrides.items():
            self.state.add_css_variable(str(key), value)

    def _integrate_theme(self) -> None:
        data = self.state.data
        if self.settings.theme_integration:
            data["component"] = self.name
            if self.definition.unified_theme_vars:
                data["theme-vars"] = ",".join(self.definition.unified_theme_vars)
        if self.settings.css_layers_enabled:
            data["css-layer"] = self.definition.css_layer
        if self.definition.ai_controllable:
            data["ai-controllable"] = "true"
            data["ai-commands"] = ",".join(self.definition.ai_commands)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def ai_controllable(self) -> bool:
        return self.definition.ai_controllable

    @property
    def ai_commands(self) -> list[str]:
        return list(self.definition.ai_commands)

    @property
    def css_layer(self) -> str:
        return self.definition.css_layer

    @property
    def agent_aware(self) -> bool:
        return self.definition.agent_aware

    @property
    def is_hero(self) -> bool:
        return is_hero_component(self.name, self.definition, self.state.attrs)

    @property
    def is_data_driven(self) -> bool:
        return is_data_driven(self.name, self.definition, self.state.attrs)

    # =========================================================================
    # Rendering
    # =========================================================================

    def _block_content(self) -> Markup:
        result = self.state.block() if self.state.block is not None else None
        if result is None:
            return Markup("")
        return result if isinstance(result, Markup) else Markup(result)

    def render(self) -> Markup:
        if self.name == "link" and self.state.attrs.get("to"):
            return self._render_link()
        if self.name == "form":
            return self._render_form()
        return self._render_standard()

    def _render_link(self) -> Markup:
        url = self.state.attrs.pop("to")
        text = self.state.attrs.pop("text", None)
        content = self._block_content() if self.state.block is not None else (text or "")
        attributes = build_attributes(self.definition, self.state, self.settings)
        return link_to(content, url, attributes)

    def _render_form(self) -> Markup:
        url = self.state.attrs.pop("url", None)
        content = self._block_content() if self.state.block is not None else ""
        attributes = build_attributes(self.definition, self.state, self.settings)
        return form_tag(content, url, attributes)

    def _render_standard(self) -> Markup:
        tag_name = resolve_tag(self.definition, self.state) or ""
        hero = self.is_hero
        text = self.state.attrs.get("text")

        # Content first: renderers may add style fragments to the outer element.
        content: Any
        if self.state.block is not None:
            content = self._block_content()
        elif self.is_data_driven:
            content = dispatch(self.name, self.definition, self.state, hero=hero)
        elif text not in (None, ""):
            content = text
        else:
            content = None

        attributes = build_attributes(self.definition, self.state, self.settings, hero=hero)
        if content is None and tag_name in VOID_ELEMENTS:
            return tag(tag_name, attributes)
        return content_tag(tag_name, "" if content is None else content, attributes)

    def __html__(self) -> str:
        return str(self.render())
