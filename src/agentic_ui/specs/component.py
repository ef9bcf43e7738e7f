"""
Component definition types.

Typed, immutable views of the entries under the ``ui:`` key of the
component table.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Variants
# =============================================================================


class VariantDefinition(BaseModel):
    """
    Named override layered onto a component at render time.

    Example:
        VariantDefinition(
            css_modifier="hero-wrapper--bold",
            css_variables={"--hero-accent": "#0d9488"},
            render_method="hero_split",
        )
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    css_modifier: str | None = Field(default=None, description="Extra CSS class")
    css_variables: dict[str, str] = Field(
        default_factory=dict, description="CSS custom properties applied inline"
    )
    stimulus_controller: str | None = Field(
        default=None, description="Controller replacing the component's own"
    )
    render_method: str | None = Field(
        default=None, description="Content renderer replacing the component's own"
    )

    @field_validator("css_variables", mode="before")
    @classmethod
    def stringify_variables(cls, v: Any) -> Any:
        """YAML numbers are valid CSS values; keep them as text."""
        if isinstance(v, dict):
            return {str(key): str(value) for key, value in v.items()}
        return v


# =============================================================================
# Components
# =============================================================================


class ComponentDefinition(BaseModel):
    """
    Static description of how one named UI element renders.

    Example:
        ComponentDefinition(
            name="widget",
            tag="div",
            css_class="widget",
            ai_controllable=True,
            ai_commands=["theme", "layout"],
            agent_aware=True,
            stimulus_controller="agentic-widget",
        )
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(description="Component name (table key)")
    tag: str | None = Field(default=None, description="HTML tag")
    css_class: str = Field(default="", description="Base CSS class")
    ai_controllable: bool = Field(default=False, description="Exposed to AI commands")
    ai_commands: list[str] = Field(default_factory=list, description="Allowed AI commands")
    css_layer: str = Field(default="agentic-components", description="CSS cascade layer")
    agent_aware: bool = Field(default=False, description="Receives agent context")
    stimulus_controller: str | None = Field(default=None, description="Reactive controller")
    data_driven: bool | None = Field(default=None, description="Always dispatch content")
    render_method: str | None = Field(default=None, description="Named content renderer")
    type: str | None = Field(default=None, description="Input type attribute")
    unified_theme_vars: list[str] | None = Field(
        default=None, description="Theme variables exposed for targeting"
    )
    variants: dict[str, VariantDefinition] = Field(default_factory=dict)

    @field_validator("css_class", "css_layer", mode="before")
    @classmethod
    def default_empty(cls, v: Any, info: Any) -> Any:
        if v is None:
            return "agentic-components" if info.field_name == "css_layer" else ""
        return v

    @field_validator("ai_commands", "variants", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any, info: Any) -> Any:
        if v is None:
            return [] if info.field_name == "ai_commands" else {}
        return v

    @classmethod
    def from_mapping(cls, name: str, raw: dict[str, Any]) -> "ComponentDefinition":
        """Build a definition from a raw table entry."""
        fields = {str(key): value for key, value in raw.items()}
        fields["name"] = name
        return cls(**fields)

    @property
    def is_empty(self) -> bool:
        """True for a table entry that declares nothing at all."""
        return not (self.model_fields_set - {"name"}) and not self.model_extra

    def get_variant(self, name: str) -> VariantDefinition | None:
        """Get variant by name."""
        return self.variants.get(str(name))
