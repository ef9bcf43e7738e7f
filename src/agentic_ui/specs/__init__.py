"""
Typed specifications for AgenticUI.

Usage:
    from agentic_ui.specs import ComponentDefinition, AgentContext

    card = ComponentDefinition.from_mapping("card", {"tag": "div", "css_class": "card"})
    ctx = AgentContext(personality="playful")
"""

from .agent import AgentContext, AgentProfileSource, ObjectProfileSource
from .component import ComponentDefinition, VariantDefinition

__all__ = [
    "AgentContext",
    "AgentProfileSource",
    "ComponentDefinition",
    "ObjectProfileSource",
    "VariantDefinition",
]
