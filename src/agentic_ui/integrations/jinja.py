"""
Jinja2 template integration.

Registers a Display as a template global so templates call components the
way views do:

    {{ ux.button("primary", text="Save") }}

    {% call ux.card(class_="featured") %}
      <p>Nested content</p>
    {% endcall %}

Inside ``{% call %}`` Jinja passes the block as ``caller``, which becomes the
component's nested content.
"""

from __future__ import annotations

from jinja2 import BaseLoader, Environment, select_autoescape

from agentic_ui.runtime.display import Display, get_display

DEFAULT_GLOBAL_NAME = "ux"


def install_display(
    env: Environment, display: Display | None = None, name: str = DEFAULT_GLOBAL_NAME
) -> Environment:
    """Expose ``display`` (the shared one by default) as a template global."""
    env.globals[name] = display or get_display()
    return env


def create_environment(
    loader: BaseLoader | None = None,
    display: Display | None = None,
    name: str = DEFAULT_GLOBAL_NAME,
) -> Environment:
    """Create an autoescaping environment with the display installed."""
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return install_display(env, display, name)
