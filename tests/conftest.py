"""Shared pytest fixtures for AgenticUI tests."""

from __future__ import annotations

from typing import Any

import pytest

from agentic_ui.core.config import ComponentConfiguration, reset_configuration
from agentic_ui.core.defaults import default_ui_table
from agentic_ui.core.settings import AgenticUISettings
from agentic_ui.runtime.display import Display, reset_display

_ENV_VARS = (
    "AGENTIC_UI_CSS_LAYERS",
    "AGENTIC_UI_AGENT_CONTEXT",
    "AGENTIC_UI_THEME_INTEGRATION",
    "AGENTIC_UI_STIMULUS",
    "AGENTIC_UI_CONFIG_FILE",
)

# Components used across rendering tests, on top of the built-in table.
TEST_COMPONENTS: dict[str, dict[str, Any]] = {
    "hero_section": {
        "tag": "section",
        "css_class": "hero-wrapper",
        "agent_aware": True,
        "variants": {
            "bold": {
                "css_modifier": "hero-wrapper--bold",
                "css_variables": {"--hero-accent": "#0d9488"},
            },
            "split": {"css_modifier": "hero-wrapper--split", "render_method": "hero_split"},
            "video": {"render_method": "hero_video", "stimulus_controller": "hero-video"},
            "broken": {"render_method": "carousel"},
        },
    },
    "statistics": {"tag": "div", "css_class": "statistics"},
    "cards": {"tag": "div", "css_class": "cards"},
    "list": {"tag": "div", "css_class": "list"},
    "feature": {"tag": "div", "css_class": "feature", "data_driven": True},
    "accordion": {
        "tag": "div",
        "css_class": "faq",
        "render_method": "accordion",
        "data_driven": True,
    },
    "tabs": {"tag": "div", "css_class": "tabbed", "render_method": "tabs", "data_driven": True},
    "table": {"tag": "div", "css_class": "table", "render_method": "table", "data_driven": True},
    "timeline": {
        "tag": "div",
        "css_class": "timeline-wrapper",
        "render_method": "timeline",
        "data_driven": True,
    },
    "split": {"tag": "div", "css_class": "split", "render_method": "split", "data_driven": True},
    "sidebar": {
        "tag": "div",
        "css_class": "sidebar",
        "render_method": "sidebar",
        "data_driven": True,
    },
    "modal": {
        "tag": "div",
        "css_class": "modal-wrapper",
        "render_method": "modal",
        "data_driven": True,
    },
    "article": {"tag": "div", "css_class": "post", "render_method": "article", "data_driven": True},
    "carousel": {"tag": "div", "css_class": "carousel", "render_method": "slideshow"},
    "link": {"tag": "a", "css_class": "link"},
    "form": {"tag": "form", "css_class": "form"},
    "search": {"tag": "input", "css_class": "search", "type": "search"},
}


@pytest.fixture(autouse=True)
def _isolate_agentic_ui(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Fresh shared configuration and display for every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_configuration()
    reset_display()
    yield
    reset_configuration()
    reset_display()


@pytest.fixture
def settings() -> AgenticUISettings:
    return AgenticUISettings()


@pytest.fixture
def configuration(settings: AgenticUISettings) -> ComponentConfiguration:
    """Built-in table plus the test components."""
    config = ComponentConfiguration(settings)
    table = default_ui_table()
    table["ui"].update({name: dict(entry) for name, entry in TEST_COMPONENTS.items()})
    config.ui_table = table
    return config


@pytest.fixture
def display(configuration: ComponentConfiguration) -> Display:
    return Display(configuration)
