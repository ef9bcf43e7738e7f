"""Unit tests for settings and the component table configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from agentic_ui.core.config import (
    ComponentConfiguration,
    configure,
    get_configuration,
    reset_configuration,
)
from agentic_ui.core.defaults import LEGACY_ENHANCEMENTS
from agentic_ui.core.errors import AgenticUIError, ConfigurationError
from agentic_ui.core.settings import AgenticUISettings


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestSettings:
    """Tests for AgenticUISettings."""

    def test_defaults(self) -> None:
        settings = AgenticUISettings()
        assert settings.css_layers_enabled is True
        assert settings.agent_context_enabled is True
        assert settings.theme_integration is True
        assert settings.stimulus_integration is True
        assert settings.config_file is None

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("AGENTIC_UI_CSS_LAYERS", "false")
        monkeypatch.setenv("AGENTIC_UI_STIMULUS", "0")
        monkeypatch.setenv("AGENTIC_UI_THEME_INTEGRATION", "YES")
        monkeypatch.setenv("AGENTIC_UI_CONFIG_FILE", str(tmp_path / "ui.yml"))
        settings = AgenticUISettings.from_env()
        assert settings.css_layers_enabled is False
        assert settings.stimulus_integration is False
        assert settings.theme_integration is True
        assert settings.agent_context_enabled is True
        assert settings.config_file == tmp_path / "ui.yml"


class TestLoadFromFile:
    """Tests for reading the YAML table."""

    def test_loads_table(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "agentic_ui.yml",
            "ui:\n  badge:\n    tag: span\n    css_class: badge\n",
        )
        config = ComponentConfiguration()
        config.load_from_file(path)
        assert config.components == {"badge": {"tag": "span", "css_class": "badge"}}
        assert config.ui_file == path

    def test_missing_file_is_noop(self, tmp_path: Path) -> None:
        config = ComponentConfiguration()
        config.load_from_file(tmp_path / "nope.yml")
        assert config.components == {}
        assert config.ui_file is None

    def test_empty_document(self, tmp_path: Path) -> None:
        config = ComponentConfiguration()
        config.load_from_file(_write(tmp_path / "empty.yml", ""))
        assert config.ui_table == {"ui": {}}

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "bad.yml", "ui: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Failed to load configuration from"):
            ComponentConfiguration().load_from_file(path)

    def test_non_mapping_document_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "list.yml", "- one\n- two\n")
        with pytest.raises(ConfigurationError):
            ComponentConfiguration().load_from_file(path)

    def test_load_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = _write(tmp_path / "agentic_ui.yml", "ui: {}\n")
        with caplog.at_level(logging.INFO, logger="agentic_ui.core.config"):
            ComponentConfiguration().load_from_file(path)
        assert "Loaded component table" in caplog.text


class TestLoadDefaults:
    """Tests for the table lookup order."""

    def test_builtin_defaults(self) -> None:
        config = ComponentConfiguration()
        config.load_defaults()
        assert set(config.components) == {
            "container",
            "grid",
            "column",
            "widget",
            "card",
            "button",
            "content",
            "meta",
            "description",
            "header",
            "input",
            "overlay",
            "icon",
            "item",
        }

    def test_project_file_wins(self, tmp_path: Path) -> None:
        _write(tmp_path / "config" / "agentic_ui.yml", "ui:\n  hero:\n    tag: section\n")
        _write(tmp_path / "config" / "ui.yml", "ui:\n  widget:\n    tag: div\n")
        config = ComponentConfiguration()
        config.load_defaults(tmp_path)
        assert list(config.components) == ["hero"]

    def test_legacy_file_enhanced(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "config" / "ui.yml",
            "ui:\n  widget:\n    tag: div\n    css_class: widget\n    ai_controllable: false\n"
            "  label:\n    tag: span\n    css_class: label\n",
        )
        config = ComponentConfiguration()
        config.load_defaults(tmp_path)
        widget = config.component_config("widget")
        assert widget["ai_controllable"] is True
        assert widget["agent_aware"] is True
        assert widget["stimulus_controller"] == "agentic-widget"
        assert widget["tag"] == "div"
        assert config.component_config("label") == {"tag": "span", "css_class": "label"}
        assert "card" not in config.components

    def test_legacy_enhancement_lists_not_shared(self, tmp_path: Path) -> None:
        _write(tmp_path / "config" / "ui.yml", "ui:\n  widget:\n    tag: div\n")
        config = ComponentConfiguration()
        config.load_defaults(tmp_path)
        config.component_config("widget")["ai_commands"].append("mutated")
        assert "mutated" not in LEGACY_ENHANCEMENTS["widget"]["ai_commands"]

        other = ComponentConfiguration()
        other.load_defaults(tmp_path)
        assert "mutated" not in other.ai_commands("widget")

    def test_settings_config_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "custom.yml", "ui:\n  pill:\n    tag: span\n    css_class: pill\n")
        config = ComponentConfiguration(AgenticUISettings(config_file=path))
        config.load_defaults(tmp_path)
        assert list(config.components) == ["pill"]

    def test_noop_when_loaded(self) -> None:
        config = ComponentConfiguration()
        config.ui_table = {"ui": {"only": {"tag": "div", "css_class": "only"}}}
        config.load_defaults()
        assert list(config.components) == ["only"]

    def test_fresh_copy_each_time(self) -> None:
        first = ComponentConfiguration()
        first.load_defaults()
        first.components["widget"]["ai_commands"].append("mutated")
        second = ComponentConfiguration()
        second.load_defaults()
        assert "mutated" not in second.components["widget"]["ai_commands"]


class TestLookups:
    """Tests for per-component lookups."""

    def test_lookups(self) -> None:
        config = ComponentConfiguration()
        config.load_defaults()
        assert config.is_ai_controllable("widget") is True
        assert config.ai_commands("button") == [
            "theme",
            "style",
            "animate",
            "resize",
            "personality",
        ]
        assert config.css_layer("container") == "agentic-layout"
        assert config.is_agent_aware("card") is True
        assert config.is_agent_aware("grid") is False
        assert "icon" in config.ai_controllable_components()

    def test_unknown_component(self) -> None:
        config = ComponentConfiguration()
        assert config.component_config("ghost") == {}
        assert config.css_layer("ghost") == "agentic-components"
        assert config.ai_commands("ghost") == []
        assert config.is_ai_controllable("ghost") is False


class TestValidate:
    """Tests for table validation."""

    def test_defaults_are_valid(self) -> None:
        config = ComponentConfiguration()
        config.load_defaults()
        assert config.validate() is True

    def test_absent_ui_section_is_valid(self) -> None:
        config = ComponentConfiguration()
        config.ui_table = {}
        assert config.validate() is True

    def test_collects_every_violation(self) -> None:
        config = ComponentConfiguration()
        config.ui_table = {
            "ui": {
                "broken": {"css_class": "broken"},
                "bare": {"tag": "div"},
                "bot": {"tag": "div", "css_class": "bot", "ai_controllable": True},
            }
        }
        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()
        message = exc_info.value.message
        assert message.startswith("Configuration errors: ")
        assert "Component broken missing tag" in message
        assert "Component bare missing css_class" in message
        assert "AI controllable component bot missing ai_commands" in message

    def test_configuration_error_is_agentic_ui_error(self) -> None:
        assert issubclass(ConfigurationError, AgenticUIError)


class TestSharedConfiguration:
    """Tests for the module-level singleton."""

    def test_singleton(self) -> None:
        assert get_configuration() is get_configuration()

    def test_reset(self) -> None:
        first = get_configuration()
        reset_configuration()
        assert get_configuration() is not first

    def test_configure_overrides(self) -> None:
        config = configure(css_layers_enabled=False)
        assert config is get_configuration()
        assert config.settings.css_layers_enabled is False

    def test_configure_unknown_setting(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown setting: colour"):
            configure(colour="red")
