"""
Component table persistence layer for AgenticUI.

Handles reading the declarative component table from YAML, falling back to
the built-in defaults, upgrading legacy tables, and validating entries.

Lookup order for ``load_defaults(project_root)``:
1. AGENTIC_UI_CONFIG_FILE (settings.config_file)
2. {project_root}/config/agentic_ui.yml
3. {project_root}/config/ui.yml (legacy table, enhanced after load)
4. Built-in defaults
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .defaults import DEFAULT_CSS_LAYER, LEGACY_ENHANCEMENTS, copy_entry, default_ui_table
from .errors import ConfigurationError
from .settings import AgenticUISettings

logger = logging.getLogger(__name__)

CONFIG_FILE = Path("config") / "agentic_ui.yml"
LEGACY_CONFIG_FILE = Path("config") / "ui.yml"


class ComponentConfiguration:
    """The component table plus the feature flags that drive rendering."""

    def __init__(self, settings: AgenticUISettings | None = None) -> None:
        self.ui_table: dict[str, Any] = {"ui": {}}
        self.settings = settings or AgenticUISettings()
        self.ui_file: Path | None = None

    # =========================================================================
    # Loading
    # =========================================================================

    def load_from_file(self, file_path: Path | str) -> None:
        """Load the component table from a YAML file.

        A missing file leaves the current table untouched.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        path = Path(file_path)
        if not path.exists():
            return

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration from {path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigurationError(
                f"Failed to load configuration from {path}: top level must be a mapping"
            )

        self.ui_table = data or {"ui": {}}
        self.ui_file = path
        logger.info(f"Loaded component table from {path}")

    def load_defaults(self, project_root: Path | None = None) -> None:
        """Populate the table unless it already holds components."""
        if self.components:
            return

        if self.settings.config_file is not None:
            self.load_from_file(self.settings.config_file)
            if self.components:
                return

        if project_root is not None:
            config_path = project_root / CONFIG_FILE
            legacy_path = project_root / LEGACY_CONFIG_FILE
            if config_path.exists():
                self.load_from_file(config_path)
                return
            if legacy_path.exists():
                self.load_from_file(legacy_path)
                self.enhance_legacy_config()
                return

        logger.debug("No component table found, using built-in defaults")
        self.ui_table = default_ui_table()

    def enhance_legacy_config(self) -> None:
        """Merge agent-aware enhancements onto a legacy table's core components."""
        components = self.ui_table.get("ui")
        if not isinstance(components, dict):
            return

        for name, enhancement in LEGACY_ENHANCEMENTS.items():
            entry = components.get(name)
            if isinstance(entry, dict):
                entry.update(copy_entry(enhancement))

    # =========================================================================
    # Lookups
    # =========================================================================

    @property
    def components(self) -> dict[str, Any]:
        components = self.ui_table.get("ui")
        return components if isinstance(components, dict) else {}

    def component_config(self, name: str) -> dict[str, Any]:
        """Raw mapping for a component, empty when unknown."""
        entry = self.components.get(str(name))
        return entry if isinstance(entry, dict) else {}

    def is_ai_controllable(self, name: str) -> bool:
        return self.component_config(name).get("ai_controllable") is True

    def ai_commands(self, name: str) -> list[str]:
        return list(self.component_config(name).get("ai_commands") or [])

    def css_layer(self, name: str) -> str:
        return self.component_config(name).get("css_layer") or DEFAULT_CSS_LAYER

    def is_agent_aware(self, name: str) -> bool:
        return self.component_config(name).get("agent_aware") is True

    def ai_controllable_components(self) -> list[str]:
        return [
            name
            for name, entry in self.components.items()
            if isinstance(entry, dict) and entry.get("ai_controllable") is True
        ]

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self) -> bool:
        """Validate every component entry.

        Raises:
            ConfigurationError: Listing all violations found.
        """
        if not self.ui_table.get("ui"):
            return True

        errors: list[str] = []
        for name, entry in self.components.items():
            entry = entry if isinstance(entry, dict) else {}
            if not entry.get("tag"):
                errors.append(f"Component {name} missing tag")
            if not entry.get("css_class"):
                errors.append(f"Component {name} missing css_class")
            if entry.get("ai_controllable") and not entry.get("ai_commands"):
                errors.append(f"AI controllable component {name} missing ai_commands")

        if errors:
            raise ConfigurationError(f"Configuration errors: {', '.join(errors)}")
        return True


# Module-level singleton
_configuration: ComponentConfiguration | None = None


def get_configuration() -> ComponentConfiguration:
    """Get the shared configuration (lazy singleton)."""
    global _configuration
    if _configuration is None:
        _configuration = ComponentConfiguration(AgenticUISettings.from_env())
    return _configuration


def configure(**overrides: Any) -> ComponentConfiguration:
    """Apply settings overrides to the shared configuration and return it.

    Example:
        configure(css_layers_enabled=False, agent_context_enabled=True)
    """
    configuration = get_configuration()
    for key, value in overrides.items():
        if not hasattr(configuration.settings, key):
            raise ConfigurationError(f"Unknown setting: {key}")
        setattr(configuration.settings, key, value)
    return configuration


def reset_configuration() -> None:
    """Drop the shared configuration (used by tests)."""
    global _configuration
    _configuration = None
