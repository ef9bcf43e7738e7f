"""
Runtime settings from environment variables.

Feature flags that switch individual enrichment stages of the render
pipeline on or off.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class AgenticUISettings:
    """Feature flags for the component pipeline."""

    css_layers_enabled: bool = True
    agent_context_enabled: bool = True
    theme_integration: bool = True
    stimulus_integration: bool = True
    config_file: Path | None = None

    @classmethod
    def from_env(cls) -> AgenticUISettings:
        """Load settings from environment variables."""
        config_file = os.environ.get("AGENTIC_UI_CONFIG_FILE")
        return cls(
            css_layers_enabled=_env_flag("AGENTIC_UI_CSS_LAYERS", True),
            agent_context_enabled=_env_flag("AGENTIC_UI_AGENT_CONTEXT", True),
            theme_integration=_env_flag("AGENTIC_UI_THEME_INTEGRATION", True),
            stimulus_integration=_env_flag("AGENTIC_UI_STIMULUS", True),
            config_file=Path(config_file) if config_file else None,
        )
