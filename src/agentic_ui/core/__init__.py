"""Configuration, settings and error types."""

from .config import (
    ComponentConfiguration,
    configure,
    get_configuration,
    reset_configuration,
)
from .errors import AgenticUIError, ComponentError, ConfigurationError
from .settings import AgenticUISettings

__all__ = [
    "AgenticUIError",
    "AgenticUISettings",
    "ComponentConfiguration",
    "ComponentError",
    "ConfigurationError",
    "configure",
    "get_configuration",
    "reset_configuration",
]
