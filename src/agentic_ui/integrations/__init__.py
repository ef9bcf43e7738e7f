"""Template-engine integrations."""

from .jinja import create_environment, install_display

__all__ = ["create_environment", "install_display"]
