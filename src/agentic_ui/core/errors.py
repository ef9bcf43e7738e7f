"""
Error types for AgenticUI configuration loading and component construction.
"""


class AgenticUIError(Exception):
    """Base exception for all AgenticUI errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(AgenticUIError):
    """
    Raised when the component table cannot be loaded or fails validation.

    Examples:
    - Unreadable or malformed YAML file
    - Component without a tag or css_class
    - AI-controllable component without ai_commands
    """

    pass


class ComponentError(AgenticUIError):
    """
    Raised when a component invocation cannot be constructed.

    Examples:
    - Unknown component name
    - Component definition without a tag
    """

    pass
