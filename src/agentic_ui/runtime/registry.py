"""
Component registry.

Maps component names to parsed ComponentDefinitions. The mapping is an
immutable snapshot; ``reload`` builds a complete replacement and swaps the
reference under a lock, so readers see either the old or the new table.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from agentic_ui.core.config import ComponentConfiguration
from agentic_ui.core.errors import ConfigurationError
from agentic_ui.specs.component import ComponentDefinition

logger = logging.getLogger(__name__)


def build_definitions(components: Mapping[str, Any]) -> dict[str, ComponentDefinition]:
    """Parse raw table entries into definitions.

    Raises:
        ConfigurationError: Listing every entry that fails to parse.
    """
    definitions: dict[str, ComponentDefinition] = {}
    errors: list[str] = []
    for name, raw in components.items():
        if not isinstance(raw, Mapping):
            errors.append(f"Component {name} must be a mapping")
            continue
        try:
            definitions[str(name)] = ComponentDefinition.from_mapping(str(name), dict(raw))
        except ValidationError as e:
            errors.append(f"Component {name} is invalid: {e}")

    if errors:
        raise ConfigurationError(f"Configuration errors: {', '.join(errors)}")
    return definitions


class ComponentRegistry:
    """Thread-safe, snapshot-swapping registry of component definitions."""

    def __init__(self, components: Mapping[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot: Mapping[str, ComponentDefinition] = MappingProxyType({})
        if components:
            self.reload(components)

    @classmethod
    def from_configuration(cls, configuration: ComponentConfiguration) -> ComponentRegistry:
        return cls(configuration.components)

    @property
    def snapshot(self) -> Mapping[str, ComponentDefinition]:
        """The current immutable table; take it once per invocation."""
        return self._snapshot

    def reload(self, components: Mapping[str, Any]) -> None:
        """Replace the whole table."""
        snapshot = MappingProxyType(build_definitions(components))
        with self._lock:
            self._snapshot = snapshot
        logger.debug(f"Component registry rebuilt with {len(snapshot)} components")

    def get(self, name: str) -> ComponentDefinition | None:
        return self._snapshot.get(str(name))

    def names(self) -> list[str]:
        return list(self._snapshot)

    def __contains__(self, name: object) -> bool:
        return str(name) in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)
