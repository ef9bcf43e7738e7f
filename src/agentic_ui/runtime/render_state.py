"""
Per-invocation working state for a component render.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from agentic_ui.specs.component import VariantDefinition

HERO_OVERLAY = "linear-gradient(to bottom, rgba(0,0,0,0.4) 0%, rgba(0,0,0,0.7) 100%)"


@dataclass
class RenderOptions:
    """Mutable state threaded through every pipeline stage.

    ``attrs`` holds the canonical options (HTML attributes and content
    payloads alike); ``classes``, ``data`` and ``style`` are accumulators
    folded into ``attrs`` by the attribute builder.
    """

    attrs: dict[str, Any] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)
    style: list[str] = field(default_factory=list)
    block: Callable[[], Any] | None = None
    variant_name: str | None = None
    variant: VariantDefinition | None = None
    _hero_background: bool = field(default=False, repr=False)

    @classmethod
    def from_options(
        cls, options: dict[str, Any], block: Callable[[], Any] | None = None
    ) -> RenderOptions:
        """Split caller ``data`` and ``style`` out of the canonical options."""
        attrs = dict(options)
        data = attrs.pop("data", None)
        style = attrs.pop("style", None)
        state = cls(attrs=attrs, data=dict(data) if isinstance(data, dict) else {}, block=block)
        if style:
            state.add_style(str(style))
        return state

    def append_class(self, *names: Any) -> None:
        for name in names:
            if name is None:
                continue
            text = str(name).strip()
            if text:
                self.classes.append(text)

    def add_style(self, fragment: str) -> None:
        text = fragment.strip().rstrip(";").strip()
        if text:
            self.style.append(text)

    def add_css_variable(self, name: str, value: Any) -> None:
        prop = name if name.startswith("--") else f"--{name}"
        self.add_style(f"{prop}: {value}")

    def add_hero_background(self, url: Any) -> None:
        """Background image then overlay; idempotent per invocation."""
        if self._hero_background or not url:
            return
        self._hero_background = True
        self.add_style(f"--hero-bg-image: url('{url}')")
        self.add_style(f"--hero-overlay: {HERO_OVERLAY}")

    @property
    def style_string(self) -> str | None:
        return "; ".join(self.style) if self.style else None

    @property
    def class_string(self) -> str | None:
        return " ".join(self.classes) if self.classes else None

    def get(self, *keys: str) -> Any:
        """First present, non-empty option among ``keys``."""
        for key in keys:
            value = self.attrs.get(key)
            if value not in (None, "", [], {}):
                return value
        return None
