"""
Structured-data content renderers.

Each renderer takes the invocation's RenderOptions and returns Markup for the
element body. An empty collection renders nothing.
"""

from .dispatcher import NAME_RENDERERS, RENDERERS, dispatch, select_renderer

__all__ = ["NAME_RENDERERS", "RENDERERS", "dispatch", "select_renderer"]
