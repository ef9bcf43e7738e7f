"""
Request-scoped agent context.

The current AgentContext lives in a ContextVar, so each thread and asyncio
task sees its own value. Use the ``agent_context`` context manager to scope
a context to a block; the previous value is restored on exit, including exit
via an exception.

    with agent_context(AgentContext(session_id="s1", personality="playful")):
        html = display.widget("stats")
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

from agentic_ui.specs.agent import AgentContext, dasherize

from .render_state import RenderOptions

_current_agent_context: ContextVar[AgentContext | None] = ContextVar(
    "current_agent_context", default=None
)


def get_current_agent_context() -> AgentContext | None:
    """Get the agent context of the current request, if any."""
    return _current_agent_context.get()


def set_current_agent_context(ctx: AgentContext | None) -> Token[AgentContext | None]:
    """Set the current agent context and return the reset token.

    Low-level; prefer ``agent_context`` so the previous value is restored.
    """
    return _current_agent_context.set(ctx)


def reset_current_agent_context(token: Token[AgentContext | None]) -> None:
    _current_agent_context.reset(token)


@contextmanager
def agent_context(ctx: AgentContext | None) -> Iterator[AgentContext | None]:
    """Make ``ctx`` current for the duration of the block."""
    token = _current_agent_context.set(ctx)
    try:
        yield ctx
    finally:
        _current_agent_context.reset(token)


def enhance_with_agent_context(state: RenderOptions, ctx: AgentContext | None) -> None:
    """Layer the agent's session, personality and theme onto ``state``."""
    if ctx is None:
        return

    if ctx.session_id:
        state.data["agent-session"] = ctx.session_id
    if ctx.personality:
        state.data["agent-personality"] = ctx.personality
    for key, value in ctx.theme_preferences.items():
        state.add_style(f"--agent-{dasherize(key)}: {value}")
