"""
Request-scoped tenant.

Set by the host application (typically in middleware) and read by the
preference bridge to reject agents belonging to another tenant.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

# Current tenant ID (set by middleware)
_current_tenant_id: ContextVar[str | None] = ContextVar("current_tenant_id", default=None)


def get_current_tenant_id() -> str | None:
    """Get the current tenant ID from request context."""
    return _current_tenant_id.get()


def set_current_tenant_id(tenant_id: str | None) -> Token[str | None]:
    """Set the current tenant ID in request context."""
    return _current_tenant_id.set(tenant_id)


@contextmanager
def tenant_scope(tenant_id: str | None) -> Iterator[str | None]:
    token = _current_tenant_id.set(tenant_id)
    try:
        yield tenant_id
    finally:
        _current_tenant_id.reset(token)
