"""
Request correlation IDs.

A contextvar carries the current ID across awaits, including the
concurrent chunk calls of one attribution run.

Dependencies: contextvars
System role: Request tracing
"""

import uuid
from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind correlation_id (or a new UUID4 string) and return it."""
    value = correlation_id or str(uuid.uuid4())
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation ID, empty outside a request."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")
