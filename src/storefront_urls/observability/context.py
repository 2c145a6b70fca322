"""Request context propagation for log correlation."""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4


# Per-request context carrying the request_id for log correlation
request_context: ContextVar[dict | None] = ContextVar("request_context", default=None)


def generate_request_id() -> str:
    """Generate a 32-char hex request ID."""
    return uuid4().hex


def get_request_context() -> dict:
    """Get the current request context, creating a request_id when missing."""
    ctx = request_context.get()
    if ctx is None or not ctx.get("request_id"):
        ctx = {"request_id": generate_request_id()}
        request_context.set(ctx)
    return ctx


def set_request_context(request_id: str | None = None) -> None:
    """Set the request_id for the current request; a new one is generated when omitted."""
    request_context.set({"request_id": request_id or generate_request_id()})


def clear_request_context() -> None:
    request_context.set(None)
