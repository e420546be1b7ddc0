"""
Correlation ID context.

Carries the request correlation ID across await points using contextvars,
so every log line of a request can be tied back to it.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar, Token

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> Token:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        Token: Reset token for clear_correlation_id
    """
    return correlation_id_ctx.set(correlation_id or str(uuid.uuid4()))


def get_correlation_id() -> str:
    return correlation_id_ctx.get()


def clear_correlation_id(token: Token | None = None) -> None:
    """Restore the previous correlation ID, or blank it when no token is given."""
    if token is not None:
        correlation_id_ctx.reset(token)
    else:
        correlation_id_ctx.set("")
