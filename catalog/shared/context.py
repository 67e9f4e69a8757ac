"""Request context management using contextvars.

Provides async-safe storage for request-scoped metadata that must be
forwarded to the node store (API key, acting user, request id, admin key).

Usage:
    set_request_meta(RequestMeta(user_id="u1", request_id="req-42"))
    meta = get_request_meta()
"""

from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True)
class RequestMeta:
    """Immutable snapshot of caller metadata forwarded to the node store."""

    api_key: str | None = None
    user_id: str | None = None
    request_id: str | None = None
    admin_key: str | None = None


_current_meta: ContextVar[RequestMeta] = ContextVar(
    "current_request_meta", default=RequestMeta()
)


def set_request_meta(meta: RequestMeta) -> None:
    """Set the caller metadata for this request.

    Context is scoped to the current async task; child tasks inherit it.
    """
    _current_meta.set(meta)


def clear_request_meta() -> None:
    """Reset to empty metadata (configuration defaults apply)."""
    _current_meta.set(RequestMeta())


def get_request_meta() -> RequestMeta:
    """Return the current caller metadata (empty RequestMeta if never set)."""
    return _current_meta.get()
