"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by application and infrastructure. No business logic.
"""

from catalog.shared.context import (
    RequestMeta,
    clear_request_meta,
    get_request_meta,
    set_request_meta,
)
from catalog.shared.utils import ensure_utc, format_rfc3339

__all__ = [
    "RequestMeta",
    "set_request_meta",
    "clear_request_meta",
    "get_request_meta",
    "ensure_utc",
    "format_rfc3339",
]
