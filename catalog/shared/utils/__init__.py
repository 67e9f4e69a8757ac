"""Shared utilities: datetime helpers."""

from catalog.shared.utils.datetime import ensure_utc, format_rfc3339

__all__ = [
    "ensure_utc",
    "format_rfc3339",
]
