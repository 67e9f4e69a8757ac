"""
UTC datetime utilities for consistent timezone handling.

All datetime values exposed by the catalog are timezone-aware UTC and
rendered as RFC 3339 strings with a trailing ``Z``.
"""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at the node store boundary to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def format_rfc3339(dt: datetime | None) -> str | None:
    """Format as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC (seconds precision); None passes through."""
    utc = ensure_utc(dt)
    if utc is None:
        return None
    return utc.strftime("%Y-%m-%dT%H:%M:%SZ")
