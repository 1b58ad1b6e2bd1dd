"""Helpers for working with UTC datetimes."""

from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in UTC.

    SQLite hands back naive values even for ``DateTime(timezone=True)``
    columns; those are stored in UTC, so a naive value is tagged rather than
    converted.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def truncate_text(value: str, limit: int) -> str:
    """Return ``value`` cut to at most ``limit`` characters."""

    return value[:limit]
