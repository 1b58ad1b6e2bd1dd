"""Domain entity representing a requester follow-up post."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class PrayerUpdate:
    """Append-only update written by the requester on their own request."""

    id: int | None
    prayer_request_id: int
    from_user_id: int
    body: str
    created_at: datetime | None = None
    from_user_email: str | None = None


__all__ = ["PrayerUpdate"]
