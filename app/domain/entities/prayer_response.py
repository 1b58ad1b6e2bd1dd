"""Domain entity representing a response ("I am praying") to a request."""

from dataclasses import dataclass
from datetime import datetime

RESPONSE_TYPE_QUICK = "QUICK"
RESPONSE_TYPE_MESSAGE = "MESSAGE"


@dataclass
class PrayerResponse:
    """A unique per-user acknowledgement on a prayer request."""

    id: int | None
    prayer_request_id: int
    from_user_id: int
    response_type: str
    message: str | None = None
    created_at: datetime | None = None
    from_user_email: str | None = None


__all__ = ["PrayerResponse", "RESPONSE_TYPE_QUICK", "RESPONSE_TYPE_MESSAGE"]
