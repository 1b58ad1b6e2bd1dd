"""Domain entities describing prayer requests and their read projections."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .prayer_response import PrayerResponse
from .prayer_update import PrayerUpdate

PRAYER_STATUS_OPEN = "OPEN"
PRAYER_STATUS_CLOSED = "CLOSED"


@dataclass
class PrayerRequest:
    """A user-authored post seeking prayer support."""

    id: int | None
    requester_user_id: int
    title: str | None
    body: str
    status: str = PRAYER_STATUS_OPEN
    created_at: datetime | None = None
    closed_at: datetime | None = None

    def is_open(self) -> bool:
        """Return ``True`` while the request still accepts activity."""

        return self.status == PRAYER_STATUS_OPEN

    def is_owned_by(self, user_id: int) -> bool:
        return self.requester_user_id == user_id


@dataclass
class PrayerRequestSummary:
    """Feed item: a request with its requester and the number of people praying."""

    request: PrayerRequest
    requester_email: str
    praying_count: int = 0


@dataclass
class PrayerRequestDetail:
    """A request together with its full response and update history."""

    summary: PrayerRequestSummary
    responses: list[PrayerResponse] = field(default_factory=list)
    updates: list[PrayerUpdate] = field(default_factory=list)
    already_praying: bool = False


__all__ = [
    "PRAYER_STATUS_OPEN",
    "PRAYER_STATUS_CLOSED",
    "PrayerRequest",
    "PrayerRequestSummary",
    "PrayerRequestDetail",
]
