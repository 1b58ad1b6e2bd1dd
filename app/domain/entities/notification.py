"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_NEW_PRAYER_REQUEST = "NEW_PRAYER_REQUEST"
NOTIFICATION_PRAYER_RESPONSE = "PRAYER_RESPONSE"
NOTIFICATION_PRAYER_UPDATE = "PRAYER_UPDATE"
NOTIFICATION_PRAYER_CLOSED = "PRAYER_CLOSED"

NOTIFICATION_TYPES = (
    NOTIFICATION_NEW_PRAYER_REQUEST,
    NOTIFICATION_PRAYER_RESPONSE,
    NOTIFICATION_PRAYER_UPDATE,
    NOTIFICATION_PRAYER_CLOSED,
)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    to_user_id: int
    notification_type: str
    prayer_request_id: int
    text: str
    is_read: bool = False
    created_at: datetime | None = None


__all__ = [
    "Notification",
    "NOTIFICATION_NEW_PRAYER_REQUEST",
    "NOTIFICATION_PRAYER_RESPONSE",
    "NOTIFICATION_PRAYER_UPDATE",
    "NOTIFICATION_PRAYER_CLOSED",
    "NOTIFICATION_TYPES",
]
