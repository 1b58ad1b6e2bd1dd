"""Domain entities exposed by the application."""

from .notification import (
    NOTIFICATION_NEW_PRAYER_REQUEST,
    NOTIFICATION_PRAYER_CLOSED,
    NOTIFICATION_PRAYER_RESPONSE,
    NOTIFICATION_PRAYER_UPDATE,
    NOTIFICATION_TYPES,
    Notification,
)
from .prayer_request import (
    PRAYER_STATUS_CLOSED,
    PRAYER_STATUS_OPEN,
    PrayerRequest,
    PrayerRequestDetail,
    PrayerRequestSummary,
)
from .prayer_response import (
    RESPONSE_TYPE_MESSAGE,
    RESPONSE_TYPE_QUICK,
    PrayerResponse,
)
from .prayer_update import PrayerUpdate
from .user import User

__all__ = [
    "Notification",
    "NOTIFICATION_NEW_PRAYER_REQUEST",
    "NOTIFICATION_PRAYER_RESPONSE",
    "NOTIFICATION_PRAYER_UPDATE",
    "NOTIFICATION_PRAYER_CLOSED",
    "NOTIFICATION_TYPES",
    "PrayerRequest",
    "PrayerRequestDetail",
    "PrayerRequestSummary",
    "PRAYER_STATUS_OPEN",
    "PRAYER_STATUS_CLOSED",
    "PrayerResponse",
    "RESPONSE_TYPE_QUICK",
    "RESPONSE_TYPE_MESSAGE",
    "PrayerUpdate",
    "User",
]
