"""Repository implementations for infrastructure layer."""

from .user_repository import UserRepository
from .prayer_request_repository import PrayerRequestRepository
from .prayer_response_repository import PrayerResponseRepository
from .prayer_update_repository import PrayerUpdateRepository
from .notification_repository import NotificationRepository

__all__ = [
    "UserRepository",
    "PrayerRequestRepository",
    "PrayerResponseRepository",
    "PrayerUpdateRepository",
    "NotificationRepository",
]
