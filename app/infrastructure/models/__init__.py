"""ORM models used by the application infrastructure."""

from .user import UserModel
from .prayer_request import PrayerRequestModel
from .prayer_response import DUPLICATE_RESPONSE_CONSTRAINT, PrayerResponseModel
from .prayer_update import PrayerUpdateModel
from .notification import NotificationModel

__all__ = [
    "UserModel",
    "PrayerRequestModel",
    "PrayerResponseModel",
    "DUPLICATE_RESPONSE_CONSTRAINT",
    "PrayerUpdateModel",
    "NotificationModel",
]
