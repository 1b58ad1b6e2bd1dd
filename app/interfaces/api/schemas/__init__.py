from .auth import AuthResponse, LoginRequest, LogoutResponse, RegisterRequest, Token
from .health import HealthResponse
from .notification import NotificationRead
from .prayer import (
    PrayerRequestCreate,
    PrayerRequestDetailRead,
    PrayerRequestFeedItem,
    PrayerRequestRead,
    PrayerRespondRequest,
    PrayerResponseRead,
    PrayerUpdateCreate,
    PrayerUpdateRead,
)
from .user import UserRead, UserSettingsUpdate

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "LogoutResponse",
    "RegisterRequest",
    "Token",
    "HealthResponse",
    "NotificationRead",
    "PrayerRequestCreate",
    "PrayerRequestDetailRead",
    "PrayerRequestFeedItem",
    "PrayerRequestRead",
    "PrayerRespondRequest",
    "PrayerResponseRead",
    "PrayerUpdateCreate",
    "PrayerUpdateRead",
    "UserRead",
    "UserSettingsUpdate",
]
