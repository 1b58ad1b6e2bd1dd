"""Aggregate application use cases."""

from .notifications import list_notifications, mark_notification_read
from .prayer_requests import (
    close_prayer_request,
    create_prayer_request,
    get_prayer_request_detail,
    list_prayer_requests,
    post_prayer_update,
    respond_to_prayer_request,
)
from .users import authenticate_user, get_user, register_user, update_settings

__all__ = [
    "authenticate_user",
    "get_user",
    "register_user",
    "update_settings",
    "create_prayer_request",
    "close_prayer_request",
    "post_prayer_update",
    "respond_to_prayer_request",
    "list_prayer_requests",
    "get_prayer_request_detail",
    "list_notifications",
    "mark_notification_read",
]
