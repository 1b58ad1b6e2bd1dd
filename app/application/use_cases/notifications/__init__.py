"""Public helpers for emitting and reading notifications."""

from .events import (
    new_prayer_request_event,
    prayer_closed_event,
    prayer_response_event,
    prayer_update_event,
)
from .fan_out import (
    NotificationEvent,
    deliver_notifications,
    fan_out_notifications,
    persist_notifications,
    resolve_recipients,
)
from .list_notifications import list_notifications
from .mark_notification_read import mark_notification_read

__all__ = [
    "NotificationEvent",
    "resolve_recipients",
    "persist_notifications",
    "deliver_notifications",
    "fan_out_notifications",
    "new_prayer_request_event",
    "prayer_response_event",
    "prayer_update_event",
    "prayer_closed_event",
    "list_notifications",
    "mark_notification_read",
]
