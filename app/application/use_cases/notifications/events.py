"""Notification events emitted by prayer request state changes."""

from __future__ import annotations

from collections.abc import Iterable

from app.config import get_settings
from app.domain.entities import (
    NOTIFICATION_NEW_PRAYER_REQUEST,
    NOTIFICATION_PRAYER_CLOSED,
    NOTIFICATION_PRAYER_RESPONSE,
    NOTIFICATION_PRAYER_UPDATE,
    PrayerRequest,
)
from app.utils import truncate_text

from .fan_out import NotificationEvent

DEFAULT_REQUEST_TITLE = "New prayer request"
QUICK_RESPONSE_TEXT = 'Someone clicked "I am praying for you."'
CLOSED_TEXT = "A prayer request you supported has been closed."


def _summary(text: str) -> str:
    return truncate_text(text, get_settings().notification_summary_length)


def new_prayer_request_event(
    prayer_request: PrayerRequest, *, volunteer_ids: Iterable[int]
) -> NotificationEvent:
    """Tell volunteers that a request was posted."""

    title = prayer_request.title or DEFAULT_REQUEST_TITLE
    return NotificationEvent(
        notification_type=NOTIFICATION_NEW_PRAYER_REQUEST,
        prayer_request_id=prayer_request.id,
        text=f"{title}: {_summary(prayer_request.body)}",
        actor_user_id=prayer_request.requester_user_id,
        candidate_user_ids=tuple(volunteer_ids),
    )


def prayer_response_event(
    prayer_request: PrayerRequest, *, responder_id: int, message: str | None
) -> NotificationEvent:
    """Tell the requester that someone is praying."""

    text = f"Someone is praying for you: {_summary(message)}" if message else QUICK_RESPONSE_TEXT
    return NotificationEvent(
        notification_type=NOTIFICATION_PRAYER_RESPONSE,
        prayer_request_id=prayer_request.id,
        text=text,
        actor_user_id=responder_id,
        candidate_user_ids=(prayer_request.requester_user_id,),
    )


def prayer_update_event(
    prayer_request: PrayerRequest, *, body: str, responder_ids: Iterable[int]
) -> NotificationEvent:
    return NotificationEvent(
        notification_type=NOTIFICATION_PRAYER_UPDATE,
        prayer_request_id=prayer_request.id,
        text=f"Prayer request update: {_summary(body)}",
        actor_user_id=prayer_request.requester_user_id,
        candidate_user_ids=tuple(responder_ids),
    )


def prayer_closed_event(
    prayer_request: PrayerRequest, *, responder_ids: Iterable[int]
) -> NotificationEvent:
    return NotificationEvent(
        notification_type=NOTIFICATION_PRAYER_CLOSED,
        prayer_request_id=prayer_request.id,
        text=CLOSED_TEXT,
        actor_user_id=prayer_request.requester_user_id,
        candidate_user_ids=tuple(responder_ids),
    )


__all__ = [
    "new_prayer_request_event",
    "prayer_response_event",
    "prayer_update_event",
    "prayer_closed_event",
]
