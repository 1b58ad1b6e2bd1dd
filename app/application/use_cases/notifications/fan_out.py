"""Derive recipient sets from domain events and persist one notification each."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.database import unit_of_work
from app.infrastructure.notifications import Delivery, dispatch_notifications
from app.infrastructure.repositories import NotificationRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationEvent:
    """Everything needed to notify the users interested in a state change."""

    notification_type: str
    prayer_request_id: int
    text: str
    actor_user_id: int
    candidate_user_ids: tuple[int, ...] = ()


def resolve_recipients(
    candidate_user_ids: Iterable[int | None], *, actor_user_id: int | None
) -> list[int]:
    """Return unique candidate ids in first-seen order, without the actor."""

    recipients: list[int] = []
    for user_id in candidate_user_ids:
        if not user_id or user_id == actor_user_id or user_id in recipients:
            continue
        recipients.append(user_id)
    return recipients


def persist_notifications(session: Session, event: NotificationEvent) -> list[Notification]:
    """Write one notification per recipient inside the caller's transaction.

    An empty recipient set writes nothing.
    """

    recipients = resolve_recipients(
        event.candidate_user_ids, actor_user_id=event.actor_user_id
    )
    if not recipients:
        return []

    repository = NotificationRepository(session)
    return repository.create_many(
        Notification(
            id=None,
            to_user_id=user_id,
            notification_type=event.notification_type,
            prayer_request_id=event.prayer_request_id,
            text=event.text,
        )
        for user_id in recipients
    )


def deliver_notifications(session: Session, notifications: Sequence[Notification]) -> None:
    """Hand committed notifications to the external delivery channels.

    Failures are logged and swallowed: the notifications are already stored
    and the command that produced them has succeeded.
    """

    if not notifications:
        return
    try:
        emails = UserRepository(session).get_email_map(
            notification.to_user_id for notification in notifications
        )
        # Release the read transaction (and any database lock) before calling out.
        session.rollback()
        dispatch_notifications(
            [
                Delivery(notification=notification, recipient_email=emails.get(notification.to_user_id))
                for notification in notifications
            ]
        )
    except Exception:
        logger.exception("Failed to deliver %d notification(s)", len(notifications))


def fan_out_notifications(
    session: Session,
    *,
    candidate_user_ids: Iterable[int | None],
    notification_type: str,
    prayer_request_id: int,
    text: str,
    actor_user_id: int,
) -> list[Notification]:
    """Persist notifications in their own transaction and deliver them."""

    event = NotificationEvent(
        notification_type=notification_type,
        prayer_request_id=prayer_request_id,
        text=text,
        actor_user_id=actor_user_id,
        candidate_user_ids=tuple(candidate_user_ids),
    )
    with unit_of_work(session):
        notifications = persist_notifications(session, event)
    deliver_notifications(session, notifications)
    return notifications


__all__ = [
    "NotificationEvent",
    "resolve_recipients",
    "persist_notifications",
    "deliver_notifications",
    "fan_out_notifications",
]
