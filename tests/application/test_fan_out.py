"""Tests for recipient resolution and best-effort delivery."""

from __future__ import annotations

from app.application.use_cases.notifications import (
    NotificationEvent,
    deliver_notifications,
    fan_out_notifications,
    persist_notifications,
    resolve_recipients,
)
from app.application.use_cases.notifications import fan_out as fan_out_module
from app.domain.entities import NOTIFICATION_PRAYER_UPDATE
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import NotificationRepository


def test_resolve_recipients_dedupes_and_excludes_actor():
    assert resolve_recipients([3, 1, 3, None, 0, 2, 1], actor_user_id=2) == [3, 1]
    assert resolve_recipients([5, 5], actor_user_id=5) == []
    assert resolve_recipients([], actor_user_id=1) == []


def test_persist_writes_one_row_per_recipient(session, make_user):
    actor = make_user("actor@example.com")
    first = make_user("first@example.com")
    second = make_user("second@example.com")
    event = NotificationEvent(
        notification_type=NOTIFICATION_PRAYER_UPDATE,
        prayer_request_id=7,
        text="Prayer request update: hi",
        actor_user_id=actor.id,
        candidate_user_ids=(first.id, actor.id, second.id, first.id),
    )

    with unit_of_work(session):
        notifications = persist_notifications(session, event)

    assert [n.to_user_id for n in notifications] == [first.id, second.id]
    assert all(n.id is not None and not n.is_read for n in notifications)
    assert len(NotificationRepository(session).list_for_prayer_request(7)) == 2


def test_fan_out_with_only_the_actor_writes_nothing(session, make_user, monkeypatch):
    actor = make_user("actor@example.com")
    calls = []
    monkeypatch.setattr(fan_out_module, "dispatch_notifications", calls.append)

    notifications = fan_out_notifications(
        session,
        candidate_user_ids=[actor.id],
        notification_type=NOTIFICATION_PRAYER_UPDATE,
        prayer_request_id=1,
        text="ignored",
        actor_user_id=actor.id,
    )

    assert notifications == []
    assert calls == []
    assert NotificationRepository(session).list_for_prayer_request(1) == []


def test_delivery_failure_does_not_undo_notifications(session, make_user, monkeypatch):
    actor = make_user("actor@example.com")
    recipient = make_user("recipient@example.com")

    def explode(deliveries):
        raise RuntimeError("channel down")

    monkeypatch.setattr(fan_out_module, "dispatch_notifications", explode)

    notifications = fan_out_notifications(
        session,
        candidate_user_ids=[recipient.id],
        notification_type=NOTIFICATION_PRAYER_UPDATE,
        prayer_request_id=3,
        text="Prayer request update: hi",
        actor_user_id=actor.id,
    )

    assert [n.to_user_id for n in notifications] == [recipient.id]
    assert len(NotificationRepository(session).list_for_user(recipient.id)) == 1


def test_deliver_attaches_recipient_emails(session, make_user, monkeypatch):
    actor = make_user("actor@example.com")
    recipient = make_user("recipient@example.com")
    batches = []
    monkeypatch.setattr(fan_out_module, "dispatch_notifications", batches.append)

    with unit_of_work(session):
        notifications = persist_notifications(
            session,
            NotificationEvent(
                notification_type=NOTIFICATION_PRAYER_UPDATE,
                prayer_request_id=4,
                text="Prayer request update: hi",
                actor_user_id=actor.id,
                candidate_user_ids=(recipient.id,),
            ),
        )
    deliver_notifications(session, notifications)

    (batch,) = batches
    assert [(d.notification.id, d.recipient_email) for d in batch] == [
        (notifications[0].id, "recipient@example.com")
    ]
