"""Use-case tests for registration, login, settings and the notification inbox."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import list_notifications, mark_notification_read
from app.application.use_cases.notifications import fan_out as fan_out_module
from app.application.use_cases.prayer_requests import create_prayer_request
from app.application.use_cases.users import (
    authenticate_user,
    get_user,
    register_user,
    update_settings,
)
from app.domain.exceptions import (
    AuthenticationError,
    EmailAlreadyRegisteredError,
    NotFoundError,
    ValidationError,
)
from app.infrastructure.security import verify_password


def test_register_normalizes_email_and_hashes_password(session):
    user = register_user(session, email="  Mary@Example.COM ", password="Password123!")

    assert user.email == "mary@example.com"
    assert user.volunteered_to_pray is False
    assert user.password != "Password123!"
    assert verify_password("Password123!", user.password)


def test_register_rejects_duplicate_email_case_insensitively(session):
    register_user(session, email="mary@example.com", password="Password123!")

    with pytest.raises(EmailAlreadyRegisteredError):
        register_user(session, email="MARY@example.com", password="Password123!")


@pytest.mark.parametrize(
    ("email", "password"),
    [("not-an-email", "Password123!"), ("mary@example.com", "short")],
)
def test_register_validates_input(session, email, password):
    with pytest.raises(ValidationError):
        register_user(session, email=email, password=password)


def test_authenticate(session, make_user):
    user = make_user("john@example.com")

    assert authenticate_user(session, "JOHN@example.com", "Password123!").id == user.id
    with pytest.raises(AuthenticationError):
        authenticate_user(session, "john@example.com", "wrong-password")
    with pytest.raises(AuthenticationError):
        authenticate_user(session, "nobody@example.com", "Password123!")


def test_update_settings_and_get_user(session, make_user):
    user = make_user("esther@example.com")

    updated = update_settings(session, user_id=user.id, volunteered_to_pray=True)

    assert updated.volunteered_to_pray is True
    assert get_user(session, user.id).volunteered_to_pray is True
    with pytest.raises(NotFoundError):
        get_user(session, 12345)


@pytest.fixture()
def inbox(session, make_user, monkeypatch):
    monkeypatch.setattr(fan_out_module, "dispatch_notifications", lambda deliveries: None)
    requester = make_user("requester@example.com")
    volunteer = make_user("volunteer@example.com", volunteered_to_pray=True)
    for body in ("first", "second", "third"):
        create_prayer_request(session, requester_id=requester.id, body=body)
    return requester, volunteer


def test_list_notifications_newest_first_with_limit(session, inbox):
    _, volunteer = inbox

    notifications = list_notifications(session, user_id=volunteer.id)
    assert [n.text for n in notifications] == [
        "New prayer request: third",
        "New prayer request: second",
        "New prayer request: first",
    ]
    assert len(list_notifications(session, user_id=volunteer.id, limit=2)) == 2


def test_mark_read_is_idempotent_and_filters_unread(session, inbox):
    _, volunteer = inbox
    newest = list_notifications(session, user_id=volunteer.id)[0]

    marked = mark_notification_read(session, user_id=volunteer.id, notification_id=newest.id)
    again = mark_notification_read(session, user_id=volunteer.id, notification_id=newest.id)

    assert marked.is_read is True
    assert again.is_read is True
    unread = list_notifications(session, user_id=volunteer.id, unread_only=True)
    assert [n.id for n in unread] == [
        n.id for n in list_notifications(session, user_id=volunteer.id)[1:]
    ]


def test_mark_read_hides_other_users_notifications(session, inbox):
    requester, volunteer = inbox
    notification = list_notifications(session, user_id=volunteer.id)[0]

    with pytest.raises(NotFoundError):
        mark_notification_read(session, user_id=requester.id, notification_id=notification.id)
    with pytest.raises(NotFoundError):
        mark_notification_read(session, user_id=volunteer.id, notification_id=999)

    assert list_notifications(session, user_id=volunteer.id)[0].is_read is False
