"""Use case for marking a notification as read."""

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.domain.exceptions import NotFoundError
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import NotificationRepository


def mark_notification_read(session: Session, *, user_id: int, notification_id: int) -> Notification:
    """Mark the notification as read for its recipient.

    Notifications addressed to someone else are reported as missing so their
    existence is not revealed.
    """

    with unit_of_work(session):
        notification = NotificationRepository(session).mark_as_read(
            notification_id, user_id=user_id
        )
        if notification is None:
            raise NotFoundError(
                "Notification not found",
                code="NOTIFICATION_NOT_FOUND",
                details={"notification_id": notification_id},
            )
    return notification
