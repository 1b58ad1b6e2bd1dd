"""Use case for reading a user's notification inbox."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    user_id: int,
    unread_only: bool = False,
    limit: int | None = 50,
) -> Sequence[Notification]:
    """Return the notifications addressed to ``user_id``, newest first."""

    repository = NotificationRepository(session)
    return repository.list_for_user(user_id, unread_only=unread_only, limit=limit)
