"""Endpoints for the authenticated user's notification inbox."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import list_notifications, mark_notification_read
from app.domain.entities import User
from app.domain.exceptions import PrayerBoardError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationRead])
def read_notifications(
    unread_only: bool = Query(False),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = list_notifications(
        db, user_id=current_user.id, unread_only=unread_only, limit=limit
    )
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.post("/{notification_id}/read", response_model=NotificationRead)
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationRead:
    try:
        notification = mark_notification_read(
            db, user_id=current_user.id, notification_id=notification_id
        )
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return NotificationRead.model_validate(notification)
