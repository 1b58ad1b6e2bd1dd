"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.models import NotificationModel
from app.utils import ensure_utc, now_utc


class NotificationRepository:
    """Provide persistence operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        unread_only: bool = False,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.to_user_id == user_id)
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_for_prayer_request(self, prayer_request_id: int) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.prayer_request_id == prayer_request_id)
            .order_by(NotificationModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create_many(self, notifications: Iterable[Notification]) -> list[Notification]:
        models: list[NotificationModel] = []
        now = now_utc()
        for notification in notifications:
            model = NotificationModel()
            self._apply_entity_to_model(model, notification)
            model.created_at = notification.created_at or now
            self.session.add(model)
            models.append(model)
        if not models:
            return []
        self.session.flush()
        return [self._to_entity(model) for model in models]

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        """Flip ``is_read`` for a notification owned by ``user_id``.

        Returns ``None`` when the notification does not exist or belongs to
        another user. Already-read notifications are returned unchanged.
        """

        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.to_user_id == user_id)
            .one_or_none()
        )
        if model is None:
            return None
        if not model.is_read:
            model.is_read = True
            self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.to_user_id = notification.to_user_id
        model.notification_type = notification.notification_type
        model.prayer_request_id = notification.prayer_request_id
        model.text = notification.text
        model.is_read = notification.is_read

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            to_user_id=model.to_user_id,
            notification_type=model.notification_type,
            prayer_request_id=model.prayer_request_id,
            text=model.text,
            is_read=model.is_read,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["NotificationRepository"]
