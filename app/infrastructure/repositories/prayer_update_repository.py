"""Persistence layer for requester updates."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session, joinedload

from app.domain.entities import PrayerUpdate
from app.infrastructure.models import PrayerUpdateModel
from app.utils import ensure_utc, now_utc


class PrayerUpdateRepository:
    """Append and list updates; rows are never modified once written."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, update: PrayerUpdate) -> PrayerUpdate:
        model = PrayerUpdateModel(
            prayer_request_id=update.prayer_request_id,
            from_user_id=update.from_user_id,
            body=update.body,
            created_at=update.created_at or now_utc(),
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def list_for_request(self, prayer_request_id: int) -> Sequence[PrayerUpdate]:
        query = (
            self.session.query(PrayerUpdateModel)
            .options(joinedload(PrayerUpdateModel.from_user))
            .filter(PrayerUpdateModel.prayer_request_id == prayer_request_id)
            .order_by(PrayerUpdateModel.created_at.asc(), PrayerUpdateModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: PrayerUpdateModel) -> PrayerUpdate:
        return PrayerUpdate(
            id=model.id,
            prayer_request_id=model.prayer_request_id,
            from_user_id=model.from_user_id,
            body=model.body,
            created_at=ensure_utc(model.created_at),
            from_user_email=model.from_user.email if model.from_user else None,
        )


__all__ = ["PrayerUpdateRepository"]
