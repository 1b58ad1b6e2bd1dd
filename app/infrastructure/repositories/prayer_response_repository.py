"""Persistence layer for the response ledger."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.domain.entities import PrayerResponse
from app.infrastructure.models import DUPLICATE_RESPONSE_CONSTRAINT, PrayerResponseModel
from app.utils import ensure_utc, now_utc

# SQLite reports the violated columns instead of the constraint name.
_SQLITE_DUPLICATE_MESSAGE = (
    "UNIQUE constraint failed: "
    "prayer_response.prayer_request_id, prayer_response.from_user_id"
)


class PrayerResponseRepository:
    """Store at most one response per (request, responder) pair.

    ``create`` relies on the ``uq_prayer_response_request_user`` constraint;
    a duplicate surfaces as :class:`sqlalchemy.exc.IntegrityError` on flush.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find(self, *, prayer_request_id: int, from_user_id: int) -> PrayerResponse | None:
        model = (
            self.session.query(PrayerResponseModel)
            .filter(PrayerResponseModel.prayer_request_id == prayer_request_id)
            .filter(PrayerResponseModel.from_user_id == from_user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def exists(self, *, prayer_request_id: int, from_user_id: int) -> bool:
        return self.find(prayer_request_id=prayer_request_id, from_user_id=from_user_id) is not None

    def create(self, response: PrayerResponse) -> PrayerResponse:
        model = PrayerResponseModel(
            prayer_request_id=response.prayer_request_id,
            from_user_id=response.from_user_id,
            response_type=response.response_type,
            message=response.message,
            created_at=response.created_at or now_utc(),
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def list_for_request(self, prayer_request_id: int) -> Sequence[PrayerResponse]:
        query = (
            self.session.query(PrayerResponseModel)
            .options(joinedload(PrayerResponseModel.from_user))
            .filter(PrayerResponseModel.prayer_request_id == prayer_request_id)
            .order_by(PrayerResponseModel.created_at.asc(), PrayerResponseModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_responder_ids(self, prayer_request_id: int) -> list[int]:
        """Return the distinct ids of users who responded, in response order."""

        query = (
            self.session.query(PrayerResponseModel.from_user_id)
            .filter(PrayerResponseModel.prayer_request_id == prayer_request_id)
            .order_by(PrayerResponseModel.created_at.asc(), PrayerResponseModel.id.asc())
        )
        responder_ids: list[int] = []
        for (user_id,) in query.all():
            if user_id not in responder_ids:
                responder_ids.append(user_id)
        return responder_ids

    @staticmethod
    def is_duplicate_violation(exc: IntegrityError) -> bool:
        """Return whether ``exc`` was raised by the one-response-per-user constraint."""

        diag = getattr(exc.orig, "diag", None)
        constraint_name = getattr(diag, "constraint_name", None)
        if constraint_name is not None:
            return constraint_name == DUPLICATE_RESPONSE_CONSTRAINT
        return _SQLITE_DUPLICATE_MESSAGE in str(exc.orig)

    @staticmethod
    def _to_entity(model: PrayerResponseModel) -> PrayerResponse:
        return PrayerResponse(
            id=model.id,
            prayer_request_id=model.prayer_request_id,
            from_user_id=model.from_user_id,
            response_type=model.response_type,
            message=model.message,
            created_at=ensure_utc(model.created_at),
            from_user_email=model.from_user.email if model.from_user else None,
        )


__all__ = ["PrayerResponseRepository"]
