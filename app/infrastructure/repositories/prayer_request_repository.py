"""Persistence layer for prayer requests and their feed projections."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import case, distinct, func, select
from sqlalchemy.orm import Query, Session

from app.domain.entities import (
    PRAYER_STATUS_OPEN,
    PrayerRequest,
    PrayerRequestSummary,
)
from app.infrastructure.models import (
    PrayerRequestModel,
    PrayerResponseModel,
    UserModel,
)
from app.utils import ensure_utc, now_utc


class PrayerRequestRepository:
    """Provide persistence operations for :class:`PrayerRequest` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, prayer_request_id: int) -> PrayerRequest | None:
        model = self.session.get(PrayerRequestModel, prayer_request_id)
        return self._to_entity(model) if model else None

    def get_for_update(self, prayer_request_id: int) -> PrayerRequest | None:
        """Load the request and hold a row lock on it until the transaction ends.

        Concurrent Close, PostUpdate and Respond calls on the same request
        queue behind this lock, so each one validates against the status the
        previous one committed.
        """

        model = (
            self.session.query(PrayerRequestModel)
            .filter(PrayerRequestModel.id == prayer_request_id)
            .with_for_update(of=PrayerRequestModel)
            .populate_existing()
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def create(self, prayer_request: PrayerRequest) -> PrayerRequest:
        model = PrayerRequestModel()
        model.requester_user_id = prayer_request.requester_user_id
        model.created_at = prayer_request.created_at or now_utc()
        self._apply_entity_to_model(model, prayer_request)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, prayer_request: PrayerRequest) -> PrayerRequest:
        model = self.session.get(PrayerRequestModel, prayer_request.id)
        if model is None:
            msg = f"Prayer request with id {prayer_request.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, prayer_request)
        self.session.flush()
        return self._to_entity(model)

    def list_summaries(self, *, include_closed: bool = False) -> Sequence[PrayerRequestSummary]:
        """Return feed items: open requests first, newest first within each status."""

        query = self._summary_query()
        if not include_closed:
            query = query.filter(PrayerRequestModel.status == PRAYER_STATUS_OPEN)
        query = query.order_by(
            case((PrayerRequestModel.status == PRAYER_STATUS_OPEN, 0), else_=1),
            PrayerRequestModel.created_at.desc(),
            PrayerRequestModel.id.desc(),
        )
        return [self._to_summary(row) for row in query.all()]

    def get_summary(self, prayer_request_id: int) -> PrayerRequestSummary | None:
        row = (
            self._summary_query()
            .filter(PrayerRequestModel.id == prayer_request_id)
            .one_or_none()
        )
        return self._to_summary(row) if row else None

    def _summary_query(self) -> Query:
        praying = (
            select(
                PrayerResponseModel.prayer_request_id.label("prayer_request_id"),
                func.count(distinct(PrayerResponseModel.from_user_id)).label("praying_count"),
            )
            .group_by(PrayerResponseModel.prayer_request_id)
            .subquery()
        )
        return (
            self.session.query(
                PrayerRequestModel,
                UserModel.email,
                func.coalesce(praying.c.praying_count, 0),
            )
            .join(UserModel, UserModel.id == PrayerRequestModel.requester_user_id)
            .outerjoin(praying, praying.c.prayer_request_id == PrayerRequestModel.id)
        )

    @classmethod
    def _to_summary(cls, row) -> PrayerRequestSummary:
        model, requester_email, praying_count = row
        return PrayerRequestSummary(
            request=cls._to_entity(model),
            requester_email=requester_email,
            praying_count=int(praying_count or 0),
        )

    @staticmethod
    def _apply_entity_to_model(model: PrayerRequestModel, prayer_request: PrayerRequest) -> None:
        model.title = prayer_request.title
        model.body = prayer_request.body
        model.status = prayer_request.status
        model.closed_at = prayer_request.closed_at

    @staticmethod
    def _to_entity(model: PrayerRequestModel) -> PrayerRequest:
        return PrayerRequest(
            id=model.id,
            requester_user_id=model.requester_user_id,
            title=model.title,
            body=model.body,
            status=model.status,
            created_at=ensure_utc(model.created_at),
            closed_at=ensure_utc(model.closed_at),
        )


__all__ = ["PrayerRequestRepository"]
