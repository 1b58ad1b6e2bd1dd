"""Use case for closing a prayer request."""

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    deliver_notifications,
    persist_notifications,
    prayer_closed_event,
)
from app.domain.entities import PRAYER_STATUS_CLOSED, PrayerRequest
from app.domain.exceptions import AlreadyClosedError, ForbiddenError, PrayerRequestNotFoundError
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import PrayerRequestRepository, PrayerResponseRepository
from app.utils import now_utc

logger = logging.getLogger(__name__)


def close_prayer_request(session: Session, *, requester_id: int, prayer_request_id: int) -> PrayerRequest:
    """Move an open request to CLOSED and tell everyone who prayed for it.

    Closing is terminal; a second call raises :class:`AlreadyClosedError`.
    """

    with unit_of_work(session):
        repository = PrayerRequestRepository(session)
        prayer_request = repository.get_for_update(prayer_request_id)
        if prayer_request is None:
            raise PrayerRequestNotFoundError(prayer_request_id)
        if not prayer_request.is_owned_by(requester_id):
            raise ForbiddenError(
                "Only the requester can close this prayer request",
                code="NOT_REQUEST_OWNER",
                details={"prayer_request_id": prayer_request_id},
            )
        if not prayer_request.is_open():
            raise AlreadyClosedError(prayer_request_id)

        prayer_request.status = PRAYER_STATUS_CLOSED
        prayer_request.closed_at = now_utc()
        prayer_request = repository.update(prayer_request)

        responder_ids = PrayerResponseRepository(session).list_responder_ids(prayer_request_id)
        notifications = persist_notifications(
            session, prayer_closed_event(prayer_request, responder_ids=responder_ids)
        )

    logger.info("Prayer request %s closed by user %s", prayer_request_id, requester_id)
    deliver_notifications(session, notifications)
    return prayer_request
