"""Use case for appending a requester update to a prayer request."""

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    deliver_notifications,
    persist_notifications,
    prayer_update_event,
)
from app.domain.entities import PrayerUpdate
from app.domain.exceptions import ClosedRequestError, ForbiddenError, PrayerRequestNotFoundError
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import (
    PrayerRequestRepository,
    PrayerResponseRepository,
    PrayerUpdateRepository,
)

from .validators import clean_required_text

logger = logging.getLogger(__name__)


def post_prayer_update(
    session: Session, *, actor_id: int, prayer_request_id: int, body: str
) -> PrayerUpdate:
    """Append an update written by the requester and notify prior responders."""

    cleaned_body = clean_required_text(body, field_name="body")

    with unit_of_work(session):
        prayer_request = PrayerRequestRepository(session).get_for_update(prayer_request_id)
        if prayer_request is None:
            raise PrayerRequestNotFoundError(prayer_request_id)
        if not prayer_request.is_owned_by(actor_id):
            raise ForbiddenError(
                "Only the requester can post updates",
                code="NOT_REQUEST_OWNER",
                details={"prayer_request_id": prayer_request_id},
            )
        if not prayer_request.is_open():
            raise ClosedRequestError(prayer_request_id)

        update = PrayerUpdateRepository(session).create(
            PrayerUpdate(
                id=None,
                prayer_request_id=prayer_request_id,
                from_user_id=actor_id,
                body=cleaned_body,
            )
        )
        responder_ids = PrayerResponseRepository(session).list_responder_ids(prayer_request_id)
        notifications = persist_notifications(
            session,
            prayer_update_event(prayer_request, body=cleaned_body, responder_ids=responder_ids),
        )

    logger.info("Update %s posted on prayer request %s", update.id, prayer_request_id)
    deliver_notifications(session, notifications)
    return update
