"""Use case for responding "I am praying" to a request."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    deliver_notifications,
    persist_notifications,
    prayer_response_event,
)
from app.domain.entities import RESPONSE_TYPE_MESSAGE, RESPONSE_TYPE_QUICK, PrayerResponse
from app.domain.exceptions import (
    ClosedRequestError,
    DuplicateResponseError,
    PrayerRequestNotFoundError,
    SelfResponseError,
)
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import PrayerRequestRepository, PrayerResponseRepository

from .validators import clean_optional_text

logger = logging.getLogger(__name__)


def respond_to_prayer_request(
    session: Session,
    *,
    actor_id: int,
    prayer_request_id: int,
    message: str | None = None,
) -> PrayerResponse:
    """Record that ``actor_id`` is praying and notify the requester.

    The owner is rejected before the request state is checked, so responding
    to one's own closed request still raises :class:`SelfResponseError`.
    """

    cleaned_message = clean_optional_text(message)
    response_type = RESPONSE_TYPE_MESSAGE if cleaned_message else RESPONSE_TYPE_QUICK

    with unit_of_work(session):
        prayer_request = PrayerRequestRepository(session).get_for_update(prayer_request_id)
        if prayer_request is None:
            raise PrayerRequestNotFoundError(prayer_request_id)
        if prayer_request.is_owned_by(actor_id):
            raise SelfResponseError(prayer_request_id)
        if not prayer_request.is_open():
            raise ClosedRequestError(prayer_request_id)

        responses = PrayerResponseRepository(session)
        if responses.exists(prayer_request_id=prayer_request_id, from_user_id=actor_id):
            raise DuplicateResponseError(prayer_request_id, actor_id)
        try:
            response = responses.create(
                PrayerResponse(
                    id=None,
                    prayer_request_id=prayer_request_id,
                    from_user_id=actor_id,
                    response_type=response_type,
                    message=cleaned_message,
                )
            )
        except IntegrityError as exc:
            if not responses.is_duplicate_violation(exc):
                raise
            raise DuplicateResponseError(prayer_request_id, actor_id) from exc

        notifications = persist_notifications(
            session,
            prayer_response_event(prayer_request, responder_id=actor_id, message=cleaned_message),
        )

    logger.info(
        "User %s responded (%s) to prayer request %s",
        actor_id,
        response_type,
        prayer_request_id,
    )
    deliver_notifications(session, notifications)
    return response
