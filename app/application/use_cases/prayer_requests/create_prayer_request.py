"""Use case for posting a new prayer request."""

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    deliver_notifications,
    new_prayer_request_event,
    persist_notifications,
)
from app.domain.entities import PRAYER_STATUS_OPEN, PrayerRequest
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import PrayerRequestRepository, UserRepository

from .validators import clean_required_text, clean_title

logger = logging.getLogger(__name__)


def create_prayer_request(
    session: Session,
    *,
    requester_id: int,
    body: str,
    title: str | None = None,
) -> PrayerRequest:
    """Open a new request and notify every volunteer except the requester."""

    cleaned_body = clean_required_text(body, field_name="body")
    cleaned_title = clean_title(title)

    with unit_of_work(session):
        prayer_request = PrayerRequestRepository(session).create(
            PrayerRequest(
                id=None,
                requester_user_id=requester_id,
                title=cleaned_title,
                body=cleaned_body,
                status=PRAYER_STATUS_OPEN,
            )
        )
        volunteer_ids = UserRepository(session).list_volunteer_ids(exclude_user_id=requester_id)
        notifications = persist_notifications(
            session, new_prayer_request_event(prayer_request, volunteer_ids=volunteer_ids)
        )

    logger.info(
        "Prayer request %s created by user %s; %d volunteer(s) notified",
        prayer_request.id,
        requester_id,
        len(notifications),
    )
    deliver_notifications(session, notifications)
    return prayer_request
