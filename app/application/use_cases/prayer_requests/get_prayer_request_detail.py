"""Use case for the detail view of a single prayer request."""

from sqlalchemy.orm import Session

from app.domain.entities import PrayerRequestDetail
from app.domain.exceptions import PrayerRequestNotFoundError
from app.infrastructure.repositories import (
    PrayerRequestRepository,
    PrayerResponseRepository,
    PrayerUpdateRepository,
)


def get_prayer_request_detail(
    session: Session, *, prayer_request_id: int, viewer_id: int
) -> PrayerRequestDetail:
    summary = PrayerRequestRepository(session).get_summary(prayer_request_id)
    if summary is None:
        raise PrayerRequestNotFoundError(prayer_request_id)

    responses = list(PrayerResponseRepository(session).list_for_request(prayer_request_id))
    updates = list(PrayerUpdateRepository(session).list_for_request(prayer_request_id))
    return PrayerRequestDetail(
        summary=summary,
        responses=responses,
        updates=updates,
        already_praying=any(response.from_user_id == viewer_id for response in responses),
    )
