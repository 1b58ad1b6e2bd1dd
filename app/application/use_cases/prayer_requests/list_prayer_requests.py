"""Use case for the prayer request feed."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import PrayerRequestSummary
from app.infrastructure.repositories import PrayerRequestRepository


def list_prayer_requests(
    session: Session,
    *,
    viewer_id: int | None = None,
    include_closed: bool = False,
) -> Sequence[PrayerRequestSummary]:
    """Return the feed, open requests first and newest first within each status.

    Every viewer sees the same feed; ``viewer_id`` is accepted so callers can
    pass the authenticated user uniformly.
    """

    return PrayerRequestRepository(session).list_summaries(include_closed=include_closed)
