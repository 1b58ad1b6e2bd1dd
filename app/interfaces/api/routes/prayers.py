"""Routes for posting, browsing and interacting with prayer requests."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.prayer_requests import (
    close_prayer_request,
    create_prayer_request,
    get_prayer_request_detail,
    list_prayer_requests,
    post_prayer_update,
    respond_to_prayer_request,
)
from app.domain.entities import User
from app.domain.exceptions import PrayerBoardError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    PrayerRequestCreate,
    PrayerRequestDetailRead,
    PrayerRequestFeedItem,
    PrayerRequestRead,
    PrayerRespondRequest,
    PrayerResponseRead,
    PrayerUpdateCreate,
    PrayerUpdateRead,
)

router = APIRouter(prefix="/prayers", tags=["prayers"])


@router.post("", response_model=PrayerRequestRead, status_code=status.HTTP_201_CREATED)
def create_prayer(
    payload: PrayerRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PrayerRequestRead:
    """Post a new prayer request and notify volunteers."""

    try:
        prayer_request = create_prayer_request(
            db, requester_id=current_user.id, title=payload.title, body=payload.body
        )
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return PrayerRequestRead.model_validate(prayer_request)


@router.get("", response_model=list[PrayerRequestFeedItem])
def list_prayers(
    include_closed: bool = Query(False, description="Also return closed requests"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[PrayerRequestFeedItem]:
    summaries = list_prayer_requests(
        db, viewer_id=current_user.id, include_closed=include_closed
    )
    return [PrayerRequestFeedItem.from_summary(summary) for summary in summaries]


@router.get("/{prayer_request_id}", response_model=PrayerRequestDetailRead)
def read_prayer(
    prayer_request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PrayerRequestDetailRead:
    try:
        detail = get_prayer_request_detail(
            db, prayer_request_id=prayer_request_id, viewer_id=current_user.id
        )
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return PrayerRequestDetailRead.from_detail(detail)


@router.post(
    "/{prayer_request_id}/respond",
    response_model=PrayerResponseRead,
    status_code=status.HTTP_201_CREATED,
)
def respond_to_prayer(
    prayer_request_id: int,
    payload: PrayerRespondRequest | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PrayerResponseRead:
    """Tell the requester you are praying, optionally with a message."""

    try:
        response = respond_to_prayer_request(
            db,
            actor_id=current_user.id,
            prayer_request_id=prayer_request_id,
            message=payload.message if payload else None,
        )
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return PrayerResponseRead.model_validate(response)


@router.post(
    "/{prayer_request_id}/updates",
    response_model=PrayerUpdateRead,
    status_code=status.HTTP_201_CREATED,
)
def post_update(
    prayer_request_id: int,
    payload: PrayerUpdateCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PrayerUpdateRead:
    try:
        update = post_prayer_update(
            db,
            actor_id=current_user.id,
            prayer_request_id=prayer_request_id,
            body=payload.body,
        )
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return PrayerUpdateRead.model_validate(update)


@router.post("/{prayer_request_id}/close", response_model=PrayerRequestRead)
def close_prayer(
    prayer_request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PrayerRequestRead:
    """Close the request; only its requester may do this."""

    try:
        prayer_request = close_prayer_request(
            db, requester_id=current_user.id, prayer_request_id=prayer_request_id
        )
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return PrayerRequestRead.model_validate(prayer_request)
