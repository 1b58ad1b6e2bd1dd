"""Routes for the authenticated user's profile and settings."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.users import update_settings
from app.domain.entities import User
from app.domain.exceptions import PrayerBoardError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import UserRead, UserSettingsUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    """Return the authenticated user."""

    return UserRead.model_validate(current_user)


@router.patch("/me", response_model=UserRead)
def update_current_user_settings(
    payload: UserSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    """Opt in or out of notifications about new prayer requests."""

    try:
        user = update_settings(
            db, user_id=current_user.id, volunteered_to_pray=payload.volunteered_to_pray
        )
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return UserRead.model_validate(user)
