"""Endpoints for registration, login and logout."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.application.use_cases.users import authenticate_user, register_user
from app.domain.entities import User
from app.domain.exceptions import PrayerBoardError
from app.infrastructure.database import get_db
from app.infrastructure.security import create_access_token
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    AuthResponse,
    LoginRequest,
    LogoutResponse,
    RegisterRequest,
    Token,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        access_token=create_access_token(user_id=user.id, email=user.email),
        token_type="bearer",
        user=UserRead.model_validate(user),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Create an account and return a token for it."""

    try:
        user = register_user(db, email=payload.email, password=payload.password)
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    try:
        user = authenticate_user(db, payload.email, payload.password)
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return _auth_response(user)


# Kept with the signature OAuth2PasswordRequestForm expects so the docs UI can log in.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> Token:
    """Authenticate by email (sent as ``username``) and return a JWT."""

    try:
        user = authenticate_user(db, form_data.username, form_data.password)
    except PrayerBoardError as exc:
        raise_http_error(exc)
    return Token(access_token=create_access_token(user_id=user.id, email=user.email))


@router.post("/logout", response_model=LogoutResponse)
def logout() -> LogoutResponse:
    """Tokens are stateless; clients discard theirs."""

    return LogoutResponse(success=True)
