"""Helper utilities shared across API route handlers."""

from typing import NoReturn

from fastapi import HTTPException, status

from app.domain.exceptions import (
    AuthenticationError,
    ClosedRequestError,
    DuplicateResponseError,
    EmailAlreadyRegisteredError,
    ForbiddenError,
    NotFoundError,
    PrayerBoardError,
    SelfResponseError,
    ValidationError,
)

# Ordered so that subclasses are matched before their parents.
_STATUS_BY_ERROR: tuple[tuple[type[PrayerBoardError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ClosedRequestError, status.HTTP_400_BAD_REQUEST),
    (SelfResponseError, status.HTTP_400_BAD_REQUEST),
    (DuplicateResponseError, status.HTTP_409_CONFLICT),
    (EmailAlreadyRegisteredError, status.HTTP_409_CONFLICT),
)


def status_code_for(error: PrayerBoardError) -> int:
    """Return the HTTP status used to report ``error``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def raise_http_error(error: PrayerBoardError) -> NoReturn:
    """Translate a domain error into the matching :class:`HTTPException`."""

    status_code = status_code_for(error)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    raise HTTPException(status_code=status_code, detail=error.message, headers=headers) from error
