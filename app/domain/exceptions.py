"""Exception taxonomy raised by the application layer.

Every error represents an invalid request rather than a transient failure, so
none of them is retried. Routes translate them into HTTP responses.
"""

from __future__ import annotations

from typing import Any


class PrayerBoardError(Exception):
    """Base exception for all domain errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ValidationError(PrayerBoardError):
    """Malformed or missing input."""


class AuthenticationError(PrayerBoardError):
    """Unknown email or wrong password."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class NotFoundError(PrayerBoardError):
    """Referenced entity does not exist."""


class ForbiddenError(PrayerBoardError):
    """The actor lacks permission for the operation."""


class ClosedRequestError(PrayerBoardError):
    """The prayer request is closed and no longer accepts activity."""

    def __init__(self, prayer_request_id: int, message: str = "Prayer request is closed") -> None:
        super().__init__(
            message,
            code="PRAYER_REQUEST_CLOSED",
            details={"prayer_request_id": prayer_request_id},
        )


class AlreadyClosedError(ClosedRequestError):
    """Close was called on a request that is already closed."""

    def __init__(self, prayer_request_id: int) -> None:
        super().__init__(prayer_request_id, "Prayer request is already closed")
        self.code = "PRAYER_REQUEST_ALREADY_CLOSED"


class SelfResponseError(PrayerBoardError):
    """A requester tried to respond to their own request."""

    def __init__(self, prayer_request_id: int) -> None:
        super().__init__(
            "You cannot respond to your own prayer request",
            code="SELF_RESPONSE",
            details={"prayer_request_id": prayer_request_id},
        )


class DuplicateResponseError(PrayerBoardError):
    """The user already responded to the request."""

    def __init__(self, prayer_request_id: int, user_id: int) -> None:
        super().__init__(
            "You are already praying for this request",
            code="DUPLICATE_RESPONSE",
            details={"prayer_request_id": prayer_request_id, "user_id": user_id},
        )


class EmailAlreadyRegisteredError(PrayerBoardError):
    """Registration attempted with an email that is already in use."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already in use", code="EMAIL_IN_USE", details={"email": email})


class PrayerRequestNotFoundError(NotFoundError):
    def __init__(self, prayer_request_id: int) -> None:
        super().__init__(
            "Prayer request not found",
            code="PRAYER_REQUEST_NOT_FOUND",
            details={"prayer_request_id": prayer_request_id},
        )


__all__ = [
    "PrayerBoardError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ForbiddenError",
    "ClosedRequestError",
    "AlreadyClosedError",
    "SelfResponseError",
    "DuplicateResponseError",
    "EmailAlreadyRegisteredError",
    "PrayerRequestNotFoundError",
]
