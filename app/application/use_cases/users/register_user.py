"""Use case for registering a new account."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import EmailAlreadyRegisteredError
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash

from .validators import ensure_valid_password, normalize_email

logger = logging.getLogger(__name__)


def register_user(session: Session, *, email: str, password: str) -> User:
    """Create a user ensuring email addresses are unique regardless of case."""

    normalized_email = normalize_email(email)
    ensure_valid_password(password)

    repository = UserRepository(session)
    if repository.get_by_email(normalized_email):
        raise EmailAlreadyRegisteredError(normalized_email)

    try:
        with unit_of_work(session):
            user = repository.create(
                User(
                    id=None,
                    email=normalized_email,
                    password=get_password_hash(password),
                )
            )
    except IntegrityError as exc:
        raise EmailAlreadyRegisteredError(normalized_email) from exc

    logger.info("Registered user %s", user.id)
    return user
