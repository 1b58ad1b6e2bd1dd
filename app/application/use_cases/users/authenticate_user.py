"""Use case for authenticating a user."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import AuthenticationError
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash, needs_rehash, verify_password


def authenticate_user(session: Session, email: str, password: str) -> User:
    """Return the user owning ``email`` when ``password`` matches.

    Unknown emails and wrong passwords raise the same error. Hashes created
    with an outdated work factor are upgraded on a successful login.
    """

    repository = UserRepository(session)
    user = repository.get_by_email(email or "")

    if user is None or not verify_password(password, user.password):
        raise AuthenticationError()

    if needs_rehash(user.password):
        with unit_of_work(session):
            user = repository.update(replace(user, password=get_password_hash(password)))

    return user
