"""Use case for updating a user's notification preferences."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.database import unit_of_work
from app.infrastructure.repositories import UserRepository

from .get_user import get_user

logger = logging.getLogger(__name__)


def update_settings(session: Session, *, user_id: int, volunteered_to_pray: bool) -> User:
    """Opt the user in or out of new prayer request notifications."""

    with unit_of_work(session):
        current_user = get_user(session, user_id)
        user = UserRepository(session).update(
            replace(current_user, volunteered_to_pray=volunteered_to_pray)
        )

    logger.info("User %s set volunteered_to_pray=%s", user_id, volunteered_to_pray)
    return user
