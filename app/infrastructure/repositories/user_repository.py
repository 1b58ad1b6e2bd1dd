"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.utils import ensure_utc, now_utc


class UserRepository:
    """Provide persistence operations for user entities.

    Writes are flushed, never committed; the caller's unit of work decides
    when the transaction ends.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.email == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        model.created_at = user.created_at or now_utc()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.flush()
        return self._to_entity(model)

    def list_volunteer_ids(self, *, exclude_user_id: int | None = None) -> list[int]:
        """Return ids of users who opted in to new request notifications."""

        query = self.session.query(UserModel.id).filter(
            UserModel.volunteered_to_pray.is_(True)
        )
        if exclude_user_id is not None:
            query = query.filter(UserModel.id != exclude_user_id)
        return [user_id for (user_id,) in query.order_by(UserModel.id).all()]

    def get_email_map(self, user_ids: Iterable[int]) -> dict[int, str]:
        unique_ids = {int(user_id) for user_id in user_ids if user_id}
        if not unique_ids:
            return {}
        query = self.session.query(UserModel.id, UserModel.email).filter(
            UserModel.id.in_(unique_ids)
        )
        return {user_id: email for user_id, email in query.all()}

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password=model.password,
            volunteered_to_pray=model.volunteered_to_pray,
            created_at=ensure_utc(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.email = user.email.strip().lower()
        model.password = user.password
        model.volunteered_to_pray = user.volunteered_to_pray


__all__ = ["UserRepository"]
