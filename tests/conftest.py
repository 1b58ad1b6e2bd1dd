"""Shared fixtures: a throwaway SQLite database and an application client."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "faith_whisperer_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["NOTIFICATION_EMAIL_ENABLED"] = "false"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from fastapi.testclient import TestClient  # noqa: E402

from app.application.use_cases.users import register_user, update_settings  # noqa: E402
from app.domain.entities import User  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)

DEFAULT_PASSWORD = "Password123!"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    """Return a factory registering users directly through the use cases."""

    def factory(email: str, *, volunteered_to_pray: bool = False) -> User:
        user = register_user(session, email=email, password=DEFAULT_PASSWORD)
        if volunteered_to_pray:
            user = update_settings(session, user_id=user.id, volunteered_to_pray=True)
        return user

    return factory


@pytest.fixture()
def client():
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers(client):
    """Return a factory that registers an account over HTTP and yields its headers."""

    def factory(email: str, *, volunteered_to_pray: bool = False) -> dict[str, str]:
        response = client.post(
            "/auth/register", json={"email": email, "password": DEFAULT_PASSWORD}
        )
        assert response.status_code == 201, response.text
        headers = {"Authorization": f"Bearer {response.json()['access_token']}"}
        if volunteered_to_pray:
            patch = client.patch(
                "/users/me", json={"volunteered_to_pray": True}, headers=headers
            )
            assert patch.status_code == 200, patch.text
        return headers

    return factory
