"""Tests for the authentication and profile endpoints."""

from __future__ import annotations

from datetime import timedelta

from fastapi.testclient import TestClient
from jose import jwt

from app.config import get_settings
from app.infrastructure.security import ALGORITHM, create_access_token


def test_register_login_and_me(client: TestClient) -> None:
    response = client.post(
        "/auth/register", json={"email": "Mary@Example.com", "password": "Password123!"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "mary@example.com"
    assert body["user"]["volunteered_to_pray"] is False

    claims = jwt.decode(body["access_token"], get_settings().secret_key, algorithms=[ALGORITHM])
    assert claims["sub"] == str(body["user"]["id"])
    assert claims["email"] == "mary@example.com"

    login = client.post(
        "/auth/login", json={"email": "mary@example.com", "password": "Password123!"}
    )
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["id"] == body["user"]["id"]


def test_register_conflict_and_validation(client: TestClient) -> None:
    payload = {"email": "john@example.com", "password": "Password123!"}
    assert client.post("/auth/register", json=payload).status_code == 201

    duplicate = client.post("/auth/register", json={**payload, "email": "JOHN@example.com"})
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == "Email already in use"

    short = client.post("/auth/register", json={"email": "x@example.com", "password": "short"})
    assert short.status_code == 400

    malformed = client.post("/auth/register", json={"email": "nope", "password": "Password123!"})
    assert malformed.status_code == 422


def test_login_rejects_bad_credentials(client: TestClient, auth_headers) -> None:
    auth_headers("esther@example.com")

    response = client.post(
        "/auth/login", json={"email": "esther@example.com", "password": "wrong-password"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_oauth2_token_form(client: TestClient, auth_headers) -> None:
    auth_headers("form@example.com")

    response = client.post(
        "/auth/token", data={"username": "form@example.com", "password": "Password123!"}
    )

    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"


def test_logout_acknowledges(client: TestClient) -> None:
    response = client.post("/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_protected_routes_reject_bad_tokens(client: TestClient, auth_headers) -> None:
    assert client.get("/users/me").status_code == 401
    assert client.get("/users/me", headers={"Authorization": "Bearer garbage"}).status_code == 401

    expired = create_access_token(user_id=1, email="a@example.com", expires_delta=timedelta(minutes=-1))
    assert client.get("/users/me", headers={"Authorization": f"Bearer {expired}"}).status_code == 401

    no_subject = jwt.encode({"email": "a@example.com"}, get_settings().secret_key, algorithm=ALGORITHM)
    assert client.get("/users/me", headers={"Authorization": f"Bearer {no_subject}"}).status_code == 401

    unknown = create_access_token(user_id=999, email="ghost@example.com")
    assert client.get("/users/me", headers={"Authorization": f"Bearer {unknown}"}).status_code == 401


def test_update_settings_requires_boolean(client: TestClient, auth_headers) -> None:
    headers = auth_headers("settings@example.com")

    updated = client.patch("/users/me", json={"volunteered_to_pray": True}, headers=headers)
    assert updated.status_code == 200
    assert updated.json()["volunteered_to_pray"] is True

    invalid = client.patch("/users/me", json={"volunteered_to_pray": "yes"}, headers=headers)
    assert invalid.status_code == 422


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
