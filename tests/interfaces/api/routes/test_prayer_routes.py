"""End-to-end tests for the prayer and notification endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _create(client: TestClient, headers, **payload):
    response = client.post("/prayers", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_full_scenario(client: TestClient, auth_headers) -> None:
    u1 = auth_headers("u1@example.com")
    u2 = auth_headers("u2@example.com", volunteered_to_pray=True)

    prayer = _create(client, u1, title="T", body="B")
    assert prayer["status"] == "OPEN"
    assert prayer["closed_at"] is None

    inbox = client.get("/notifications", headers=u2).json()
    assert [(n["notification_type"], n["text"]) for n in inbox] == [("NEW_PRAYER_REQUEST", "T: B")]

    responded = client.post(
        f"/prayers/{prayer['id']}/respond", json={"message": "praying"}, headers=u2
    )
    assert responded.status_code == 201
    assert responded.json()["response_type"] == "MESSAGE"

    owner_inbox = client.get("/notifications", headers=u1).json()
    assert [n["text"] for n in owner_inbox] == ["Someone is praying for you: praying"]

    update = client.post(f"/prayers/{prayer['id']}/updates", json={"body": "thanks"}, headers=u1)
    assert update.status_code == 201

    closed = client.post(f"/prayers/{prayer['id']}/close", headers=u1)
    assert closed.status_code == 200
    assert closed.json()["status"] == "CLOSED"
    assert closed.json()["closed_at"] is not None

    types = [n["notification_type"] for n in client.get("/notifications", headers=u2).json()]
    assert types == ["PRAYER_CLOSED", "PRAYER_UPDATE", "NEW_PRAYER_REQUEST"]

    again = client.post(f"/prayers/{prayer['id']}/respond", json={}, headers=u2)
    assert again.status_code == 400


def test_feed_and_detail(client: TestClient, auth_headers) -> None:
    owner = auth_headers("owner@example.com")
    helper = auth_headers("helper@example.com")
    a = _create(client, owner, body="A")
    b = _create(client, owner, body="B")
    c = _create(client, owner, body="C")
    assert client.post(f"/prayers/{b['id']}/close", headers=owner).status_code == 200
    assert client.post(f"/prayers/{a['id']}/respond", headers=helper).status_code == 201

    feed = client.get("/prayers", headers=helper).json()
    assert [item["id"] for item in feed] == [c["id"], a["id"]]

    full_feed = client.get("/prayers", params={"include_closed": True}, headers=helper).json()
    assert [item["id"] for item in full_feed] == [c["id"], a["id"], b["id"]]
    assert full_feed[1]["praying_count"] == 1
    assert full_feed[1]["requester_email"] == "owner@example.com"

    detail = client.get(f"/prayers/{a['id']}", headers=helper).json()
    assert detail["already_praying"] is True
    assert detail["request"]["praying_count"] == 1
    assert [r["response_type"] for r in detail["responses"]] == ["QUICK"]
    assert [r["from_user_email"] for r in detail["responses"]] == ["helper@example.com"]
    assert detail["updates"] == []

    assert client.get("/prayers/9999", headers=helper).status_code == 404


def test_error_statuses(client: TestClient, auth_headers) -> None:
    owner = auth_headers("owner@example.com")
    helper = auth_headers("helper@example.com")
    prayer = _create(client, owner, body="Body")
    url = f"/prayers/{prayer['id']}"

    assert client.post("/prayers", json={"body": "   "}, headers=owner).status_code == 400
    assert client.post(f"{url}/respond", headers=owner).status_code == 400
    assert client.post(f"{url}/close", headers=helper).status_code == 403
    assert client.post(f"{url}/updates", json={"body": "x"}, headers=helper).status_code == 403
    assert client.post(f"{url}/updates", json={"body": " "}, headers=owner).status_code == 400

    assert client.post(f"{url}/respond", headers=helper).status_code == 201
    duplicate = client.post(f"{url}/respond", json={"message": "again"}, headers=helper)
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == "You are already praying for this request"

    assert client.post(f"{url}/close", headers=owner).status_code == 200
    second_close = client.post(f"{url}/close", headers=owner)
    assert second_close.status_code == 400
    assert second_close.json()["detail"] == "Prayer request is already closed"
    assert client.post(f"{url}/updates", json={"body": "late"}, headers=owner).status_code == 400
    assert client.post("/prayers/9999/close", headers=owner).status_code == 404


def test_prayer_routes_require_authentication(client: TestClient) -> None:
    assert client.get("/prayers").status_code == 401
    assert client.post("/prayers", json={"body": "hi"}).status_code == 401
    assert client.get("/notifications").status_code == 401


def test_notification_read_flow(client: TestClient, auth_headers) -> None:
    owner = auth_headers("owner@example.com")
    volunteer = auth_headers("volunteer@example.com", volunteered_to_pray=True)
    _create(client, owner, body="first")
    _create(client, owner, body="second")

    inbox = client.get("/notifications", headers=volunteer).json()
    assert len(inbox) == 2
    newest = inbox[0]

    marked = client.post(f"/notifications/{newest['id']}/read", headers=volunteer)
    assert marked.status_code == 200
    assert marked.json()["is_read"] is True
    assert client.post(f"/notifications/{newest['id']}/read", headers=volunteer).status_code == 200

    unread = client.get("/notifications", params={"unread_only": True}, headers=volunteer).json()
    assert [n["id"] for n in unread] == [inbox[1]["id"]]

    limited = client.get("/notifications", params={"limit": 1}, headers=volunteer).json()
    assert [n["id"] for n in limited] == [newest["id"]]

    assert client.post(f"/notifications/{newest['id']}/read", headers=owner).status_code == 404
