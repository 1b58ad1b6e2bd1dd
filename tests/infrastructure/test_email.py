"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import json

import pytest

from app.config import get_settings
from app.infrastructure import email as email_module


class _Response:
    def __init__(self, status_code: int, body=b"") -> None:
        self.status_code = status_code
        self.body = body


@pytest.fixture()
def configured(monkeypatch):
    settings = get_settings().model_copy(
        update={"sendgrid_api_key": "test-key", "sendgrid_sender": "board@example.com"}
    )
    monkeypatch.setattr(email_module, "get_settings", lambda: settings)
    return settings


def _install_client(monkeypatch, response):
    sent = []

    class FakeClient:
        def __init__(self, api_key: str) -> None:
            self.api_key = api_key

        def send(self, message):
            sent.append((self.api_key, message))
            return response

    monkeypatch.setattr(email_module, "SendGridAPIClient", FakeClient)
    return sent


def test_send_email_skips_when_not_configured(monkeypatch):
    sent = _install_client(monkeypatch, _Response(202))

    assert email_module.send_email("Subject", "<p>Hi</p>", "user@example.com") is False
    assert sent == []


def test_send_email_success(monkeypatch, configured):
    sent = _install_client(monkeypatch, _Response(202))

    assert email_module.send_email("Subject", "<p>Hi</p>", "user@example.com") is True
    assert [api_key for api_key, _ in sent] == ["test-key"]


def test_send_email_logs_sendgrid_errors(monkeypatch, configured, caplog):
    body = json.dumps({"errors": [{"message": "Bad sender", "help": "https://docs"}]})
    _install_client(monkeypatch, _Response(400, body.encode()))

    assert email_module.send_email("Subject", "<p>Hi</p>", "user@example.com") is False
    assert "Bad sender (help: https://docs)" in caplog.text


def test_notification_email_escapes_user_text(monkeypatch):
    captured = {}

    def fake_send_email(subject, html_content, recipient):
        captured.update(subject=subject, html=html_content, recipient=recipient)
        return True

    monkeypatch.setattr(email_module, "send_email", fake_send_email)

    assert email_module.send_notification_email(
        "user@example.com", notification_type="PRAYER_UPDATE", text="<b>news</b>"
    )
    assert captured["subject"] == "Prayer request update"
    assert "&lt;b&gt;news&lt;/b&gt;" in captured["html"]
    assert captured["recipient"] == "user@example.com"
