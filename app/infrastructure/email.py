"""Transactional email delivery through SendGrid."""

from __future__ import annotations

import html
import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import get_settings

logger = logging.getLogger(__name__)

_SUBJECTS = {
    "NEW_PRAYER_REQUEST": "New prayer request",
    "PRAYER_RESPONSE": "Someone is praying for you",
    "PRAYER_UPDATE": "Prayer request update",
    "PRAYER_CLOSED": "Prayer request closed",
}


def _describe_sendgrid_body(body: Any) -> str | None:
    """Return a readable summary of a SendGrid error payload."""

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if not body:
        return None
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            return body.strip() or None

    if isinstance(body, dict) and isinstance(body.get("errors"), list):
        messages = []
        for item in body["errors"]:
            if not isinstance(item, dict) or not item.get("message"):
                continue
            message = str(item["message"])
            if item.get("help"):
                message = f"{message} (help: {item['help']})"
            messages.append(message)
        if messages:
            return "; ".join(messages)
    return json.dumps(body, default=str)


def _log_failure(status_code: Any, body: Any) -> None:
    details = _describe_sendgrid_body(body)
    if details:
        logger.error("SendGrid request failed with status %s: %s", status_code, details)
    else:
        logger.error("SendGrid request failed with status %s", status_code)


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` instead of raising when email is not configured or
    SendGrid rejects the message.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        response = SendGridAPIClient(settings.sendgrid_api_key).send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        status_code = getattr(exc, "status_code", None)
        if status_code is None:
            logger.exception("Error sending email via SendGrid")
        else:
            _log_failure(status_code, getattr(exc, "body", None))
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_failure(status_code, getattr(response, "body", None))
        return False
    return True


def send_notification_email(recipient: str, *, notification_type: str, text: str) -> bool:
    """Email ``recipient`` the summary text of a board notification."""

    subject = _SUBJECTS.get(notification_type, "Prayer board activity")
    html_content = "".join(
        (
            "<p>Hello,</p>",
            f"<p>{html.escape(text)}</p>",
            "<p>Open the prayer board to see the full request.</p>",
        )
    )
    return send_email(subject, html_content, recipient)


__all__ = ["send_email", "send_notification_email"]
