"""Delivery channels for persisted notifications."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import partial
from typing import Protocol

from anyio import to_thread

from app.domain.entities import Notification
from app.infrastructure.email import send_notification_email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Delivery:
    """A persisted notification paired with the recipient's address."""

    notification: Notification
    recipient_email: str | None = None


class DeliveryChannel(Protocol):
    """Anything able to push a batch of deliveries to an external medium."""

    name: str

    async def send(self, deliveries: Sequence[Delivery]) -> None:
        ...


class EmailDeliveryChannel:
    """Send one SendGrid email per delivery that has a recipient address."""

    name = "email"

    async def send(self, deliveries: Sequence[Delivery]) -> None:
        for delivery in deliveries:
            if not delivery.recipient_email:
                continue
            notification = delivery.notification
            sent = await to_thread.run_sync(
                partial(
                    send_notification_email,
                    delivery.recipient_email,
                    notification_type=notification.notification_type,
                    text=notification.text,
                )
            )
            if not sent:
                logger.warning(
                    "Email for notification %s was not sent to user %s",
                    notification.id,
                    notification.to_user_id,
                )


class LogDeliveryChannel:
    """Record every delivered notification in the application log."""

    name = "log"

    async def send(self, deliveries: Sequence[Delivery]) -> None:
        for delivery in deliveries:
            notification = delivery.notification
            logger.info(
                "Delivered %s notification %s to user %s for prayer request %s",
                notification.notification_type,
                notification.id,
                notification.to_user_id,
                notification.prayer_request_id,
            )


__all__ = [
    "Delivery",
    "DeliveryChannel",
    "EmailDeliveryChannel",
    "LogDeliveryChannel",
]
