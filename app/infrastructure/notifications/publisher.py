"""Best-effort delivery of persisted notifications to external channels."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import anyio

from app.config import Settings, get_settings

from .channels import Delivery, DeliveryChannel, EmailDeliveryChannel, LogDeliveryChannel

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Run every configured channel concurrently for a batch of deliveries.

    A failing channel is logged and does not affect the others. Nothing is
    raised back to the caller because the notifications are already stored.
    """

    def __init__(self, channels: Iterable[DeliveryChannel]) -> None:
        self._channels = list(channels)

    @property
    def channels(self) -> list[DeliveryChannel]:
        return list(self._channels)

    def dispatch(self, deliveries: Sequence[Delivery]) -> None:
        """Deliver ``deliveries`` and wait until every channel has finished.

        Must be called from synchronous code: sync route handlers run in a
        worker thread with no event loop, so a private loop is started there.
        """

        if not deliveries or not self._channels:
            return
        anyio.run(self.deliver, deliveries)

    async def deliver(self, deliveries: Sequence[Delivery]) -> None:
        async with anyio.create_task_group() as task_group:
            for channel in self._channels:
                task_group.start_soon(self._send_safely, channel, deliveries)

    @staticmethod
    async def _send_safely(channel: DeliveryChannel, deliveries: Sequence[Delivery]) -> None:
        try:
            await channel.send(deliveries)
        except Exception:
            logger.exception(
                "Delivery of %d notification(s) through the %s channel failed",
                len(deliveries),
                channel.name,
            )


def build_default_channels(settings: Settings) -> list[DeliveryChannel]:
    channels: list[DeliveryChannel] = [LogDeliveryChannel()]
    if settings.notification_email_enabled:
        channels.append(EmailDeliveryChannel())
    return channels


notification_publisher = NotificationPublisher(build_default_channels(get_settings()))


def dispatch_notifications(deliveries: Sequence[Delivery]) -> None:
    """Public helper that delegates to the shared publisher instance."""

    notification_publisher.dispatch(deliveries)


__all__ = [
    "NotificationPublisher",
    "build_default_channels",
    "notification_publisher",
    "dispatch_notifications",
]
