"""Notification delivery helpers for the infrastructure layer."""

from .channels import (
    Delivery,
    DeliveryChannel,
    EmailDeliveryChannel,
    LogDeliveryChannel,
)
from .publisher import (
    NotificationPublisher,
    build_default_channels,
    dispatch_notifications,
    notification_publisher,
)

__all__ = [
    "Delivery",
    "DeliveryChannel",
    "EmailDeliveryChannel",
    "LogDeliveryChannel",
    "NotificationPublisher",
    "build_default_channels",
    "notification_publisher",
    "dispatch_notifications",
]
