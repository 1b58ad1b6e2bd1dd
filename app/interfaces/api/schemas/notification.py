"""Pydantic models describing notification payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    to_user_id: int
    notification_type: str
    prayer_request_id: int
    text: str
    is_read: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["NotificationRead"]
