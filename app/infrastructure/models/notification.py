"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_utc


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    to_user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    notification_type = Column(String(50), nullable=False)
    # Weak reference: notifications outlive the request they point at.
    prayer_request_id = Column(Integer, nullable=False, index=True)
    text = Column(Text, nullable=False)
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


__all__ = ["NotificationModel"]
