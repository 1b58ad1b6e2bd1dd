"""SQLAlchemy model for prayer requests."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc


class PrayerRequestModel(Base):
    """Database representation of a prayer request."""

    __tablename__ = "prayer_request"
    __table_args__ = (
        CheckConstraint("status IN ('OPEN', 'CLOSED')", name="ck_prayer_request_status"),
        CheckConstraint(
            "(status = 'CLOSED') = (closed_at IS NOT NULL)",
            name="ck_prayer_request_closed_at",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    requester_user_id = Column(
        Integer, ForeignKey("user.id"), nullable=False, index=True
    )
    title = Column(String(200), nullable=True)
    body = Column(Text, nullable=False)
    status = Column(String(10), nullable=False, default="OPEN", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    closed_at = Column(DateTime(timezone=True), nullable=True)

    responses = relationship(
        "PrayerResponseModel",
        back_populates="prayer_request",
        cascade="all, delete-orphan",
        order_by="PrayerResponseModel.created_at",
    )
    updates = relationship(
        "PrayerUpdateModel",
        back_populates="prayer_request",
        cascade="all, delete-orphan",
        order_by="PrayerUpdateModel.created_at",
    )


__all__ = ["PrayerRequestModel"]
