"""SQLAlchemy model for requester updates."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc


class PrayerUpdateModel(Base):
    """Database representation of an update posted on a prayer request."""

    __tablename__ = "prayer_update"

    id = Column(Integer, primary_key=True, index=True)
    prayer_request_id = Column(
        Integer,
        ForeignKey("prayer_request.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    from_user_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    body = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    prayer_request = relationship("PrayerRequestModel", back_populates="updates")
    from_user = relationship("UserModel", lazy="joined")


__all__ = ["PrayerUpdateModel"]
