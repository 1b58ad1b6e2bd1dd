"""SQLAlchemy model for prayer responses."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc


DUPLICATE_RESPONSE_CONSTRAINT = "uq_prayer_response_request_user"


class PrayerResponseModel(Base):
    """Database representation of a user praying for a request."""

    __tablename__ = "prayer_response"
    __table_args__ = (
        UniqueConstraint(
            "prayer_request_id",
            "from_user_id",
            name=DUPLICATE_RESPONSE_CONSTRAINT,
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    prayer_request_id = Column(
        Integer,
        ForeignKey("prayer_request.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    from_user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    response_type = Column(String(10), nullable=False)
    message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    prayer_request = relationship("PrayerRequestModel", back_populates="responses")
    from_user = relationship("UserModel", lazy="joined")


__all__ = ["DUPLICATE_RESPONSE_CONSTRAINT", "PrayerResponseModel"]
