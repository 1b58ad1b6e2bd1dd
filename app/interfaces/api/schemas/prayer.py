"""Schemas for prayer requests, responses and updates."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import PrayerRequestDetail, PrayerRequestSummary


class PrayerRequestCreate(BaseModel):
    title: str | None = Field(default=None, max_length=200)
    body: str


class PrayerRespondRequest(BaseModel):
    message: str | None = None


class PrayerUpdateCreate(BaseModel):
    body: str


class PrayerRequestRead(BaseModel):
    id: int
    requester_user_id: int
    title: str | None = None
    body: str
    status: str
    created_at: datetime | None = None
    closed_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class PrayerRequestFeedItem(PrayerRequestRead):
    requester_email: str
    praying_count: int = 0

    @classmethod
    def from_summary(cls, summary: PrayerRequestSummary) -> PrayerRequestFeedItem:
        request = summary.request
        return cls(
            id=request.id,
            requester_user_id=request.requester_user_id,
            requester_email=summary.requester_email,
            title=request.title,
            body=request.body,
            status=request.status,
            created_at=request.created_at,
            closed_at=request.closed_at,
            praying_count=summary.praying_count,
        )


class PrayerResponseRead(BaseModel):
    id: int
    prayer_request_id: int
    from_user_id: int
    from_user_email: str | None = None
    response_type: str
    message: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class PrayerUpdateRead(BaseModel):
    id: int
    prayer_request_id: int
    from_user_id: int
    from_user_email: str | None = None
    body: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class PrayerRequestDetailRead(BaseModel):
    request: PrayerRequestFeedItem
    responses: list[PrayerResponseRead] = Field(default_factory=list)
    updates: list[PrayerUpdateRead] = Field(default_factory=list)
    already_praying: bool = False

    @classmethod
    def from_detail(cls, detail: PrayerRequestDetail) -> PrayerRequestDetailRead:
        return cls(
            request=PrayerRequestFeedItem.from_summary(detail.summary),
            responses=[PrayerResponseRead.model_validate(item) for item in detail.responses],
            updates=[PrayerUpdateRead.model_validate(item) for item in detail.updates],
            already_praying=detail.already_praying,
        )


__all__ = [
    "PrayerRequestCreate",
    "PrayerRespondRequest",
    "PrayerUpdateCreate",
    "PrayerRequestRead",
    "PrayerRequestFeedItem",
    "PrayerResponseRead",
    "PrayerUpdateRead",
    "PrayerRequestDetailRead",
]
