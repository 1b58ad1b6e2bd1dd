"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictBool


class UserRead(BaseModel):
    id: int
    email: str
    volunteered_to_pray: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class UserSettingsUpdate(BaseModel):
    volunteered_to_pray: StrictBool

    model_config = ConfigDict(extra="forbid")
