"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a registered member of the board."""

    id: int | None
    email: str
    password: str
    volunteered_to_pray: bool = False
    created_at: datetime | None = None
