from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import field_validator

from eventhub.api.schemas.common import SchemaBase, UserRef
from eventhub.models.base import as_utc


class UTCDateMixin(SchemaBase):
    @field_validator("date", mode="after", check_fields=False)
    @classmethod
    def _date_to_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class EventCreate(UTCDateMixin):
    title: str | None = None
    description: str | None = None
    date: datetime | None = None
    location: str | None = None
    capacity: int | None = None


class EventUpdate(UTCDateMixin):
    """Partial update; only the keys present in the payload are applied."""

    title: str | None = None
    description: str | None = None
    date: datetime | None = None
    location: str | None = None
    capacity: int | None = None


class EventSummary(SchemaBase):
    id: UUID
    title: str
    description: str
    date: datetime
    location: str
    capacity: int


class EventListItem(EventSummary):
    """Public listing entry: organizer resolved, attendees only counted."""

    organizer: UserRef
    attendee_count: int
    created_at: datetime
    updated_at: datetime


class EventOut(EventListItem):
    registered_attendees: list[UserRef]
