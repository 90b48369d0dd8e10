from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, Field

from eventhub.api.schemas.common import SchemaBase, UserRef
from eventhub.api.schemas.events import EventSummary
from eventhub.models import RegistrationStatus


class RegistrationCreate(SchemaBase):
    event_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("eventId", "event_id"),
    )


class RegistrationOut(SchemaBase):
    id: UUID
    status: RegistrationStatus
    registered_at: datetime
    user: UserRef
    event: EventSummary
    created_at: datetime
    updated_at: datetime


class RegistrationCreatedOut(SchemaBase):
    message: str
    registration: RegistrationOut
