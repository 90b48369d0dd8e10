from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlalchemy import ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventhub.models.base import Base, TimestampMixin, UTCDateTime, UUIDPrimaryKeyMixin
from eventhub.models.registration import Registration, RegistrationStatus

if TYPE_CHECKING:
    from eventhub.models.user import User


class Event(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "events"
    __table_args__ = (
        sa.CheckConstraint("capacity >= 1", name="ck_events_capacity_positive"),
        sa.Index("ix_events_date", "date"),
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    location: Mapped[str] = mapped_column(String(300), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)

    organizer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    organizer: Mapped[User] = relationship()
    registrations: Mapped[list[Registration]] = relationship(
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=Registration.registered_at,
    )

    @property
    def registered_attendees(self) -> list[User]:
        """Users holding a confirmed registration, in registration order.

        Derived from the registration rows on every access; there is no
        stored attendee list to keep in sync.
        """
        return [
            r.user for r in self.registrations if r.status == RegistrationStatus.CONFIRMED
        ]

    @property
    def attendee_count(self) -> int:
        return len(self.registered_attendees)
