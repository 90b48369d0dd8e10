from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, selectinload

from eventhub.api.schemas.events import EventCreate, EventUpdate
from eventhub.models import Event, Registration, RegistrationStatus, User
from eventhub.services._ids import parse_id
from eventhub.services.error_codes import ErrorCode
from eventhub.services.exceptions import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("title", "description", "date", "location", "capacity")


def _with_relations(stmt):
    return stmt.options(
        selectinload(Event.organizer),
        selectinload(Event.registrations).selectinload(Registration.user),
    )


def _blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _validate_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValidationError(ErrorCode.VALIDATION_ERROR.value, "capacity must be at least 1")


def confirmed_count(db: Session, event_id: Any) -> int:
    return int(
        db.scalar(
            select(func.count())
            .select_from(Registration)
            .where(
                Registration.event_id == event_id,
                Registration.status == RegistrationStatus.CONFIRMED,
            )
        )
        or 0
    )


def load_event(db: Session, event_id: Any, *, for_update: bool = False) -> Event:
    eid = parse_id(event_id)
    event = None
    if eid is not None:
        stmt = select(Event).where(Event.id == eid)
        if for_update:
            stmt = stmt.with_for_update()
        event = db.scalar(stmt)
    if not event:
        raise NotFoundError(ErrorCode.EVENT_NOT_FOUND.value, "event not found")
    return event


def create_event(db: Session, organizer: User, payload: EventCreate) -> Event:
    data = payload.model_dump()
    if any(_blank(data.get(name)) for name in REQUIRED_FIELDS):
        raise ValidationError(
            ErrorCode.VALIDATION_ERROR.value, "please fill all required fields"
        )
    _validate_capacity(data["capacity"])

    event = Event(
        title=data["title"].strip(),
        description=data["description"],
        date=data["date"],
        location=data["location"].strip(),
        capacity=data["capacity"],
        organizer_id=organizer.id,
    )
    db.add(event)
    db.commit()

    logger.info("event_created", event_id=str(event.id), organizer_id=str(organizer.id))
    return get_event(db, event.id)


def get_event(db: Session, event_id: Any) -> Event:
    eid = parse_id(event_id)
    event = None
    if eid is not None:
        event = db.scalar(_with_relations(select(Event).where(Event.id == eid)))
    if not event:
        raise NotFoundError(ErrorCode.EVENT_NOT_FOUND.value, "event not found")
    return event


def list_events(db: Session) -> list[Event]:
    stmt = _with_relations(select(Event).order_by(Event.date, Event.created_at))
    return list(db.scalars(stmt).all())


def update_event(db: Session, event_id: Any, patch: EventUpdate) -> Event:
    event = load_event(db, event_id, for_update=True)

    patch_data = patch.model_dump(exclude_unset=True)
    for key, value in patch_data.items():
        if _blank(value):
            raise ValidationError(ErrorCode.VALIDATION_ERROR.value, f"{key} cannot be empty")

    if "capacity" in patch_data:
        _validate_capacity(patch_data["capacity"])
        taken = confirmed_count(db, event.id)
        if patch_data["capacity"] < taken:
            raise ValidationError(
                ErrorCode.VALIDATION_ERROR.value,
                f"capacity cannot be below current registration count ({taken})",
            )

    for key in ("title", "location"):
        if key in patch_data:
            patch_data[key] = patch_data[key].strip()

    for key, value in patch_data.items():
        setattr(event, key, value)

    db.add(event)
    db.commit()

    logger.info("event_updated", event_id=str(event.id), fields=sorted(patch_data))
    return get_event(db, event.id)


def delete_event(db: Session, event_id: Any) -> None:
    """Delete an event together with every registration that points at it."""
    event = load_event(db, event_id, for_update=True)

    result = db.execute(delete(Registration).where(Registration.event_id == event.id))
    removed = result.rowcount or 0
    db.delete(event)
    db.commit()

    logger.info("event_deleted", event_id=str(event_id), registrations_removed=removed)
