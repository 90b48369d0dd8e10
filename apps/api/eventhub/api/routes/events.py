from __future__ import annotations

from fastapi import APIRouter

from eventhub.api.schemas import EventCreate, EventListItem, EventOut, EventUpdate, MessageOut
from eventhub.auth.deps import AdminUser, DBSession
from eventhub.services import events_service

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventListItem])
def list_events(db: DBSession):
    return [EventListItem.model_validate(e) for e in events_service.list_events(db)]


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: str, db: DBSession):
    return EventOut.model_validate(events_service.get_event(db, event_id))


@router.post("", response_model=EventOut, status_code=201)
def create_event(payload: EventCreate, db: DBSession, admin: AdminUser):
    return EventOut.model_validate(events_service.create_event(db, admin, payload))


@router.put("/{event_id}", response_model=EventOut)
def update_event(event_id: str, payload: EventUpdate, db: DBSession, admin: AdminUser):
    return EventOut.model_validate(events_service.update_event(db, event_id, payload))


@router.delete("/{event_id}", response_model=MessageOut)
def delete_event(event_id: str, db: DBSession, admin: AdminUser):
    events_service.delete_event(db, event_id)
    return MessageOut(message="event removed")
