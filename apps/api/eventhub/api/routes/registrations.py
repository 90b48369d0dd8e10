from __future__ import annotations

from fastapi import APIRouter

from eventhub.api.schemas import (
    MessageOut,
    RegistrationCreate,
    RegistrationCreatedOut,
    RegistrationOut,
)
from eventhub.auth.deps import AdminUser, CurrentUser, DBSession
from eventhub.services import registrations_service

router = APIRouter(prefix="/registrations", tags=["registrations"])


@router.post("", response_model=RegistrationCreatedOut, status_code=201)
def register_for_event(payload: RegistrationCreate, db: DBSession, user: CurrentUser):
    registration = registrations_service.register(db, user, payload.event_id)
    return RegistrationCreatedOut(
        message="successfully registered for event",
        registration=RegistrationOut.model_validate(registration),
    )


@router.get("/myregistrations", response_model=list[RegistrationOut])
def my_registrations(db: DBSession, user: CurrentUser):
    return [RegistrationOut.model_validate(r) for r in registrations_service.my_registrations(db, user)]


@router.get("/all", response_model=list[RegistrationOut])
def all_registrations(db: DBSession, admin: AdminUser):
    return [RegistrationOut.model_validate(r) for r in registrations_service.list_all(db)]


@router.delete("/{registration_id}", response_model=MessageOut)
def cancel_registration(registration_id: str, db: DBSession, user: CurrentUser):
    registrations_service.cancel(db, registration_id, user)
    return MessageOut(message="registration cancelled successfully")
