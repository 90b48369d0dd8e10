"""Registration ledger.

Registration rows are the only record of attendance. An event's attendee
list and its remaining capacity are both computed from its ``confirmed``
registrations, so there is a single write per register/cancel and nothing
that can drift out of sync.

Concurrent ``register`` calls for one event are serialised on the event row
(``SELECT ... FOR UPDATE``; SQLite transactions are opened with
``BEGIN IMMEDIATE`` instead, see ``eventhub.db``). Duplicate (user, event)
pairs are additionally rejected by the ``uq_registrations_user_event``
constraint.
"""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from eventhub.models import Registration, RegistrationStatus, User
from eventhub.services._ids import parse_id
from eventhub.services.error_codes import ErrorCode
from eventhub.services.events_service import confirmed_count, load_event
from eventhub.services.exceptions import (
    AlreadyRegisteredError,
    CapacityReachedError,
    NotFoundError,
    PermissionDeniedError,
)

logger = structlog.get_logger(__name__)


def _with_relations(stmt):
    return stmt.options(
        selectinload(Registration.user),
        selectinload(Registration.event),
    )


def _already_registered() -> AlreadyRegisteredError:
    return AlreadyRegisteredError(
        ErrorCode.ALREADY_REGISTERED.value, "you are already registered for this event"
    )


def register(db: Session, user: User, event_id: Any) -> Registration:
    try:
        event = load_event(db, event_id, for_update=True)

        existing = db.scalar(
            select(Registration.id).where(
                Registration.event_id == event.id,
                Registration.user_id == user.id,
            )
        )
        if existing:
            raise _already_registered()

        if confirmed_count(db, event.id) >= event.capacity:
            raise CapacityReachedError(ErrorCode.CAPACITY_REACHED.value, "event capacity reached")

        registration = Registration(
            user_id=user.id,
            event_id=event.id,
            status=RegistrationStatus.CONFIRMED,
        )
        db.add(registration)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("registration_rejected", reason="duplicate", user_id=str(user.id))
        raise _already_registered() from exc
    except (NotFoundError, AlreadyRegisteredError, CapacityReachedError) as exc:
        db.rollback()
        logger.info(
            "registration_rejected",
            reason=exc.code,
            user_id=str(user.id),
            event_id=str(event_id),
        )
        raise

    logger.info(
        "registration_created",
        registration_id=str(registration.id),
        user_id=str(user.id),
        event_id=str(registration.event_id),
    )
    return get_registration(db, registration.id)


def get_registration(db: Session, registration_id: Any) -> Registration:
    rid = parse_id(registration_id)
    registration = None
    if rid is not None:
        registration = db.scalar(
            _with_relations(select(Registration).where(Registration.id == rid))
        )
    if not registration:
        raise NotFoundError(ErrorCode.REGISTRATION_NOT_FOUND.value, "registration not found")
    return registration


def my_registrations(db: Session, user: User) -> list[Registration]:
    stmt = _with_relations(
        select(Registration)
        .where(Registration.user_id == user.id)
        .order_by(Registration.registered_at)
    )
    return list(db.scalars(stmt).all())


def list_all(db: Session) -> list[Registration]:
    stmt = _with_relations(select(Registration).order_by(Registration.registered_at))
    return list(db.scalars(stmt).all())


def cancel(db: Session, registration_id: Any, requester: User) -> None:
    """Hard-delete a registration, freeing its capacity slot at once.

    Only the registrant or an admin may cancel.
    """
    rid = parse_id(registration_id)
    registration = None
    if rid is not None:
        # Row lock so a concurrent cancel waits, then finds nothing
        registration = db.scalar(
            select(Registration).where(Registration.id == rid).with_for_update()
        )
    if not registration:
        raise NotFoundError(ErrorCode.REGISTRATION_NOT_FOUND.value, "registration not found")

    if registration.user_id != requester.id and not requester.is_admin:
        raise PermissionDeniedError(
            ErrorCode.FORBIDDEN.value, "not authorized to cancel this registration"
        )

    user_id, event_id = registration.user_id, registration.event_id
    db.delete(registration)
    db.commit()

    logger.info(
        "registration_cancelled",
        registration_id=str(rid),
        user_id=str(user_id),
        event_id=str(event_id),
        cancelled_by=str(requester.id),
    )
