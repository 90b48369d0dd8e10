from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from eventhub.api.schemas import EventCreate, EventUpdate
from eventhub.models import Registration, UserRole
from eventhub.services import events_service, registrations_service, users_service
from eventhub.services.exceptions import (
    AlreadyRegisteredError,
    CapacityReachedError,
    DuplicateEmailError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


@pytest.fixture
def admin(db_session):
    return users_service.create_user(
        db_session, "Admin", "ledger-admin@example.com", "AdminPass123", UserRole.ADMIN, time_cost=1
    )


@pytest.fixture
def make_user(db_session):
    def _make(email: str):
        return users_service.create_user(db_session, "Attendee", email, "Attend1234", time_cost=1)

    return _make


@pytest.fixture
def make_event(db_session, admin):
    def _make(capacity: int = 2, **overrides):
        payload = EventCreate(
            title=overrides.get("title", "Ledger Event"),
            description="desc",
            date=datetime(2031, 3, 1, 12, tzinfo=timezone.utc),
            location="Hall",
            capacity=capacity,
        )
        return events_service.create_event(db_session, admin, payload)

    return _make


def test_duplicate_email_rejected(db_session, make_user):
    make_user("same@example.com")
    with pytest.raises(DuplicateEmailError):
        make_user(" SAME@example.com ")


def test_find_user_by_email_and_id(db_session, make_user):
    user = make_user("find@example.com")
    assert users_service.find_by_email(db_session, "Find@Example.com").id == user.id
    assert users_service.find_by_id(db_session, str(user.id)).email == "find@example.com"
    assert users_service.find_by_id(db_session, "garbage") is None


def test_register_and_project_attendees(db_session, make_user, make_event):
    event = make_event(capacity=2)
    first = make_user("first@example.com")
    second = make_user("second@example.com")

    registrations_service.register(db_session, first, event.id)
    registrations_service.register(db_session, second, event.id)

    event = events_service.get_event(db_session, event.id)
    assert [u.email for u in event.registered_attendees] == [
        "first@example.com",
        "second@example.com",
    ]
    assert events_service.confirmed_count(db_session, event.id) == 2


def test_register_failures(db_session, make_user, make_event):
    event = make_event(capacity=1)
    first = make_user("one@example.com")
    second = make_user("two@example.com")

    with pytest.raises(NotFoundError):
        registrations_service.register(db_session, first, uuid.uuid4())

    registrations_service.register(db_session, first, event.id)
    with pytest.raises(AlreadyRegisteredError):
        registrations_service.register(db_session, first, event.id)
    with pytest.raises(CapacityReachedError):
        registrations_service.register(db_session, second, event.id)


def test_duplicate_check_precedes_capacity_check(db_session, make_user, make_event):
    event = make_event(capacity=1)
    user = make_user("full@example.com")
    registrations_service.register(db_session, user, event.id)

    with pytest.raises(AlreadyRegisteredError):
        registrations_service.register(db_session, user, event.id)


def test_cancel_frees_exactly_one_slot(db_session, make_user, make_event):
    event = make_event(capacity=2)
    a = make_user("ca@example.com")
    b = make_user("cb@example.com")
    reg_a = registrations_service.register(db_session, a, event.id)
    registrations_service.register(db_session, b, event.id)
    assert events_service.confirmed_count(db_session, event.id) == 2

    reg_a_id = reg_a.id
    registrations_service.cancel(db_session, reg_a_id, a)

    assert events_service.confirmed_count(db_session, event.id) == 1
    assert db_session.get(Registration, reg_a_id) is None
    registrations_service.register(db_session, a, event.id)
    assert events_service.confirmed_count(db_session, event.id) == 2


def test_cancel_authorization(db_session, admin, make_user, make_event):
    event = make_event()
    owner = make_user("own@example.com")
    stranger = make_user("stranger@example.com")
    reg_id = registrations_service.register(db_session, owner, event.id).id

    with pytest.raises(PermissionDeniedError):
        registrations_service.cancel(db_session, reg_id, stranger)

    registrations_service.cancel(db_session, reg_id, admin)
    with pytest.raises(NotFoundError):
        registrations_service.cancel(db_session, reg_id, admin)


def test_list_views(db_session, make_user, make_event):
    event = make_event(capacity=5, title="Listed")
    a = make_user("la@example.com")
    b = make_user("lb@example.com")
    registrations_service.register(db_session, a, event.id)
    registrations_service.register(db_session, b, event.id)

    mine = registrations_service.my_registrations(db_session, a)
    assert len(mine) == 1
    assert mine[0].event.title == "Listed"
    assert mine[0].user.email == "la@example.com"
    assert len(registrations_service.list_all(db_session)) == 2


def test_create_event_validation(db_session, admin):
    with pytest.raises(ValidationError):
        events_service.create_event(db_session, admin, EventCreate(title="only title"))
    with pytest.raises(ValidationError):
        events_service.create_event(
            db_session,
            admin,
            EventCreate(
                title="t",
                description="d",
                date=datetime(2031, 1, 1, tzinfo=timezone.utc),
                location="l",
                capacity=0,
            ),
        )


def test_update_distinguishes_absent_from_empty(db_session, make_event):
    event = make_event(title="Keep")
    updated = events_service.update_event(db_session, event.id, EventUpdate(location="New Hall"))
    assert updated.title == "Keep"
    assert updated.location == "New Hall"

    with pytest.raises(ValidationError):
        events_service.update_event(db_session, event.id, EventUpdate(title=""))


def test_delete_event_cascades_registrations(db_session, make_user, make_event):
    event = make_event()
    user = make_user("gone@example.com")
    registrations_service.register(db_session, user, event.id)

    events_service.delete_event(db_session, event.id)

    assert registrations_service.my_registrations(db_session, user) == []
    with pytest.raises(NotFoundError):
        events_service.get_event(db_session, event.id)
