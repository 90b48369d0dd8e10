from eventhub.api.schemas.common import MessageOut, UserRef
from eventhub.api.schemas.events import (
    EventCreate,
    EventListItem,
    EventOut,
    EventSummary,
    EventUpdate,
)
from eventhub.api.schemas.registrations import (
    RegistrationCreate,
    RegistrationCreatedOut,
    RegistrationOut,
)
from eventhub.api.schemas.users import AuthOut, LoginIn, RegisterIn, UserOut

__all__ = [
    "MessageOut",
    "UserRef",
    "RegisterIn",
    "LoginIn",
    "UserOut",
    "AuthOut",
    "EventCreate",
    "EventUpdate",
    "EventOut",
    "EventListItem",
    "EventSummary",
    "RegistrationCreate",
    "RegistrationOut",
    "RegistrationCreatedOut",
]
