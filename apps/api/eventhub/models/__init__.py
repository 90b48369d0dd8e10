from eventhub.models.base import Base
from eventhub.models.registration import Registration, RegistrationStatus
from eventhub.models.event import Event
from eventhub.models.user import User, UserRole

__all__ = ["Base", "User", "UserRole", "Event", "Registration", "RegistrationStatus"]
