from eventhub.services import events_service, registrations_service, users_service

__all__ = [
    "users_service",
    "events_service",
    "registrations_service",
]
