from fastapi import APIRouter

from eventhub.api.routes.auth import router as auth_router
from eventhub.api.routes.events import router as events_router
from eventhub.api.routes.registrations import router as registrations_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(events_router)
router.include_router(registrations_router)
