from __future__ import annotations

from fastapi import APIRouter

from eventhub.api.schemas import AuthOut, LoginIn, RegisterIn, UserOut
from eventhub.auth.deps import AppSettings, CurrentUser, DBSession
from eventhub.auth.jwt import issue_token
from eventhub.core.config import Settings
from eventhub.models import User, UserRole
from eventhub.services import users_service

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_out(user: User, config: Settings) -> AuthOut:
    token = issue_token(
        user.id,
        secret=config.jwt_secret,
        ttl_seconds=config.access_token_ttl_seconds,
        algorithm=config.jwt_algorithm,
    )
    return AuthOut(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        token=token,
        expires_in=config.access_token_ttl_seconds,
    )


@router.post("/register", response_model=AuthOut, status_code=201)
def register(payload: RegisterIn, db: DBSession, config: AppSettings):
    user = users_service.create_user(
        db,
        name=payload.name,
        email=payload.email,
        raw_password=payload.password,
        role=payload.role or UserRole.USER,
        time_cost=config.password_time_cost,
    )
    return _auth_out(user, config)


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, db: DBSession, config: AppSettings):
    user = users_service.authenticate(db, payload.email, payload.password)
    return _auth_out(user, config)


@router.get("/me", response_model=UserOut)
def me(user: CurrentUser):
    return UserOut.model_validate(user)
