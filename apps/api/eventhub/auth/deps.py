from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from eventhub.auth.jwt import InvalidTokenError, verify_token
from eventhub.core.config import Settings
from eventhub.db import get_db
from eventhub.models import User, UserRole
from eventhub.services import users_service
from eventhub.services.error_codes import ErrorCode
from eventhub.services.exceptions import PermissionDeniedError, UnauthorizedError

logger = structlog.get_logger(__name__)

DBSession = Annotated[Session, Depends(get_db)]


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_settings)]


def get_current_user(request: Request, db: DBSession, config: AppSettings) -> User:
    auth = request.headers.get("Authorization", "")
    token = auth.removeprefix("Bearer ").strip() if auth.startswith("Bearer ") else ""
    if not token:
        raise UnauthorizedError(ErrorCode.NO_TOKEN.value, "not authorized, no token")

    try:
        user_id = verify_token(token, secret=config.jwt_secret, algorithm=config.jwt_algorithm)
    except InvalidTokenError as exc:
        logger.info("token_rejected", reason=str(exc))
        raise UnauthorizedError(
            ErrorCode.TOKEN_FAILED.value, "not authorized, token failed"
        ) from exc

    user = users_service.find_by_id(db, user_id)
    if not user:
        raise UnauthorizedError(ErrorCode.USER_NOT_FOUND.value, "not authorized, user not found")

    request.state.user = user
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def require_role(role: UserRole):
    def _check(user: CurrentUser) -> User:
        if user.role != role:
            raise PermissionDeniedError(
                ErrorCode.FORBIDDEN.value, f"not authorized as {role.value}"
            )
        return user

    return _check


AdminUser = Annotated[User, Depends(require_role(UserRole.ADMIN))]
