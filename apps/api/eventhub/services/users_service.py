from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, undefer

from eventhub.auth.password import DEFAULT_TIME_COST, hash_password, verify_password
from eventhub.models import User, UserRole
from eventhub.services._ids import parse_id
from eventhub.services.error_codes import ErrorCode
from eventhub.services.exceptions import DuplicateEmailError, UnauthorizedError, ValidationError

logger = structlog.get_logger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def create_user(
    db: Session,
    name: str,
    email: str,
    raw_password: str,
    role: UserRole = UserRole.USER,
    *,
    time_cost: int = DEFAULT_TIME_COST,
) -> User:
    if not name or not name.strip():
        raise ValidationError(ErrorCode.VALIDATION_ERROR.value, "name is required")
    if not email or not email.strip():
        raise ValidationError(ErrorCode.VALIDATION_ERROR.value, "email is required")
    if not raw_password:
        raise ValidationError(ErrorCode.VALIDATION_ERROR.value, "password is required")

    email = normalize_email(email)
    if find_by_email(db, email):
        raise DuplicateEmailError(ErrorCode.DUPLICATE_EMAIL.value, "user already exists")

    user = User(
        name=name.strip(),
        email=email,
        password_hash=hash_password(raw_password, time_cost=time_cost),
        role=role,
    )
    db.add(user)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateEmailError(ErrorCode.DUPLICATE_EMAIL.value, "user already exists") from exc

    db.refresh(user)
    logger.info("user_created", user_id=str(user.id), role=user.role.value)
    return user


def find_by_email(db: Session, email: str, *, with_password: bool = False) -> User | None:
    stmt = select(User).where(User.email == normalize_email(email))
    if with_password:
        stmt = stmt.options(undefer(User.password_hash))
    return db.scalar(stmt)


def find_by_id(db: Session, user_id: Any) -> User | None:
    uid = parse_id(user_id)
    if uid is None:
        return None
    return db.get(User, uid)


def check_password(user: User, raw_password: str) -> bool:
    return verify_password(raw_password, user.password_hash)


def authenticate(db: Session, email: str, raw_password: str) -> User:
    user = find_by_email(db, email, with_password=True)
    if not user or not check_password(user, raw_password):
        raise UnauthorizedError(
            ErrorCode.INVALID_CREDENTIALS.value, "invalid email or password"
        )
    return user
