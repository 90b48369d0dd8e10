from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from eventhub.api.schemas.common import SchemaBase
from eventhub.models import UserRole


class RegisterIn(SchemaBase):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=1)
    role: UserRole | None = None


class LoginIn(SchemaBase):
    # Malformed addresses simply fail the lookup
    email: str
    password: str = Field(min_length=1)


class UserOut(SchemaBase):
    id: UUID
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime


class AuthOut(SchemaBase):
    id: UUID
    name: str
    email: str
    role: UserRole
    token: str
    token_type: str = "bearer"
    expires_in: int
