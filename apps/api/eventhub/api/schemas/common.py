from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class SchemaBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class UserRef(SchemaBase):
    id: UUID
    name: str
    email: str


class MessageOut(SchemaBase):
    message: str
