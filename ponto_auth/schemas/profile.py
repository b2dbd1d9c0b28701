"""Profile schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


class ProfileRead(BaseModel):
    """Serialized profile."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    cpf: str
    telefone: str


class ProfileUpdate(BaseModel):
    """Full replacement of a profile; every field is required by the workflow."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    name: str | None = None
    email: str | None = None
    cpf: str | None = None
    telefone: str | None = None


class ProfileUpdateResponse(BaseModel):
    message: str
    data: ProfileRead
