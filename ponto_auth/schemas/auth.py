"""Authentication schemas."""
from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Generic acknowledgement body."""

    message: str


class RegistrationRequest(BaseModel):
    """Registration payload; presence of fields is checked by the workflow."""

    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    """Login payload."""

    email: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    """Session token issued after a successful login."""

    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_id: uuid.UUID = Field(alias="userId")
    message: str


class PasswordForgotRequest(BaseModel):
    """Request body to initiate a password reset."""

    email: str | None = None


class PasswordResetConfirm(BaseModel):
    """Payload to finalize a password reset."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    token: str | None = None
    new_password: str | None = Field(default=None, alias="newPassword")


class SessionRead(BaseModel):
    """Identity carried by a verified session token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: uuid.UUID = Field(alias="userId")
