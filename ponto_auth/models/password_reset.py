"""Password reset request model."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from ponto_auth.db.base import Base


class PasswordResetRequest(Base):
    """One outstanding reset token issued for an email address.

    Several rows may exist for the same email; a reset validates against the
    most recently created row matching the submitted (email, token) pair.
    """

    __tablename__ = "password_resets"
    __table_args__ = (
        Index("ix_password_resets_email_token", "email", "token"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    token: Mapped[str] = mapped_column(String(128), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __repr__(self) -> str:
        return f"PasswordResetRequest(id={self.id!s}, expires_at={self.expires_at!s})"
