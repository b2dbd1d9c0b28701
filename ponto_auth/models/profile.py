"""Profile details keyed by user id."""

from __future__ import annotations

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ponto_auth.db.base import Base
from ponto_auth.models.mixins import TimestampMixin


class Profile(TimestampMixin, Base):
    """Contact and tax details shown on the profile page."""

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    cpf: Mapped[str] = mapped_column(String(32), nullable=False)
    telefone: Mapped[str] = mapped_column(String(32), nullable=False)
