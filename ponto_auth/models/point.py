"""Time clock entries ("pontos") recorded for a user."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from ponto_auth.db.base import Base


class PointKind(str, enum.Enum):
    """Direction of a time clock punch."""

    ENTRADA = "entrada"
    SAIDA = "saida"


class Point(Base):
    __tablename__ = "points"
    __table_args__ = (Index("ix_points_user_recorded", "user_id", "recorded_at"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    kind: Mapped[PointKind] = mapped_column(Enum(PointKind), nullable=False)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    note: Mapped[str | None] = mapped_column(String(512))
