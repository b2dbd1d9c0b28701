"""Time clock entry schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ponto_auth.models.point import PointKind


class PointRead(BaseModel):
    """Serialized time clock entry."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    kind: PointKind
    recorded_at: datetime
    note: str | None = None
