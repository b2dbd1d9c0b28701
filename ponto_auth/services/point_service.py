"""Read access to time clock entries."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ponto_auth.core.errors import ResourceNotFound, StoreError
from ponto_auth.models import Point

logger = logging.getLogger(__name__)


async def list_points_by_user(session: AsyncSession, user_id: uuid.UUID) -> list[Point]:
    """Return the user's entries, newest first.

    An empty result is reported as :class:`ResourceNotFound`, which the
    time clock client relies on to show its "no records" state.
    """
    try:
        result = await session.execute(
            select(Point)
            .where(Point.user_id == user_id)
            .order_by(Point.recorded_at.desc())
        )
        points = list(result.scalars().all())
    except SQLAlchemyError as exc:
        logger.exception("Point lookup failed for %s", user_id)
        raise StoreError() from exc
    if not points:
        raise ResourceNotFound("Nenhum ponto encontrado para este usuário")
    return points
