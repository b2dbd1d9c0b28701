"""Time clock entry endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ponto_auth.api.deps import get_db_session
from ponto_auth.schemas.point import PointRead
from ponto_auth.services import point_service, profile_service

router = APIRouter()


@router.get(
    "/points/{user_id}", response_model=list[PointRead], summary="List user points"
)
async def list_points(
    user_id: str,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> list[PointRead]:
    points = await point_service.list_points_by_user(
        session, profile_service.parse_user_id(user_id)
    )
    return [PointRead.model_validate(point) for point in points]
