"""Profile endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ponto_auth.api.deps import get_db_session
from ponto_auth.schemas.profile import ProfileRead, ProfileUpdate, ProfileUpdateResponse
from ponto_auth.services import profile_service

router = APIRouter()


@router.get(
    "/get-profile/{user_id}", response_model=ProfileRead, summary="Get profile"
)
async def get_profile(
    user_id: str,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ProfileRead:
    profile = await profile_service.get_profile(
        session, profile_service.parse_user_id(user_id)
    )
    return ProfileRead.model_validate(profile)


@router.post(
    "/update-profile",
    response_model=ProfileUpdateResponse,
    summary="Create or replace profile",
)
async def update_profile(
    payload: ProfileUpdate,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ProfileUpdateResponse:
    profile = await profile_service.upsert_profile(
        session,
        user_id=payload.user_id,
        name=payload.name,
        email=payload.email,
        cpf=payload.cpf,
        telefone=payload.telefone,
    )
    return ProfileUpdateResponse(
        message="Perfil atualizado com sucesso!",
        data=ProfileRead.model_validate(profile),
    )
