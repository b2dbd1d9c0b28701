"""Profile lookup and replacement."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ponto_auth.core.errors import InvalidInput, ResourceNotFound, StoreError
from ponto_auth.models import Profile

logger = logging.getLogger(__name__)

_PROFILE_FIELDS = ("name", "email", "cpf", "telefone")


def parse_user_id(raw: str | uuid.UUID | None) -> uuid.UUID:
    """Parse a user identifier, rejecting anything that is not a UUID."""
    if isinstance(raw, uuid.UUID):
        return raw
    if not raw:
        raise InvalidInput()
    try:
        return uuid.UUID(str(raw))
    except ValueError as exc:
        raise InvalidInput("Identificador de usuário inválido") from exc


async def get_profile(session: AsyncSession, user_id: uuid.UUID) -> Profile:
    """Return the profile stored for ``user_id``."""
    try:
        result = await session.execute(select(Profile).where(Profile.id == user_id))
        profile = result.scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.exception("Profile lookup failed for %s", user_id)
        raise StoreError() from exc
    if profile is None:
        raise ResourceNotFound("Perfil não encontrado")
    return profile


async def upsert_profile(
    session: AsyncSession,
    *,
    user_id: str | uuid.UUID | None,
    name: str | None,
    email: str | None,
    cpf: str | None,
    telefone: str | None,
) -> Profile:
    """Create the profile for ``user_id`` or replace every field of it."""
    values = {"name": name, "email": email, "cpf": cpf, "telefone": telefone}
    if any(not values[field] for field in _PROFILE_FIELDS):
        raise InvalidInput("Todos os campos são obrigatórios")
    profile_id = parse_user_id(user_id)

    try:
        profile = await session.get(Profile, profile_id)
        if profile is None:
            profile = Profile(id=profile_id, **values)
            session.add(profile)
        else:
            for field, value in values.items():
                setattr(profile, field, value)
        await session.commit()
        await session.refresh(profile)
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Profile upsert failed for %s", profile_id)
        raise StoreError() from exc
    return profile
