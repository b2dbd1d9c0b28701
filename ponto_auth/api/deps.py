"""Common API dependencies."""

from __future__ import annotations

import uuid
from typing import Annotated
from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ponto_auth.core.errors import Unauthorized
from ponto_auth.core.security import verify_access_token
from ponto_auth.db.session import get_session
from ponto_auth.services.email_service import Mailer

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


def get_mailer(request: Request) -> Mailer:
    """Return the mailer built during application startup."""
    return request.app.state.mailer


async def get_current_user_id(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> uuid.UUID:
    """Authenticate the request via its bearer session token."""
    if credentials is None:
        raise Unauthorized()
    subject = verify_access_token(credentials.credentials)
    if subject is None:
        raise Unauthorized()
    try:
        return uuid.UUID(subject)
    except ValueError as exc:
        raise Unauthorized() from exc
