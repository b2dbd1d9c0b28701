"""Authentication endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ponto_auth.api.deps import get_current_user_id, get_db_session, get_mailer
from ponto_auth.api.rate_limit import DEFAULT_RATE_DEP, LOGIN_RATE_DEP
from ponto_auth.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PasswordForgotRequest,
    PasswordResetConfirm,
    RegistrationRequest,
    SessionRead,
)
from ponto_auth.services import auth_service
from ponto_auth.services.email_service import Mailer

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    dependencies=[DEFAULT_RATE_DEP],
)
async def register(
    payload: RegistrationRequest,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> MessageResponse:
    await auth_service.register(
        session, email=payload.email, password=payload.password
    )
    return MessageResponse(message="Conta criada com sucesso!")


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Obtain session token",
    dependencies=[LOGIN_RATE_DEP],
)
async def login(
    payload: LoginRequest,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LoginResponse:
    """Validate credentials and issue a one-hour session token."""
    token, user = await auth_service.login(
        session, email=payload.email, password=payload.password
    )
    return LoginResponse(token=token, user_id=user.id, message="Login bem-sucedido!")


@router.post(
    "/forgot",
    response_model=MessageResponse,
    summary="Request password reset",
    dependencies=[DEFAULT_RATE_DEP],
)
async def forgot_password(
    payload: PasswordForgotRequest,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    mailer: Annotated[Mailer, Depends(get_mailer)],
) -> MessageResponse:
    await auth_service.forgot_password(session, mailer, email=payload.email)
    return MessageResponse(message="E-mail enviado com sucesso!")


@router.post(
    "/reset",
    response_model=MessageResponse,
    summary="Confirm password reset",
    dependencies=[DEFAULT_RATE_DEP],
)
async def reset_password(
    payload: PasswordResetConfirm,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> MessageResponse:
    await auth_service.reset_password(
        session,
        email=payload.email,
        token=payload.token,
        new_password=payload.new_password,
    )
    return MessageResponse(message="Senha redefinida com sucesso")


@router.get("/verify", response_model=SessionRead, summary="Verify session token")
async def verify_session(
    user_id: Annotated[uuid.UUID, Depends(get_current_user_id)],
) -> SessionRead:
    return SessionRead(user_id=user_id)
