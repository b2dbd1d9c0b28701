"""Registration, login and password reset workflows.

Each workflow is one linear pass over the credential store. It either
returns its result or raises exactly one :class:`AuthWorkflowError`; nothing
is retried or rolled back. A reset row written by :func:`forgot_password`
stays in place even when the email cannot be delivered.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from ponto_auth.core.config import get_settings
from ponto_auth.core.errors import (
    AlreadyExists,
    Expired,
    InvalidCredentials,
    InvalidInput,
    InvalidOrExpiredToken,
    NotFound,
    NotificationError,
)
from ponto_auth.core.security import (
    create_access_token,
    generate_reset_token,
    get_password_hash,
    verify_password,
)
from ponto_auth.models import PasswordResetRequest, User
from ponto_auth.security.redact import mask_email, mask_token
from ponto_auth.services import credential_store, notification_service
from ponto_auth.services.email_service import MailDeliveryError, Mailer

logger = logging.getLogger(__name__)


def _require(*values: str | None) -> None:
    if any(not value for value in values):
        raise InvalidInput()


def _coerce_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


async def _hash(password: str) -> str:
    try:
        return await asyncio.to_thread(get_password_hash, password)
    except ValueError as exc:
        raise InvalidInput("Senha muito longa (máximo 72 bytes)") from exc


async def register(
    session: AsyncSession, *, email: str | None, password: str | None
) -> User:
    """Create a user unless the email is already taken."""
    _require(email, password)
    existing = await credential_store.get_user_by_email(session, email)
    if existing is not None:
        raise AlreadyExists()

    hashed = await _hash(password)
    user = await credential_store.create_user(
        session, email=email, hashed_password=hashed
    )
    logger.info("Registered user %s", user.id)
    return user


async def login(
    session: AsyncSession, *, email: str | None, password: str | None
) -> tuple[str, User]:
    """Check credentials and return a fresh session token with its user."""
    if not email or not password:
        raise InvalidInput("Email e senha são obrigatórios.")

    user = await credential_store.get_user_by_email(session, email)
    if user is None:
        raise NotFound("Email não cadastrado")

    matches = await asyncio.to_thread(verify_password, password, user.hashed_password)
    if not matches:
        logger.info("Rejected password for user %s", user.id)
        raise InvalidCredentials()

    return create_access_token(str(user.id)), user


async def forgot_password(
    session: AsyncSession,
    mailer: Mailer,
    *,
    email: str | None,
    now: datetime | None = None,
) -> PasswordResetRequest:
    """Issue a reset token for ``email`` and mail the reset link.

    Tokens issued earlier for the same email are left valid.
    """
    _require(email)
    user = await credential_store.get_user_by_email(session, email)
    if user is None:
        raise NotFound()

    settings = get_settings()
    issued_at = _coerce_utc(now or datetime.now(UTC))
    ttl = timedelta(minutes=settings.password_reset_ttl_minutes)
    record = await credential_store.add_reset_request(
        session,
        email=email,
        token=generate_reset_token(),
        created_at=issued_at,
        expires_at=issued_at + ttl,
    )

    reset_url = notification_service.build_reset_url(
        frontend_url=settings.frontend_url,
        page=settings.reset_page,
        token=record.token,
        email=email,
    )
    message = notification_service.build_password_reset_email(
        to=email,
        reset_url=reset_url,
        ttl_minutes=settings.password_reset_ttl_minutes,
    )
    try:
        await mailer.send(message)
    except MailDeliveryError as exc:
        logger.error(
            "Password reset email to %s failed: %s", mask_email(email), exc
        )
        raise NotificationError() from exc

    logger.info("Password reset requested for user %s", user.id)
    return record


async def reset_password(
    session: AsyncSession,
    *,
    email: str | None,
    token: str | None,
    new_password: str | None,
    now: datetime | None = None,
) -> None:
    """Consume a reset token and store the new password hash."""
    _require(email, token, new_password)

    record = await credential_store.get_latest_reset_request(
        session, email=email, token=token
    )
    if record is None:
        logger.info(
            "Rejected reset token %s for %s", mask_token(token), mask_email(email)
        )
        raise InvalidOrExpiredToken()

    current = _coerce_utc(now or datetime.now(UTC))
    if current > _coerce_utc(record.expires_at):
        raise Expired()

    hashed = await _hash(new_password)
    await credential_store.update_password_by_email(
        session, email=email, hashed_password=hashed
    )
    removed = await credential_store.delete_reset_requests(
        session, email=email, token=token
    )
    logger.info(
        "Password reset completed for %s (%d token row(s) removed)",
        mask_email(email),
        removed,
    )
