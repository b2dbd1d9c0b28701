"""Data access for users and password reset requests.

Every helper is a single statement followed by a commit. SQLAlchemy failures
are logged here with their detail and re-raised as :class:`StoreError`, so
callers only ever see the typed workflow errors.
"""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ponto_auth.core.errors import AlreadyExists, StoreError
from ponto_auth.models import PasswordResetRequest, User
from ponto_auth.security.redact import mask_email

logger = logging.getLogger(__name__)


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    """Return the user registered under ``email`` (exact match)."""
    try:
        result = await session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.exception("User lookup failed for %s", mask_email(email))
        raise StoreError() from exc


async def create_user(session: AsyncSession, *, email: str, hashed_password: str) -> User:
    """Persist a new user."""
    user = User(email=email, hashed_password=hashed_password)
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("Concurrent registration for %s", mask_email(email))
        raise AlreadyExists() from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("User insert failed for %s", mask_email(email))
        raise StoreError() from exc
    await session.refresh(user)
    return user


async def update_password_by_email(
    session: AsyncSession, *, email: str, hashed_password: str
) -> int:
    """Replace the stored hash for ``email``; return the number of rows touched."""
    try:
        result = await session.execute(
            update(User)
            .where(User.email == email)
            .values(hashed_password=hashed_password)
        )
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Password update failed for %s", mask_email(email))
        raise StoreError() from exc
    return result.rowcount


async def add_reset_request(
    session: AsyncSession,
    *,
    email: str,
    token: str,
    created_at: datetime,
    expires_at: datetime,
) -> PasswordResetRequest:
    """Store a new reset token; earlier tokens for the email stay valid."""
    record = PasswordResetRequest(
        email=email, token=token, created_at=created_at, expires_at=expires_at
    )
    session.add(record)
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Reset request insert failed for %s", mask_email(email))
        raise StoreError() from exc
    return record


async def get_latest_reset_request(
    session: AsyncSession, *, email: str, token: str
) -> PasswordResetRequest | None:
    """Return the newest reset request matching (email, token), if any."""
    try:
        result = await session.execute(
            select(PasswordResetRequest)
            .where(
                PasswordResetRequest.email == email,
                PasswordResetRequest.token == token,
            )
            .order_by(PasswordResetRequest.created_at.desc())
            .limit(1)
        )
        return result.scalars().first()
    except SQLAlchemyError as exc:
        logger.exception("Reset request lookup failed for %s", mask_email(email))
        raise StoreError() from exc


async def delete_reset_requests(session: AsyncSession, *, email: str, token: str) -> int:
    """Delete every reset request matching (email, token)."""
    try:
        result = await session.execute(
            delete(PasswordResetRequest).where(
                PasswordResetRequest.email == email,
                PasswordResetRequest.token == token,
            )
        )
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Reset request delete failed for %s", mask_email(email))
        raise StoreError() from exc
    return result.rowcount
