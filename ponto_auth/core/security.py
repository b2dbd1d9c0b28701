"""Security utilities for hashing, JWT handling and reset tokens."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from ponto_auth.core.config import get_settings

settings = get_settings()

BCRYPT_MAX_BYTES = 72
RESET_TOKEN_BYTES = 32


def _check_bcrypt_len(password: str) -> bytes:
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password too long (bcrypt max {BCRYPT_MAX_BYTES} bytes)")
    return encoded


def get_password_hash(password: str, rounds: int | None = None) -> str:
    """Hash a password for storage using bcrypt."""
    encoded = _check_bcrypt_len(password)
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(encoded, salt).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its hash using bcrypt."""
    try:
        return bcrypt.checkpw(
            _check_bcrypt_len(plain_password), hashed_password.encode()
        )
    except (ValueError, TypeError, AttributeError):  # malformed hash or input
        return False


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed session token for a user."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    issued_at = datetime.now(UTC)
    claims: dict[str, Any] = {
        "userId": user_id,
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode a JWT token, raising JWTError on failure."""
    return jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )


def verify_access_token(token: str) -> str | None:
    """Return the user id carried by a valid token, otherwise None."""
    try:
        payload = decode_access_token(token)
    except JWTError:
        return None
    user_id = payload.get("userId") or payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        return None
    return user_id


def generate_reset_token() -> str:
    """Return a random opaque reset token (64 hex characters)."""
    return secrets.token_hex(RESET_TOKEN_BYTES)
