"""Typed failures raised by the authentication workflows."""

from __future__ import annotations

import enum

from fastapi import status


class ErrorKind(str, enum.Enum):
    """Failure categories surfaced by the workflows."""

    INVALID_INPUT = "invalid_input"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"
    EXPIRED = "expired"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    STORE_ERROR = "store_error"
    NOTIFICATION_ERROR = "notification_error"


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_OR_EXPIRED_TOKEN: status.HTTP_400_BAD_REQUEST,
    ErrorKind.EXPIRED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.NOTIFICATION_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    """Map a failure kind to its HTTP status code."""
    return _STATUS_BY_KIND[kind]


class AuthWorkflowError(Exception):
    """Base class for workflow failures carrying a client-safe message."""

    kind: ErrorKind = ErrorKind.STORE_ERROR
    default_message = "Erro no servidor"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return status_for(self.kind)


class InvalidInput(AuthWorkflowError):
    kind = ErrorKind.INVALID_INPUT
    default_message = "Dados incompletos"


class AlreadyExists(AuthWorkflowError):
    kind = ErrorKind.ALREADY_EXISTS
    default_message = "Usuário já existe"


class NotFound(AuthWorkflowError):
    """Unknown email during an auth flow (reported as a client error)."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Usuário não encontrado"


class ResourceNotFound(AuthWorkflowError):
    """Lookup by id returned nothing."""

    kind = ErrorKind.RESOURCE_NOT_FOUND
    default_message = "Registro não encontrado"


class InvalidCredentials(AuthWorkflowError):
    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Senha incorreta."


class InvalidOrExpiredToken(AuthWorkflowError):
    kind = ErrorKind.INVALID_OR_EXPIRED_TOKEN
    default_message = "Token inválido ou expirado"


class Expired(AuthWorkflowError):
    kind = ErrorKind.EXPIRED
    default_message = "Token expirado"


class Unauthorized(AuthWorkflowError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Token de sessão inválido"


class RateLimited(AuthWorkflowError):
    kind = ErrorKind.RATE_LIMITED
    default_message = "Muitas tentativas. Tente novamente mais tarde."

    def __init__(
        self, message: str | None = None, *, retry_after: int | None = None
    ) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class StoreError(AuthWorkflowError):
    kind = ErrorKind.STORE_ERROR
    default_message = "Erro no servidor"


class NotificationError(AuthWorkflowError):
    kind = ErrorKind.NOTIFICATION_ERROR
    default_message = "Erro ao enviar e-mail!"


__all__ = [
    "AlreadyExists",
    "AuthWorkflowError",
    "ErrorKind",
    "Expired",
    "InvalidCredentials",
    "InvalidInput",
    "InvalidOrExpiredToken",
    "NotFound",
    "NotificationError",
    "RateLimited",
    "ResourceNotFound",
    "StoreError",
    "Unauthorized",
    "status_for",
]
