"""Service layer exports."""
from ponto_auth.services import (
    auth_service,
    credential_store,
    email_service,
    notification_service,
    point_service,
    profile_service,
)

__all__ = [
    "auth_service",
    "credential_store",
    "email_service",
    "notification_service",
    "point_service",
    "profile_service",
]
