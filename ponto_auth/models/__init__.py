"""ORM models package export."""

from ponto_auth.models.password_reset import PasswordResetRequest
from ponto_auth.models.point import Point, PointKind
from ponto_auth.models.profile import Profile
from ponto_auth.models.user import User

__all__ = [
    "PasswordResetRequest",
    "Point",
    "PointKind",
    "Profile",
    "User",
]
