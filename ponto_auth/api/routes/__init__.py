"""Route modules mounted under the API prefix."""

from fastapi import APIRouter

from . import auth, health, points, profile

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(profile.router, prefix="/auth", tags=["profile"])
router.include_router(points.router, prefix="/auth", tags=["points"])
