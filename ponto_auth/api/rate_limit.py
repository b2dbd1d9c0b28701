"""Optional Redis-backed request throttling."""

from __future__ import annotations

from math import ceil

from fastapi import Depends, Request, Response
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter

from ponto_auth.core.config import get_settings
from ponto_auth.core.errors import RateLimited

_settings = get_settings()

_SECONDS = {
    "second": 1,
    "seconds": 1,
    "minute": 60,
    "minutes": 60,
    "hour": 3600,
    "hours": 3600,
    "day": 86400,
    "days": 86400,
}


def parse_rate(value: str, *, fallback: tuple[int, int]) -> tuple[int, int]:
    """Parse ``"10/minute"`` into ``(10, 60)``; malformed values use ``fallback``."""
    count_str, sep, window_str = value.partition("/")
    if not sep:
        return fallback
    try:
        count = int(count_str.strip())
    except ValueError:
        return fallback
    return count, _SECONDS.get(window_str.strip().lower(), fallback[1])


async def raise_rate_limited(
    request: Request, response: Response, pexpire: int
) -> None:
    """Limiter callback: report an exhausted window as a typed error."""
    raise RateLimited(retry_after=ceil(pexpire / 1000))


def rate_dependency(limit: tuple[int, int]):
    """Build a dependency enforcing ``limit`` when the limiter is initialised."""

    async def _dependency(request: Request, response: Response) -> None:
        if FastAPILimiter.redis is None:
            return None
        limiter = RateLimiter(
            times=limit[0], seconds=limit[1], callback=raise_rate_limited
        )
        await limiter(request, response)

    return Depends(_dependency)


LOGIN_RATE_DEP = rate_dependency(parse_rate(_settings.rate_limit_login, fallback=(10, 60)))
DEFAULT_RATE_DEP = rate_dependency(
    parse_rate(_settings.rate_limit_default, fallback=(100, 60))
)
