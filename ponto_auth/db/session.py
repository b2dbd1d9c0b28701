"""Engine and session factories for the credential store."""

from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ponto_auth.core.config import get_settings

_engines: dict[str, AsyncEngine] = {}
_sessionmakers: dict[str, async_sessionmaker[AsyncSession]] = {}


def _database_url(override: str | None = None) -> str:
    return override or get_settings().database_url


def _build_engine(url: str) -> AsyncEngine:
    if make_url(url).get_backend_name() == "sqlite":
        return create_async_engine(url)
    return create_async_engine(url, pool_pre_ping=True)


def get_sessionmaker(
    database_url: str | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Return the cached sessionmaker bound to ``database_url``."""
    url = _database_url(database_url)
    factory = _sessionmakers.get(url)
    if factory is None:
        engine = _build_engine(url)
        factory = async_sessionmaker(engine, expire_on_commit=False)
        _engines[url] = engine
        _sessionmakers[url] = factory
    return factory


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield one session per request; it is closed when the request ends."""
    factory = get_sessionmaker()
    async with factory() as session:
        yield session


async def dispose_engine(database_url: str | None = None) -> None:
    """Close the pool behind ``database_url`` and forget its sessionmaker."""
    url = _database_url(database_url)
    _sessionmakers.pop(url, None)
    engine = _engines.pop(url, None)
    if engine is not None:
        await engine.dispose()


async def dispose_all_engines() -> None:
    """Close every cached pool (application shutdown)."""
    for url in list(_engines):
        await dispose_engine(url)
