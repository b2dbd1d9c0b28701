"""Test fixtures for the ponto-auth backend."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("FRONTEND_URL", "https://reset.example.com")
os.environ.setdefault("RESET_PAGE", "reset.html")

from ponto_auth.api.deps import get_mailer
from ponto_auth.core.config import get_settings
from ponto_auth.db.base import Base
from ponto_auth.db.session import dispose_engine, get_sessionmaker
from ponto_auth.main import app
from ponto_auth.services.email_service import MailDeliveryError, OutgoingEmail


class RecordingMailer:
    """Mailer double that keeps sent messages in memory."""

    def __init__(self) -> None:
        self.sent: list[OutgoingEmail] = []
        self.fail = False

    async def send(self, email: OutgoingEmail) -> None:
        if self.fail:
            raise MailDeliveryError("relay refused connection")
        self.sent.append(email)


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def session(reset_database: None, db_url: str) -> AsyncIterator[AsyncSession]:
    """Yield a session bound to the freshly created schema."""
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as db_session:
        yield db_session


@pytest.fixture()
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest_asyncio.fixture()
async def app_context(
    reset_database: None, db_url: str, mailer: RecordingMailer
) -> AsyncIterator[dict[str, object]]:
    """Yield an async client wired to the recording mailer."""
    app.dependency_overrides[get_mailer] = lambda: mailer
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield {"client": client, "mailer": mailer, "db_url": db_url}
    finally:
        app.dependency_overrides.pop(get_mailer, None)
