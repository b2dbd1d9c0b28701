"""Seed a local user (and optionally its profile) for manual testing.

Usage: ``python scripts/dev_seed_user.py [email] [password]``
"""
from __future__ import annotations

import asyncio
import sys

from ponto_auth.core.config import get_settings
from ponto_auth.core.security import get_password_hash
from ponto_auth.db.session import dispose_engine, get_sessionmaker
from ponto_auth.models import Profile
from ponto_auth.services import credential_store

EMAIL = "dev@ponto.local"
PASSWORD = "dev12345"


async def main(email: str, password: str) -> None:
    settings = get_settings()
    sessionmaker = get_sessionmaker(settings.database_url)
    async with sessionmaker() as session:
        if await credential_store.get_user_by_email(session, email):
            print(f"User {email} already exists")
            return

        user = await credential_store.create_user(
            session, email=email, hashed_password=get_password_hash(password)
        )
        session.add(
            Profile(
                id=user.id,
                name="Dev User",
                email=email,
                cpf="000.000.000-00",
                telefone="(00) 00000-0000",
            )
        )
        await session.commit()
        print(f"Created {email} with id {user.id}")
    await dispose_engine(settings.database_url)


if __name__ == "__main__":
    args = sys.argv[1:]
    asyncio.run(
        main(args[0] if args else EMAIL, args[1] if len(args) > 1 else PASSWORD)
    )
