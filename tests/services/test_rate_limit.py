from __future__ import annotations

import pytest
from fastapi import FastAPI, Request, Response
from httpx import ASGITransport, AsyncClient

from ponto_auth.api.errors import register_exception_handlers
from ponto_auth.api.rate_limit import parse_rate, raise_rate_limited
from ponto_auth.core.errors import RateLimited


def test_parse_rate() -> None:
    assert parse_rate("10/minute", fallback=(1, 1)) == (10, 60)
    assert parse_rate("5 / hours", fallback=(1, 1)) == (5, 3600)
    assert parse_rate("lots", fallback=(100, 60)) == (100, 60)
    assert parse_rate("x/minute", fallback=(100, 60)) == (100, 60)


@pytest.mark.asyncio
async def test_exhausted_window_uses_message_body() -> None:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/limited")
    async def limited(request: Request, response: Response) -> None:
        await raise_rate_limited(request, response, 1500)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/limited")

    assert response.status_code == 429
    assert response.json() == {"message": RateLimited.default_message}
    assert response.headers["Retry-After"] == "2"
