"""Health and root endpoint tests."""

from __future__ import annotations

from typing import Any

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_health_reports_database(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    response = await client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "Ponto Auth API"
    assert body["database"] == "ok"
    assert "timestamp" in body


async def test_root_banner(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Server is running"}
    assert "x-request-id" in {key.lower() for key in response.headers}
