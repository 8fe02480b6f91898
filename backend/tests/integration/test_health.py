"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from proflow.config import get_settings
from proflow.main import app


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint reports service metadata without touching Firebase or the database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    settings = get_settings()
    assert data["status"] == "healthy"
    assert data["service"] == settings.app_title
    assert data["version"] == settings.app_version
    assert data["identityCredentials"] in {"service_account", "application_default"}
