"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from leaseify.config import Settings
from leaseify.main import create_app


async def _get_health(settings: Settings) -> dict:
    transport = ASGITransport(app=create_app(settings))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_health_reports_service_and_backend():
    """Health names the service, its version and the REST backend it fronts."""
    data = await _get_health(
        Settings(app_version="2.3.1", api_base_url="http://backend.test/api")
    )

    assert data == {
        "status": "healthy",
        "service": "Leaseify API",
        "version": "2.3.1",
        "environment": "development",
        "production": False,
        "backend": "http://backend.test/api/",
    }


@pytest.mark.asyncio
async def test_health_flags_production_environment():
    data = await _get_health(Settings(app_env="Production"))

    assert data["environment"] == "Production"
    assert data["production"] is True
