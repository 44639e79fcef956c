"""Tests for the uniform JSON error body produced by the API."""

import pytest
from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient

from leaseify.config import Settings
from leaseify.main import create_app
from leaseify.presentation.error_handlers import STACK_PLACEHOLDER


def _app_with_failing_route(app_env: str = "development"):
    app = create_app(Settings(app_env=app_env))
    router = APIRouter()

    @router.get("/api/boom")
    async def boom():
        raise RuntimeError("Database unavailable")

    app.include_router(router)
    return app


def _client(app) -> AsyncClient:
    # unhandled errors are re-raised by Starlette after the response is sent
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
async def test_unknown_path_is_404_naming_the_path():
    async with _client(create_app(Settings())) as client:
        response = await client.get("/api/nope")

    assert response.status_code == 404
    body = response.json()
    assert body["message"] == "Not Found - /api/nope"
    assert "stack" in body


@pytest.mark.asyncio
async def test_unknown_path_message_keeps_query_string():
    async with _client(create_app(Settings())) as client:
        response = await client.get("/api/nope?page=2")

    assert response.json()["message"] == "Not Found - /api/nope?page=2"


@pytest.mark.asyncio
async def test_unhandled_error_is_500_with_its_message():
    async with _client(_app_with_failing_route()) as client:
        response = await client.get("/api/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Database unavailable"
    assert "RuntimeError" in body["stack"]


@pytest.mark.asyncio
async def test_production_hides_stack():
    async with _client(_app_with_failing_route("production")) as client:
        response = await client.get("/api/boom")

    assert response.status_code == 500
    assert response.json() == {"message": "Database unavailable", "stack": STACK_PLACEHOLDER}


@pytest.mark.asyncio
async def test_task_without_title_is_400_with_field_errors():
    async with _client(create_app(Settings(app_env="production"))) as client:
        response = await client.post("/api/landlord/tasks/", json={})

    assert response.status_code == 400
    assert response.json() == {
        "message": "Title is required",
        "stack": STACK_PLACEHOLDER,
        "errors": ["title: Title is required"],
    }


@pytest.mark.asyncio
async def test_malformed_body_is_400_validation_failed():
    async with _client(create_app(Settings())) as client:
        response = await client.put("/api/landlord/tasks/t1", json={"isCompleted": "maybe"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["errors"] and body["errors"][0].startswith("isCompleted")


@pytest.mark.asyncio
async def test_route_level_not_found_keeps_its_message():
    async with _client(create_app(Settings())) as client:
        response = await client.put("/api/landlord/tasks/missing", json={"isCompleted": True})

    assert response.status_code == 404
    assert response.json()["message"] == "Task not found"
