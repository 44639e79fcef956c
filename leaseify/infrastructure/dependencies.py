"""Dependency wiring — FastAPI providers and the client-side store factory."""

from collections.abc import AsyncGenerator

import httpx
from fastapi import Request

from leaseify.application.services import TaskService
from leaseify.application.state import AppStore
from leaseify.config import Settings, get_settings
from leaseify.infrastructure.leaseify_api import LeaseifyApiClient


async def get_task_service(request: Request) -> AsyncGenerator[TaskService, None]:
    """Provides a TaskService bound to the app's task repository."""
    yield TaskService(request.app.state.task_repository)


def build_app_store(
    settings: Settings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> AppStore:
    """Create the root client-side store talking to the configured REST API."""
    settings = settings or get_settings()
    transport = LeaseifyApiClient(
        settings.api_base_url,
        token=settings.api_token,
        timeout=settings.request_timeout,
        http_client=http_client,
    )
    return AppStore(transport)
