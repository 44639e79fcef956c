"""Liveness report for the Leaseify service and the REST backend it fronts."""

from fastapi import APIRouter, Request

from leaseify.config import Settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    settings: Settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "production": settings.is_production,
        "backend": settings.api_base_url,
    }
