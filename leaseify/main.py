"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leaseify.config import Settings, get_settings
from leaseify.infrastructure.logging.log_config import setup_logging
from leaseify.infrastructure.repositories import InMemoryTaskRepository
from leaseify.presentation.api.router import router as api_router
from leaseify.presentation.error_handlers import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and announce the environment."""
    settings: Settings = app.state.settings
    setup_logging(settings)
    logger.info(
        "%s %s starting (env=%s)",
        settings.app_title,
        settings.app_version,
        settings.app_env,
    )
    yield
    logger.info("%s shutting down", settings.app_title)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.task_repository = InMemoryTaskRepository()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    # Not-found and final error stages
    register_error_handlers(app, production=settings.is_production)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "leaseify.main:app",
        host="0.0.0.0",
        port=5001,
        reload=True,
    )
