"""Top-level API router — versioned sub-routers plus the landlord routes."""

from fastapi import APIRouter

from leaseify.presentation.api.v1.router import router as v1_router
from leaseify.presentation.api.v1.endpoints.tasks import router as tasks_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
router.include_router(tasks_router)
