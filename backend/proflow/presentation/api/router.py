"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from proflow.presentation.api.endpoints.admin import router as admin_router
from proflow.presentation.api.endpoints.directory import router as directory_router
from proflow.presentation.api.endpoints.health import router as health_router
from proflow.presentation.api.endpoints.notifications import router as notifications_router
from proflow.presentation.api.endpoints.tasks import router as tasks_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(admin_router)
router.include_router(tasks_router)
router.include_router(notifications_router)
router.include_router(directory_router)
