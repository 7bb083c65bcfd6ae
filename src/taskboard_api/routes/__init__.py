"""Route initialization module."""

from fastapi import APIRouter

from taskboard_api.routes.health import router as health_router
from taskboard_api.routes.task import router as task_router
from taskboard_api.routes.user import router as user_router

# Routes are served at the root, no /api prefix
api_router = APIRouter()

# Include sub-routers
api_router.include_router(health_router)
api_router.include_router(user_router)
api_router.include_router(task_router)


__all__ = ["api_router"]
