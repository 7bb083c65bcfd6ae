"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from taskboard_api.config import get_settings
from taskboard_api.errors import register_exception_handlers
from taskboard_api.middleware import setup_middleware
from taskboard_api.routes import api_router
from taskboard_api.services import get_engine, reset_services
from taskboard_api.services.database_init import initialize_database

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    # Startup
    logger.info("%s v%s started", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.environment)
    logger.info("Log level: %s", settings.log_level)

    logger.info("Initializing database...")
    await initialize_database(settings, get_engine(settings))

    yield

    # Shutdown
    reset_services()
    logger.info("%s shutting down", settings.app_name)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Taskboard - users and tasks CRUD service",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)

# Setup middleware (must be before exception handlers)
setup_middleware(app, origins=settings.cors_allow_origins)

register_exception_handlers(app, cors_origins=settings.cors_allow_origins)

# Include routers
app.include_router(api_router)


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "taskboard_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
