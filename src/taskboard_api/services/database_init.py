"""Database initialization service."""

import logging

from sqlalchemy import Engine

from taskboard_api.config import Settings
from taskboard_common.infra.database import init_schema

logger = logging.getLogger(__name__)


async def initialize_database(settings: Settings, engine: Engine) -> None:
    """Create the schema during application startup.

    Args:
        settings: Application settings
        engine: Engine the services were built on
    """
    try:
        init_schema(engine)
        logger.info("Database initialization completed successfully")
    except Exception as e:
        logger.error("Failed to initialize database: %s", e)
        if settings.environment == "production":
            raise
        # In development, log warning but allow app to continue
        logger.warning("Continuing without database initialization (development mode)")
