"""Service initialization and dependency injection."""

import logging

from fastapi import Depends
from sqlalchemy import Engine

from taskboard_api.config import Settings, get_settings
from taskboard_common.infra.database import create_db_engine
from taskboard_common.services.task_service import SqlTaskService, TaskService
from taskboard_common.services.user_service import SqlUserService, UserService

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache = {}


def get_engine(settings: Settings = Depends(get_settings)) -> Engine:
    """Get the shared SQLAlchemy engine.

    Args:
        settings: Application settings

    Returns:
        Engine bound to ``settings.database_url``
    """
    if "engine" not in _services_cache:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required")

        _services_cache["engine"] = create_db_engine(settings.database_url, echo=settings.database_echo)
        logger.info("Initialized database engine for %s", _services_cache["engine"].url.render_as_string())

    return _services_cache["engine"]


def get_user_service(settings: Settings = Depends(get_settings)) -> UserService:
    """Get SQL user service instance.

    Args:
        settings: Application settings

    Returns:
        SqlUserService instance
    """
    if "user_service" not in _services_cache:
        _services_cache["user_service"] = SqlUserService(get_engine(settings))
        logger.info("Initialized SqlUserService")

    return _services_cache["user_service"]


def get_task_service(settings: Settings = Depends(get_settings)) -> TaskService:
    """Get SQL task service instance.

    Args:
        settings: Application settings

    Returns:
        SqlTaskService instance
    """
    if "task_service" not in _services_cache:
        _services_cache["task_service"] = SqlTaskService(get_engine(settings))
        logger.info("Initialized SqlTaskService")

    return _services_cache["task_service"]


def reset_services() -> None:
    """Dispose the cached engine and drop every cached service."""
    engine = _services_cache.pop("engine", None)
    if engine is not None:
        engine.dispose()
    _services_cache.clear()
