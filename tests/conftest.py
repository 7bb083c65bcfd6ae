"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine

from taskboard_api.main import app
from taskboard_api.services import get_task_service, get_user_service
from taskboard_common.infra.database import create_db_engine, init_schema
from taskboard_common.services.task_service import SqlTaskService
from taskboard_common.services.user_service import SqlUserService


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: tests that exercise the app and database together")


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Create an in-memory database with the full schema."""
    engine = create_db_engine("sqlite://")
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def user_service(engine: Engine) -> SqlUserService:
    return SqlUserService(engine)


@pytest.fixture
def task_service(engine: Engine) -> SqlTaskService:
    return SqlTaskService(engine)


@pytest.fixture
def client(user_service: SqlUserService, task_service: SqlTaskService) -> Iterator[TestClient]:
    """Create a FastAPI test client wired to the in-memory database."""
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_task_service] = lambda: task_service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def user_payload() -> dict:
    """A user payload that passes every check."""
    return {
        "id": "f001",
        "name": "Ana Souza",
        "email": "ana@example.com",
        "password": "Abcdef1!",
    }


@pytest.fixture
def task_payload() -> dict:
    """A task payload that passes every check."""
    return {
        "id": "t001",
        "title": "Comprar pao",
        "description": "Passar na padaria antes das 8",
    }
