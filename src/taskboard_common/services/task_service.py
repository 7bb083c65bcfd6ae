"""Task service with SQL implementation."""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import Engine, insert, or_, select

from taskboard_common.infra.database import tasks_table
from taskboard_common.models.task import Task

logger = logging.getLogger(__name__)


class TaskService(ABC):
    """Abstract interface for task service."""

    @abstractmethod
    def add_task(self, task: Task) -> None:
        """Add a task."""

    @abstractmethod
    def get_task(self, task_id: str) -> Task | None:
        """Get a task by ID."""

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        """List all tasks."""

    @abstractmethod
    def search_tasks(self, term: str) -> list[Task]:
        """Search for tasks whose title or description matches ``%term``."""


class SqlTaskService(TaskService):
    """SQLAlchemy implementation of TaskService."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @staticmethod
    def _to_task(row) -> Task:
        return Task(id=row.id, title=row.title, description=row.description)

    def add_task(self, task: Task) -> None:
        with self.engine.begin() as conn:
            conn.execute(insert(tasks_table).values(**task.model_dump()))
        logger.info("Created task %s", task.id)

    def get_task(self, task_id: str) -> Task | None:
        with self.engine.connect() as conn:
            row = conn.execute(select(tasks_table).where(tasks_table.c.id == task_id)).first()
        return self._to_task(row) if row else None

    def list_tasks(self) -> list[Task]:
        with self.engine.connect() as conn:
            rows = conn.execute(select(tasks_table)).all()
        return [self._to_task(row) for row in rows]

    def search_tasks(self, term: str) -> list[Task]:
        query = select(tasks_table).where(
            or_(
                tasks_table.c.title.endswith(term, autoescape=True),
                tasks_table.c.description.endswith(term, autoescape=True),
            )
        )
        with self.engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_task(row) for row in rows]
