"""Infrastructure layer for external communication."""

from taskboard_common.infra.database import (
    create_db_engine,
    init_schema,
    metadata,
    tasks_table,
    users_table,
    users_tasks_table,
)

__all__ = [
    "create_db_engine",
    "init_schema",
    "metadata",
    "tasks_table",
    "users_table",
    "users_tasks_table",
]
