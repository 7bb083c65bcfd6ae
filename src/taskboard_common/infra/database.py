"""Relational schema and engine helpers built on SQLAlchemy Core."""

import logging

from sqlalchemy import Column, Engine, ForeignKey, MetaData, String, Table, Text, create_engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False, unique=True),
    Column("password", String, nullable=False),
)

tasks_table = Table(
    "tasks",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String, nullable=False),
    Column("description", Text, nullable=False),
)

users_tasks_table = Table(
    "users_tasks",
    metadata,
    Column("user_id", String, ForeignKey("users.id"), primary_key=True),
    Column("task_id", String, ForeignKey("tasks.id"), primary_key=True),
)


def _is_in_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (url.rstrip("/").endswith(":") or ":memory:" in url)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for the given database URL.

    In-memory SQLite databases are bound to a single shared connection,
    otherwise every pooled connection would see its own empty database.

    Args:
        url: SQLAlchemy database URL
        echo: Log emitted SQL statements. Bound parameters are never logged
            or included in error messages.

    Returns:
        Configured Engine
    """
    if _is_in_memory_sqlite(url):
        return create_engine(
            url,
            echo=echo,
            hide_parameters=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, hide_parameters=True, connect_args={"check_same_thread": False})
    return create_engine(url, echo=echo, hide_parameters=True, pool_pre_ping=True)


def init_schema(engine: Engine) -> None:
    """Create the users, tasks and users_tasks tables if they don't exist."""
    metadata.create_all(engine)
    logger.info("DB schema ready (%s)", ", ".join(sorted(metadata.tables)))
