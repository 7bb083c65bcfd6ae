"""User service with SQL implementation."""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import Engine, delete, insert, select

from taskboard_common.infra.database import users_table, users_tasks_table
from taskboard_common.models.user import User

logger = logging.getLogger(__name__)


class UserService(ABC):
    """Abstract interface for user service."""

    @abstractmethod
    def add_user(self, user: User) -> None:
        """Add a user."""

    @abstractmethod
    def get_user(self, user_id: str) -> User | None:
        """Get a user by ID."""

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users."""

    @abstractmethod
    def search_users(self, term: str) -> list[User]:
        """Search for users whose name matches the suffix pattern ``%term``.

        Args:
            term: Search term

        Returns:
            List of User objects matching the search term
        """

    @abstractmethod
    def delete_user_tasks(self, user_id: str) -> int:
        """Delete every task link owned by a user. Returns the number of links removed."""

    @abstractmethod
    def delete_user(self, user_id: str) -> bool:
        """Delete a user row."""


class SqlUserService(UserService):
    """SQLAlchemy implementation of UserService."""

    def __init__(self, engine: Engine) -> None:
        """Initialize SQL user service.

        Args:
            engine: SQLAlchemy engine bound to a database with the users schema
        """
        self.engine = engine

    @staticmethod
    def _to_user(row) -> User:
        return User(id=row.id, name=row.name, email=row.email, password=row.password)

    def add_user(self, user: User) -> None:
        """Add a user."""
        with self.engine.begin() as conn:
            conn.execute(insert(users_table).values(**user.model_dump()))
        logger.info("Created user %s", user.id)

    def get_user(self, user_id: str) -> User | None:
        """Get a user by ID."""
        with self.engine.connect() as conn:
            row = conn.execute(select(users_table).where(users_table.c.id == user_id)).first()
        return self._to_user(row) if row else None

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        with self.engine.connect() as conn:
            row = conn.execute(select(users_table).where(users_table.c.email == email)).first()
        return self._to_user(row) if row else None

    def list_users(self) -> list[User]:
        """List all users."""
        with self.engine.connect() as conn:
            rows = conn.execute(select(users_table)).all()
        return [self._to_user(row) for row in rows]

    def search_users(self, term: str) -> list[User]:
        """Search for users whose name matches ``%term``.

        The term is sent as a bound parameter with LIKE wildcards escaped,
        so ``%`` and ``_`` in the term match literally.
        """
        query = select(users_table).where(users_table.c.name.endswith(term, autoescape=True))
        with self.engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_user(row) for row in rows]

    def delete_user_tasks(self, user_id: str) -> int:
        """Delete every task link owned by a user."""
        with self.engine.begin() as conn:
            result = conn.execute(delete(users_tasks_table).where(users_tasks_table.c.user_id == user_id))
        logger.info("Deleted %d task link(s) for user %s", result.rowcount, user_id)
        return result.rowcount

    def delete_user(self, user_id: str) -> bool:
        """Delete a user row."""
        with self.engine.begin() as conn:
            result = conn.execute(delete(users_table).where(users_table.c.id == user_id))
        if result.rowcount:
            logger.info("Deleted user %s", user_id)
            return True
        logger.warning("User %s not found for deletion", user_id)
        return False
