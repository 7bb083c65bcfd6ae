"""Common models package."""

from taskboard_common.models.task import Task
from taskboard_common.models.user import User

__all__ = [
    "Task",
    "User",
]
