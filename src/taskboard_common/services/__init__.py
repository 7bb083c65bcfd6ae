"""Common services package."""

from taskboard_common.services.task_service import SqlTaskService, TaskService
from taskboard_common.services.user_service import SqlUserService, UserService

__all__ = [
    "SqlTaskService",
    "SqlUserService",
    "TaskService",
    "UserService",
]
