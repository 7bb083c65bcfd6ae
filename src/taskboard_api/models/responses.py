"""Response envelopes for the user and task routes."""

from pydantic import BaseModel

from taskboard_common.models.task import Task
from taskboard_common.models.user import User


class MessageResponse(BaseModel):
    message: str


class UserListResponse(BaseModel):
    result: list[User]


class UserCreatedResponse(BaseModel):
    message: str
    user: User


class TaskCreatedResponse(BaseModel):
    message: str
    task: Task
