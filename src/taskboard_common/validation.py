"""Payload validation for user and task creation.

Checks run in a fixed order and the first failure wins. Each failure is raised
as a ``ValidationError`` (400) except a password that breaks the policy, which
is raised as a plain ``AppError`` with no explicit status and therefore
reported as a 500.
"""

import re
from typing import Any

from taskboard_common.errors import AppError, ValidationError
from taskboard_common.models.task import Task
from taskboard_common.models.user import User

PASSWORD_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^\da-zA-Z]).{8,12}", re.ASCII)

MIN_USER_ID_LENGTH = 4
MIN_USER_NAME_LENGTH = 2
MIN_TASK_ID_LENGTH = 4
MIN_TASK_TITLE_LENGTH = 4

DELETABLE_USER_ID_PREFIX = "f"


def _require_str(value: Any, message: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(message)
    return value


def _require_min_length(value: str, min_length: int, message: str) -> None:
    if len(value) < min_length:
        raise ValidationError(message)


def validate_new_user(payload: dict[str, Any]) -> User:
    """Validate a user creation payload.

    Args:
        payload: Parsed JSON body with ``id``, ``name``, ``email`` and ``password``

    Returns:
        User built from the payload

    Raises:
        ValidationError: A field is missing, has the wrong type or is too short
        AppError: The password does not satisfy the password policy
    """
    user_id = _require_str(payload.get("id"), "'id' necessita ser uma string.")
    _require_min_length(user_id, MIN_USER_ID_LENGTH, "'id' deve ter pelo menos 4 caracteres.")

    name = _require_str(payload.get("name"), "'name' necessita ser uma string.")
    _require_min_length(name, MIN_USER_NAME_LENGTH, "'name' deve ter pelo menos 2 caracteres.")

    email = _require_str(payload.get("email"), "'email' necessita ser uma string.")

    password = _require_str(payload.get("password"), "'password' necessita ser uma string.")
    if not PASSWORD_PATTERN.fullmatch(password):
        raise AppError(
            "'password' deve possuir entre 8 e 12 caracteres, com letras maiúsculas e minúsculas "
            "e no mínimo um número e um caractere especial"
        )

    return User(id=user_id, name=name, email=email, password=password)


def validate_new_task(payload: dict[str, Any]) -> Task:
    """Validate a task creation payload.

    Args:
        payload: Parsed JSON body with ``id``, ``title`` and ``description``

    Returns:
        Task built from the payload

    Raises:
        ValidationError: A field is missing, has the wrong type or is too short
    """
    task_id = _require_str(payload.get("id"), "'id' dever ser uma string.")
    _require_min_length(task_id, MIN_TASK_ID_LENGTH, "'id' deve ter no minimo 4 caracteres.")

    title = _require_str(payload.get("title"), "'title' deve ser uma string.")
    _require_min_length(title, MIN_TASK_TITLE_LENGTH, "'title' deve ter no minimo 4 caracteres.")

    description = _require_str(payload.get("description"), "'description' deve ser uma string.")

    return Task(id=task_id, title=title, description=description)


def validate_deletable_user_id(user_id: str) -> None:
    """Only user ids starting with ``f`` may be deleted."""
    if not user_id.startswith(DELETABLE_USER_ID_PREFIX):
        raise ValidationError("'id' deve iniciar com a letra 'f'")
