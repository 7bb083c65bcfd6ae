"""Tests for error translation."""

import pytest
from sqlalchemy.exc import IntegrityError

from taskboard_api.errors import FALLBACK_MESSAGE, translate_error
from taskboard_common.errors import AppError, NotFoundError, NotImplementedAppError, ValidationError

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (ValidationError("'id' ja existe."), (400, "'id' ja existe.")),
        (NotFoundError("'id' não encontrado"), (404, "'id' não encontrado")),
        (NotImplementedAppError("pendente"), (501, "pendente")),
        (AppError("sem status"), (500, "sem status")),
        (AppError("explicito", status_code=409), (409, "explicito")),
        (RuntimeError("boom"), (500, "boom")),
    ],
)
def test_translate_error(exc: Exception, expected: tuple[int, str]) -> None:
    assert translate_error(exc) == expected


def test_translate_error_falls_back_when_message_is_empty() -> None:
    assert translate_error(RuntimeError()) == (500, FALLBACK_MESSAGE)
    assert translate_error(ValidationError("")) == (400, FALLBACK_MESSAGE)


def test_translate_error_store_failure_hides_statement() -> None:
    exc = IntegrityError(
        "INSERT INTO users (id, name, email, password) VALUES (?, ?, ?, ?)",
        ("f001", "Ana Souza", "ana@example.com", "Abcdef1!"),
        Exception("UNIQUE constraint failed: users.email"),
    )

    assert translate_error(exc) == (500, "UNIQUE constraint failed: users.email")
