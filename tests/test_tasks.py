"""Tests for the task endpoints."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from taskboard_api.main import app
from taskboard_api.services import get_task_service
from taskboard_common.models.task import Task
from taskboard_common.services.task_service import SqlTaskService, TaskService

pytestmark = pytest.mark.integration


def test_create_task(client: TestClient, task_payload: dict) -> None:
    response = client.post("/tasks", json=task_payload)

    assert response.status_code == 200
    assert response.json() == {"message": "Task criada com sucesso", "task": task_payload}
    assert client.get("/tasks").json() == [task_payload]


def test_create_task_allows_empty_description(client: TestClient, task_payload: dict) -> None:
    response = client.post("/tasks", json={**task_payload, "description": ""})

    assert response.status_code == 200
    assert response.json()["task"]["description"] == ""


def test_create_task_duplicate_id(client: TestClient, task_payload: dict) -> None:
    client.post("/tasks", json=task_payload)

    response = client.post("/tasks", json={**task_payload, "title": "Outra task"})

    assert response.status_code == 400
    assert response.text == "'id' ja existe."
    assert len(client.get("/tasks").json()) == 1


@pytest.mark.parametrize(
    ("override", "message"),
    [
        ({"id": None}, "'id' dever ser uma string."),
        ({"title": 42}, "'title' deve ser uma string."),
        ({"title": "abc"}, "'title' deve ter no minimo 4 caracteres."),
        ({"description": None}, "'description' deve ser uma string."),
    ],
)
def test_create_task_rejects_invalid_field(
    client: TestClient, task_payload: dict, override: dict, message: str
) -> None:
    response = client.post("/tasks", json={**task_payload, **override})

    assert response.status_code == 400
    assert response.text == message


def test_create_task_short_id_never_touches_store(task_payload: dict) -> None:
    service = MagicMock(spec=TaskService)
    app.dependency_overrides[get_task_service] = lambda: service
    try:
        response = TestClient(app).post("/tasks", json={**task_payload, "id": "abc"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 400
    assert response.text == "'id' deve ter no minimo 4 caracteres."
    assert service.method_calls == []


def test_list_tasks_is_bare_array(client: TestClient, task_service: SqlTaskService) -> None:
    task_service.add_task(Task(id="t001", title="Comprar pao", description="padaria"))

    response = client.get("/tasks")

    assert response.status_code == 200
    assert isinstance(response.json(), list)
    assert response.json()[0]["id"] == "t001"


def test_search_tasks_matches_title_or_description(client: TestClient, task_service: SqlTaskService) -> None:
    task_service.add_task(Task(id="t001", title="Estudar foo", description="capitulo 1"))
    task_service.add_task(Task(id="t002", title="Lavar carro", description="usar sabao foo"))
    task_service.add_task(Task(id="t003", title="foo no inicio", description="nada aqui"))

    response = client.get("/tasks", params={"q": "foo"})

    assert response.status_code == 200
    assert sorted(task["id"] for task in response.json()) == ["t001", "t002"]


def test_search_tasks_treats_wildcards_literally(client: TestClient, task_service: SqlTaskService) -> None:
    task_service.add_task(Task(id="t001", title="Desconto 50%", description=""))
    task_service.add_task(Task(id="t002", title="Desconto 500", description=""))

    response = client.get("/tasks", params={"q": "0%"})

    assert [task["id"] for task in response.json()] == ["t001"]


def test_update_task_is_not_implemented(client: TestClient, task_service: SqlTaskService) -> None:
    task_service.add_task(Task(id="t001", title="Comprar pao", description="padaria"))

    response = client.put("/tasks/t001", json={"title": "Comprar leite"})

    assert response.status_code == 501
    assert "não implementada" in response.text
    assert task_service.get_task("t001").title == "Comprar pao"
