# tests/test_todos_api.py

from __future__ import annotations

import json
from datetime import datetime
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from documented_api.app import create_app
from documented_api.infrastructure.db.database import DatabaseConfig
from documented_api.infrastructure.repositories.todo_sqlalchemy_repository import (
    TodoSqlAlchemyRepository,
)


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _assert_problem(response, status_code: int, error_code: int) -> dict:
    assert response.status_code == status_code, response.text
    body = response.json()
    assert body["errorCode"] == error_code
    UUID(body["traceId"])
    assert body["errorMessage"]
    return body


def test_create_then_get(client: TestClient) -> None:
    response = client.post("/todos", json={"description": "write spec"})

    assert response.status_code == 201
    todo_id = response.json()["id"]
    assert todo_id
    assert response.headers["Location"] == f"/todos/{todo_id}"

    fetched = client.get(f"/todos/{todo_id}")
    assert fetched.status_code == 200
    body = fetched.json()
    assert body["id"] == todo_id
    assert body["description"] == "write spec"
    assert body["status"] == "NEW"
    assert body["finished"] is False
    assert body["dueDate"] is None
    assert body["createdAt"] == body["updatedAt"]


def test_due_date_is_returned_in_utc(client: TestClient, create_todo) -> None:
    todo_id = create_todo("deadline", due_date="2021-04-17T14:22:39-03:00")

    body = client.get(f"/todos/{todo_id}").json()
    assert _ts(body["dueDate"]) == _ts("2021-04-17T17:22:39+00:00")


@pytest.mark.parametrize("todo_id", [str(uuid4()), "not-a-uuid"])
def test_get_unknown_todo(client: TestClient, todo_id: str) -> None:
    body = _assert_problem(client.get(f"/todos/{todo_id}"), 404, -1)
    assert body["errorMessage"] == "Cannot found"


def test_update_unknown_todo(client: TestClient) -> None:
    response = client.put(
        f"/todos/{uuid4()}",
        json={"description": "x", "status": "DONE"},
    )
    body = _assert_problem(response, 404, -3)
    assert body["errorMessage"] == "Trying to write inexisting item"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"content": "null", "headers": {"Content-Type": "application/json"}},
        {},
        {"json": {"dueDate": "2021-04-17T14:22:39Z"}},
        {"json": {"description": ""}},
        {"json": {"description": 12}},
        {"json": {"description": "x", "dueDate": "tomorrow"}},
        {"json": ["write spec"]},
        {"content": "{not json", "headers": {"Content-Type": "application/json"}},
    ],
)
def test_create_with_invalid_payload(client: TestClient, kwargs: dict) -> None:
    body = _assert_problem(client.post("/todos", **kwargs), 400, -2)
    assert body["errorMessage"] == "Payload is invalid"
    assert client.get("/todos").headers["X-Total-Count"] == "0"


def test_update_with_invalid_payload(client: TestClient, create_todo) -> None:
    todo_id = create_todo()

    _assert_problem(client.put(f"/todos/{todo_id}", json={"description": "x"}), 400, -2)
    _assert_problem(
        client.put(f"/todos/{todo_id}", json={"description": "x", "status": "ARCHIVED"}),
        400,
        -2,
    )
    _assert_problem(
        client.put(
            f"/todos/{todo_id}",
            content="null",
            headers={"Content-Type": "application/json"},
        ),
        400,
        -2,
    )


def test_update_replaces_fields_and_keeps_created_at(client: TestClient, create_todo) -> None:
    todo_id = create_todo("draft", due_date="2021-04-17T10:00:00Z")
    before = client.get(f"/todos/{todo_id}").json()

    response = client.put(
        f"/todos/{todo_id}",
        json={"description": "final", "status": "DONE"},
    )
    assert response.status_code == 204
    assert response.content == b""

    after = client.get(f"/todos/{todo_id}").json()
    assert after["description"] == "final"
    assert after["dueDate"] is None
    assert after["status"] == "DONE"
    assert after["finished"] is True
    assert after["createdAt"] == before["createdAt"]
    assert _ts(after["updatedAt"]) > _ts(before["updatedAt"])


def test_any_status_transition_is_allowed(client: TestClient, create_todo) -> None:
    todo_id = create_todo()

    for status, finished in [("DONE", True), ("NEW", False), ("CANCELLED", True), ("IN_PROGRESS", False)]:
        response = client.put(f"/todos/{todo_id}", json={"description": "x", "status": status})
        assert response.status_code == 204
        body = client.get(f"/todos/{todo_id}").json()
        assert body["status"] == status
        assert body["finished"] is finished


def test_delete_then_get(client: TestClient, create_todo) -> None:
    todo_id = create_todo()

    assert client.delete(f"/todos/{todo_id}").status_code == 204
    _assert_problem(client.get(f"/todos/{todo_id}"), 404, -1)
    _assert_problem(client.delete(f"/todos/{todo_id}"), 404, -3)


def test_list_window_and_total_count(client: TestClient, create_todo) -> None:
    ids = [create_todo(f"task {i:02d}") for i in range(15)]

    response = client.get("/todos", params={"_limit": 5, "_offset": 10})

    assert response.status_code == 200
    assert response.headers["X-Total-Count"] == "15"
    items = response.json()
    assert len(items) == 5
    # no due dates: creation order decides
    assert [item["id"] for item in items] == ids[10:]


def test_list_defaults_to_ten_items(client: TestClient, create_todo) -> None:
    for i in range(12):
        create_todo(f"task {i}")

    response = client.get("/todos")
    assert len(response.json()) == 10
    assert response.headers["X-Total-Count"] == "12"

    huge = client.get("/todos", params={"_limit": 100000})
    assert huge.status_code == 200
    assert len(huge.json()) == 12


def test_list_orders_by_due_date_then_by_requested_field(client: TestClient, create_todo) -> None:
    create_todo("b", due_date="2021-04-19T00:00:00Z")
    create_todo("c", due_date="2021-04-17T00:00:00Z")
    create_todo("a", due_date="2021-04-18T00:00:00Z")

    by_due = [item["description"] for item in client.get("/todos").json()]
    assert by_due == ["c", "a", "b"]

    desc = client.get("/todos", params={"_order": "description DESC"}).json()
    assert [item["description"] for item in desc] == ["c", "b", "a"]

    due_desc = client.get("/todos", params={"_order": "dueDate DESC"}).json()
    assert [item["description"] for item in due_desc] == ["b", "a", "c"]


@pytest.mark.parametrize(
    "params",
    [
        {"_order": "priority"},
        {"_order": "description SIDEWAYS"},
        {"_limit": "abc"},
        {"_offset": -1},
        {"_offset": 10**20},
        {"_limit": -1},
    ],
)
def test_list_with_invalid_query(client: TestClient, params: dict) -> None:
    _assert_problem(client.get("/todos", params=params), 400, -2)


def test_versions_are_reported(client: TestClient) -> None:
    response = client.get("/todos")
    assert response.headers["api-supported-versions"] == "1.0, 2.0"


def test_unknown_route_uses_problem_payload(client: TestClient) -> None:
    _assert_problem(client.get("/nothing-here"), 404, 0)


def test_store_failure_is_internal_error(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _boom(self) -> int:
        raise RuntimeError("store is gone")

    monkeypatch.setattr(TodoSqlAlchemyRepository, "count", _boom)

    app = create_app(DatabaseConfig())
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/todos")
        body = _assert_problem(response, 500, -99)

    assert "store is gone" not in body["errorMessage"]
    assert response.headers["api-supported-versions"] == "1.0, 2.0"


def test_openapi_documents_both_versions(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()

    assert "/todos" in schema["paths"]
    assert "/todos/{todo_id}" in schema["paths"]
    assert schema["paths"]["/weatherforecast"]["get"]["tags"] == ["v1"]
    assert schema["paths"]["/todos"]["get"]["tags"] == ["v2"]

    create_body = schema["paths"]["/todos"]["post"]["requestBody"]["content"]["application/json"]["schema"]
    assert "description" in create_body["properties"]

    update_body = schema["paths"]["/todos/{todo_id}"]["put"]["requestBody"]["content"]["application/json"]["schema"]
    status_schema = json.dumps(update_body["properties"]["status"])
    for status in ("NEW", "IN_PROGRESS", "DONE", "CANCELLED"):
        assert status in status_schema
    assert "ProblemDetail" in schema["components"]["schemas"]


def test_list_limit_is_capped_at_255(client: TestClient, create_todo) -> None:
    for i in range(260):
        create_todo(f"task {i}")

    response = client.get("/todos", params={"_limit": 1000})

    assert response.status_code == 200
    assert response.headers["X-Total-Count"] == "260"
    assert len(response.json()) == 255


def test_description_is_stored_as_sent(client: TestClient, create_todo) -> None:
    todo_id = create_todo("  write spec ")
    assert client.get(f"/todos/{todo_id}").json()["description"] == "  write spec "

    response = client.put(
        f"/todos/{todo_id}",
        json={"description": " final\t", "status": "DONE"},
    )
    assert response.status_code == 204
    assert client.get(f"/todos/{todo_id}").json()["description"] == " final\t"

    _assert_problem(
        client.put(f"/todos/{todo_id}", json={"description": " \t ", "status": "DONE"}),
        400,
        -2,
    )


def test_not_found_problem_reports_versions(client: TestClient) -> None:
    response = client.get(f"/todos/{uuid4()}")
    assert response.headers["api-supported-versions"] == "1.0, 2.0"
