# tests/conftest.py

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from documented_api.app import create_app
from documented_api.infrastructure.db.database import DatabaseConfig


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """
    Fresh application with its own in-memory store per test.

    Entering the client runs the lifespan, which connects the store.
    """
    app = create_app(DatabaseConfig())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def create_todo(client: TestClient):
    def _create(description: str = "write spec", due_date: str | None = None) -> str:
        body = {"description": description}
        if due_date is not None:
            body["dueDate"] = due_date
        response = client.post("/todos", json=body)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create
