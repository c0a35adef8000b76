from __future__ import annotations

from typing import Any

from documented_api.application.todos.errors import InvalidPayloadError
from documented_api.application.todos.todo_service import create_todo
from documented_api.application.todos.validation import validate_create_request
from documented_api.domain.todo import Todo
from documented_api.infrastructure.db.database import Database
from documented_api.infrastructure.repositories.todo_sqlalchemy_repository import (
    TodoSqlAlchemyRepository,
)


async def create_todo_usecase(db: Database, payload: Any) -> Todo:
    """
    Validates the raw JSON body first; nothing touches the store on failure.
    """
    result = validate_create_request(payload)
    if not result.ok:
        raise InvalidPayloadError(result.errors)

    repo = TodoSqlAlchemyRepository(db)
    return await create_todo(repo, result.value)
