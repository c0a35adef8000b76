from __future__ import annotations

from typing import Any

from documented_api.application.todos.errors import InvalidPayloadError
from documented_api.application.todos.todo_service import update_todo
from documented_api.application.todos.validation import (
    parse_todo_id,
    validate_update_request,
)
from documented_api.domain.todo import Todo
from documented_api.infrastructure.db.database import Database
from documented_api.infrastructure.repositories.todo_sqlalchemy_repository import (
    TodoSqlAlchemyRepository,
)


async def update_todo_usecase(db: Database, todo_id: str, payload: Any) -> Todo:
    result = validate_update_request(payload)
    if not result.ok:
        raise InvalidPayloadError(result.errors)

    repo = TodoSqlAlchemyRepository(db)
    return await update_todo(repo, parse_todo_id(todo_id), todo_id, result.value)
