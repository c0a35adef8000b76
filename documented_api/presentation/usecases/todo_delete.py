from __future__ import annotations

from documented_api.application.todos.todo_service import delete_todo
from documented_api.application.todos.validation import parse_todo_id
from documented_api.infrastructure.db.database import Database
from documented_api.infrastructure.repositories.todo_sqlalchemy_repository import (
    TodoSqlAlchemyRepository,
)


async def delete_todo_usecase(db: Database, todo_id: str) -> None:
    repo = TodoSqlAlchemyRepository(db)
    await delete_todo(repo, parse_todo_id(todo_id), todo_id)
