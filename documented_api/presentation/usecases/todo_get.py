from __future__ import annotations

from documented_api.application.todos.todo_service import get_todo
from documented_api.application.todos.validation import parse_todo_id
from documented_api.domain.todo import Todo
from documented_api.infrastructure.db.database import Database
from documented_api.infrastructure.repositories.todo_sqlalchemy_repository import (
    TodoSqlAlchemyRepository,
)


async def get_todo_usecase(db: Database, todo_id: str) -> Todo:
    repo = TodoSqlAlchemyRepository(db)
    return await get_todo(repo, parse_todo_id(todo_id), todo_id)
