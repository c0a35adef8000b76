from __future__ import annotations

from typing import Optional

from documented_api.application.todos.ordering import parse_order
from documented_api.application.todos.todo_service import TodoPage, list_todos
from documented_api.infrastructure.db.database import Database
from documented_api.infrastructure.repositories.todo_sqlalchemy_repository import (
    TodoSqlAlchemyRepository,
)


async def list_todos_usecase(
    db: Database,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
    order: Optional[str] = None,
) -> TodoPage:
    """
    Returns one page of todos together with the total count.
    """
    repo = TodoSqlAlchemyRepository(db)
    return await list_todos(
        repo,
        order=parse_order(order),
        offset=offset,
        limit=limit,
    )
