from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import InstrumentedAttribute

from documented_api.domain.listing import TodoOrder, TodoOrderField
from documented_api.domain.repositories.todo_repository import TodoRepository
from documented_api.domain.todo import Todo
from documented_api.domain.value_objects import TodoId, TodoStatus
from documented_api.infrastructure.db.database import Database
from documented_api.infrastructure.db.models import TodoRecord


_ORDER_COLUMNS: Dict[TodoOrderField, InstrumentedAttribute] = {
    TodoOrderField.ID: TodoRecord.id,
    TodoOrderField.DESCRIPTION: TodoRecord.description,
    TodoOrderField.DUE_DATE: TodoRecord.due_date,
    TodoOrderField.STATUS: TodoRecord.status,
    TodoOrderField.CREATED_AT: TodoRecord.created_at,
    TodoOrderField.UPDATED_AT: TodoRecord.updated_at,
}


class TodoSqlAlchemyRepository(TodoRepository):
    """
    SQLAlchemy-based implementation of TodoRepository.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    async def count(self) -> int:
        async with self._db.session() as session:
            total = await session.scalar(select(func.count()).select_from(TodoRecord))
            return int(total or 0)

    async def list_page(
        self,
        order: TodoOrder,
        offset: int,
        limit: int,
    ) -> List[Todo]:
        column = _ORDER_COLUMNS[order.field]
        primary = column.desc() if order.descending else column.asc()

        stmt = (
            select(TodoRecord)
            .order_by(primary, TodoRecord.created_at.asc(), TodoRecord.id.asc())
            .offset(offset)
            .limit(limit)
        )
        async with self._db.session() as session:
            rows = (await session.scalars(stmt)).all()
            return [self._map_record_to_todo(row) for row in rows]

    async def create(self, todo: Todo) -> None:
        async with self._db.session() as session:
            session.add(
                TodoRecord(
                    id=todo.id,
                    description=todo.description,
                    due_date=self._to_storage(todo.due_date),
                    status=todo.status.value,
                    created_at=self._to_storage(todo.created_at),
                    updated_at=self._to_storage(todo.updated_at),
                )
            )

    async def find_by_id(self, todo_id: TodoId) -> Optional[Todo]:
        async with self._db.session() as session:
            row = await session.get(TodoRecord, todo_id)
            if row is None:
                return None

            return self._map_record_to_todo(row)

    async def replace(self, todo: Todo) -> bool:
        stmt = (
            update(TodoRecord)
            .where(TodoRecord.id == todo.id)
            .values(
                description=todo.description,
                due_date=self._to_storage(todo.due_date),
                status=todo.status.value,
                created_at=self._to_storage(todo.created_at),
                updated_at=self._to_storage(todo.updated_at),
            )
        )
        async with self._db.session() as session:
            result = await session.execute(stmt)
            return result.rowcount > 0

    async def delete(self, todo_id: TodoId) -> bool:
        async with self._db.session() as session:
            result = await session.execute(
                delete(TodoRecord).where(TodoRecord.id == todo_id)
            )
            return result.rowcount > 0

    @staticmethod
    def _to_storage(value: Optional[datetime]) -> Optional[datetime]:
        """
        SQLite keeps no offset, so everything is stored as naive UTC.
        """
        if value is None or value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    @staticmethod
    def _from_storage(value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)

    @staticmethod
    def _map_record_to_todo(row: TodoRecord) -> Todo:
        """
        Maps ORM row to a detached Todo domain model.
        """
        return Todo(
            id=TodoId(row.id),
            description=row.description,
            due_date=TodoSqlAlchemyRepository._from_storage(row.due_date),
            status=TodoStatus(row.status),
            created_at=TodoSqlAlchemyRepository._from_storage(row.created_at),
            updated_at=TodoSqlAlchemyRepository._from_storage(row.updated_at),
        )
