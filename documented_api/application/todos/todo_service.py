from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional
from uuid import uuid4

from documented_api.domain.listing import TodoOrder
from documented_api.domain.repositories.todo_repository import TodoRepository
from documented_api.domain.todo import Todo
from documented_api.domain.value_objects import TodoId, TodoStatus

from .errors import InvalidPayloadError, TodoNotFoundError
from .validation import TodoCreatePayload, TodoUpdatePayload

logger = logging.getLogger(__name__)

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10
MAX_LIMIT = 255
MAX_OFFSET = 2**31 - 1

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class TodoPage:
    """
    One pagination window plus the size of the whole result set.
    """
    total: int
    offset: int
    limit: int
    items: List[Todo]


def resolve_window(offset: Optional[int], limit: Optional[int]) -> tuple[int, int]:
    """
    Applies defaults; limit is clamped to MAX_LIMIT, negatives and offsets
    beyond MAX_OFFSET are rejected.
    """
    offset = DEFAULT_OFFSET if offset is None else offset
    limit = DEFAULT_LIMIT if limit is None else limit

    violations: List[str] = []
    if offset < 0:
        violations.append("_offset: must be greater than or equal to 0")
    elif offset > MAX_OFFSET:
        violations.append(f"_offset: must be less than or equal to {MAX_OFFSET}")
    if limit < 0:
        violations.append("_limit: must be greater than or equal to 0")
    if violations:
        raise InvalidPayloadError(violations)

    return offset, min(limit, MAX_LIMIT)


async def list_todos(
    repo: TodoRepository,
    order: TodoOrder,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
) -> TodoPage:
    offset, limit = resolve_window(offset, limit)

    # counted before the window is applied
    total = await repo.count()
    items = await repo.list_page(order=order, offset=offset, limit=limit)

    return TodoPage(total=total, offset=offset, limit=limit, items=items)


async def get_todo(repo: TodoRepository, todo_id: Optional[TodoId], raw_id: str) -> Todo:
    todo = await repo.find_by_id(todo_id) if todo_id is not None else None
    if todo is None:
        raise TodoNotFoundError.on_read(raw_id)
    return todo


async def create_todo(
    repo: TodoRepository,
    payload: TodoCreatePayload,
    clock: Clock = utc_now,
) -> Todo:
    """
    New todos always start as NEW with created_at == updated_at.
    """
    now = clock()
    todo = Todo(
        id=TodoId(uuid4()),
        description=payload.description,
        due_date=_as_utc(payload.due_date),
        status=TodoStatus.NEW,
        created_at=now,
        updated_at=now,
    )
    await repo.create(todo)

    logger.info("Todo %s created", todo.id)
    return todo


async def update_todo(
    repo: TodoRepository,
    todo_id: Optional[TodoId],
    raw_id: str,
    payload: TodoUpdatePayload,
    clock: Clock = utc_now,
) -> Todo:
    """
    Full replacement of description, due date and status.

    Read-then-write without a version check: concurrent updates of the same
    todo are last-write-wins.
    """
    current = await repo.find_by_id(todo_id) if todo_id is not None else None
    if current is None:
        raise TodoNotFoundError.on_write(raw_id)

    # updated_at must move forward even if the clock did not
    updated_at = max(clock(), current.updated_at + timedelta(microseconds=1))

    updated = replace(
        current,
        description=payload.description,
        due_date=_as_utc(payload.due_date),
        status=payload.status,
        updated_at=updated_at,
    )
    if not await repo.replace(updated):
        # deleted between the read and the write
        raise TodoNotFoundError.on_write(raw_id)

    logger.info("Todo %s updated (status=%s)", updated.id, updated.status.value)
    return updated


async def delete_todo(
    repo: TodoRepository,
    todo_id: Optional[TodoId],
    raw_id: str,
) -> None:
    if todo_id is None or not await repo.delete(todo_id):
        raise TodoNotFoundError.on_write(raw_id)

    logger.info("Todo %s deleted", todo_id)
