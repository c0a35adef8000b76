from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Request, Response
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from documented_api.application.todos.todo_service import MAX_LIMIT
from documented_api.application.todos.validation import (
    TodoCreatePayload,
    TodoUpdatePayload,
)
from documented_api.domain.todo import Todo
from documented_api.domain.value_objects import TodoStatus
from documented_api.infrastructure.db.database import Database
from documented_api.presentation.usecases.todo_create import create_todo_usecase
from documented_api.presentation.usecases.todo_delete import delete_todo_usecase
from documented_api.presentation.usecases.todo_get import get_todo_usecase
from documented_api.presentation.usecases.todo_list import list_todos_usecase
from documented_api.presentation.usecases.todo_update import update_todo_usecase

from .dependencies import get_database
from .openapi import json_body, problem_responses

router = APIRouter(
    prefix="/todos",
    tags=["v2"],
)

TOTAL_COUNT_HEADER = "X-Total-Count"


# ---------- Schemas ----------


class TodoResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID = Field(
        ...,
        description="Unique id of the task",
        examples=["18647c67-be2b-46b9-9be2-49de8b9a3b88"],
    )
    description: str = Field(
        ...,
        description="What has to be done",
        examples=["Write the API documentation example"],
    )
    due_date: Optional[datetime] = Field(
        None,
        description="Deadline for the task (ISO 8601, UTC)",
        examples=["2021-04-17T17:22:39Z"],
    )
    status: TodoStatus = Field(..., description="Current state of the task")
    finished: bool = Field(
        ...,
        description="True when the task is DONE or CANCELLED",
    )
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, todo: Todo) -> "TodoResponse":
        return cls(
            id=todo.id,
            description=todo.description,
            due_date=todo.due_date,
            status=todo.status,
            finished=todo.finished,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )


class TodoCreatedResponse(BaseModel):
    id: UUID = Field(..., description="Id of the created task")


# ---------- Endpoints ----------


@router.get(
    "",
    response_model=List[TodoResponse],
    summary="List tasks",
    description=(
        "Lists tasks using the given window and order.<br/>"
        "`_offset` defaults to **0**; `_limit` defaults to **10** and is capped at **255**.<br/>"
        "`_order` is `<field> [ASC|DESC]`, default `dueDate ASC`.<br/>"
        f"The total number of tasks is returned in the `{TOTAL_COUNT_HEADER}` header."
    ),
    responses=problem_responses(400, 500),
)
async def list_todos(
    response: Response,
    offset: Optional[int] = Query(
        None,
        alias="_offset",
        description="Number of tasks to skip, starting at 0",
        examples=[0],
    ),
    limit: Optional[int] = Query(
        None,
        alias="_limit",
        description=f"Tasks per page, at most {MAX_LIMIT}",
        examples=[5],
    ),
    order: Optional[str] = Query(
        None,
        alias="_order",
        description="Field to order by; add the DESC suffix to reverse, ASC is the default",
        examples=["description ASC"],
    ),
    db: Database = Depends(get_database),
) -> List[TodoResponse]:
    page = await list_todos_usecase(db, offset=offset, limit=limit, order=order)

    response.headers[TOTAL_COUNT_HEADER] = str(page.total)
    return [TodoResponse.from_domain(todo) for todo in page.items]


@router.get(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Get a task",
    responses=problem_responses(404, 500),
)
async def get_todo(
    todo_id: str,
    db: Database = Depends(get_database),
) -> TodoResponse:
    todo = await get_todo_usecase(db, todo_id)
    return TodoResponse.from_domain(todo)


@router.post(
    "",
    response_model=TodoCreatedResponse,
    status_code=201,
    summary="Create a task",
    description="New tasks always start with status `NEW`.",
    responses=problem_responses(400, 500),
    openapi_extra=json_body(TodoCreatePayload),
)
async def create_todo(
    request: Request,
    response: Response,
    payload: Any = Body(None),
    db: Database = Depends(get_database),
) -> TodoCreatedResponse:
    todo = await create_todo_usecase(db, payload)

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{todo.id}"
    return TodoCreatedResponse(id=todo.id)


@router.put(
    "/{todo_id}",
    status_code=204,
    response_class=Response,
    summary="Update a task",
    description=(
        "Replaces description, due date and status. "
        "This is also how the state of a task is changed."
    ),
    responses=problem_responses(400, 404, 500),
    openapi_extra=json_body(TodoUpdatePayload),
)
async def update_todo(
    todo_id: str,
    payload: Any = Body(None),
    db: Database = Depends(get_database),
) -> Response:
    await update_todo_usecase(db, todo_id, payload)
    return Response(status_code=204)


@router.delete(
    "/{todo_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a task",
    responses=problem_responses(404, 500),
)
async def delete_todo(
    todo_id: str,
    db: Database = Depends(get_database),
) -> Response:
    await delete_todo_usecase(db, todo_id)
    return Response(status_code=204)
