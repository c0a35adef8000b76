from .errors import InvalidPayloadError, TodoError, TodoNotFoundError
from .ordering import parse_order
from .todo_service import (
    MAX_LIMIT,
    TodoPage,
    create_todo,
    delete_todo,
    get_todo,
    list_todos,
    update_todo,
)
from .validation import (
    TodoCreatePayload,
    TodoUpdatePayload,
    ValidationResult,
    parse_todo_id,
    validate_create_request,
    validate_update_request,
)

__all__ = [
    "TodoError",
    "InvalidPayloadError",
    "TodoNotFoundError",
    "parse_order",
    "MAX_LIMIT",
    "TodoPage",
    "list_todos",
    "get_todo",
    "create_todo",
    "update_todo",
    "delete_todo",
    "TodoCreatePayload",
    "TodoUpdatePayload",
    "ValidationResult",
    "parse_todo_id",
    "validate_create_request",
    "validate_update_request",
]
