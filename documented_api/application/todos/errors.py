from __future__ import annotations

from typing import List, Optional, Sequence

# error codes exposed in the problem payload
NOT_FOUND_ON_READ = -1
INVALID_PAYLOAD = -2
NOT_FOUND_ON_WRITE = -3


class TodoError(Exception):
    """
    Base for errors the HTTP layer turns into a problem payload.
    """

    error_code: int = 0
    message: str = "Todo error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidPayloadError(TodoError):
    error_code = INVALID_PAYLOAD
    message = "Payload is invalid"

    def __init__(self, violations: Sequence[str] = ()) -> None:
        super().__init__()
        self.violations: List[str] = list(violations)


class TodoNotFoundError(TodoError):
    def __init__(self, todo_id: str, error_code: int, message: str) -> None:
        self.todo_id = todo_id
        self.error_code = error_code
        super().__init__(message)

    @classmethod
    def on_read(cls, todo_id: object) -> "TodoNotFoundError":
        return cls(str(todo_id), NOT_FOUND_ON_READ, "Cannot found")

    @classmethod
    def on_write(cls, todo_id: object) -> "TodoNotFoundError":
        return cls(str(todo_id), NOT_FOUND_ON_WRITE, "Trying to write inexisting item")
