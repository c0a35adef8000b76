from __future__ import annotations

from enum import Enum
from typing import NewType
from uuid import UUID

TodoId = NewType("TodoId", UUID)


class TodoStatus(str, Enum):
    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


FINISHED_STATUSES = frozenset({TodoStatus.DONE, TodoStatus.CANCELLED})


def is_finished(status: TodoStatus) -> bool:
    return status in FINISHED_STATUSES
