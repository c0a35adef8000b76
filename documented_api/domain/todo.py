from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .value_objects import TodoId, TodoStatus, is_finished


@dataclass(frozen=True)
class Todo:
    """
    Todo task entity.

    description - what has to be done
    due_date    - optional deadline (UTC)
    status      - current state; the only thing `finished` depends on
    created_at  - set once on creation
    updated_at  - refreshed on every replacement
    """
    id: TodoId
    description: str
    due_date: Optional[datetime]
    status: TodoStatus
    created_at: datetime
    updated_at: datetime

    @property
    def finished(self) -> bool:
        return is_finished(self.status)
