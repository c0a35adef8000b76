from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TodoOrderField(str, Enum):
    ID = "id"
    DESCRIPTION = "description"
    DUE_DATE = "dueDate"
    STATUS = "status"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class TodoOrder:
    field: TodoOrderField = TodoOrderField.DUE_DATE
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def __str__(self) -> str:
        return f"{self.field.value} {self.direction.value}"


DEFAULT_ORDER = TodoOrder()
