from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from documented_api.domain.value_objects import TodoId, TodoStatus

T = TypeVar("T", bound=BaseModel)


class TodoCreatePayload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    description: str = Field(
        ...,
        description="What has to be done; must not be blank",
        examples=["Write the API documentation example"],
    )
    due_date: Optional[datetime] = Field(
        None,
        description="Deadline for the task (ISO 8601)",
        examples=["2021-04-17T14:22:39-03:00"],
    )

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        # checked trimmed, stored as sent
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class TodoUpdatePayload(TodoCreatePayload):
    status: TodoStatus = Field(
        ...,
        validation_alias=AliasChoices("status", "currentStatus", "current_status"),
        description="New state of the task; any transition is allowed",
        examples=["DONE"],
    )


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    value: Optional[T] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def _format_errors(exc: ValidationError) -> List[str]:
    violations: List[str] = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "body"
        violations.append(f"{location}: {err['msg']}")
    return violations


def _validate(model: Type[T], raw: Any) -> ValidationResult[T]:
    if raw is None:
        return ValidationResult(errors=["body: payload is required"])
    if not isinstance(raw, dict):
        return ValidationResult(errors=["body: payload must be a JSON object"])

    try:
        return ValidationResult(value=model.model_validate(raw))
    except ValidationError as exc:
        return ValidationResult(errors=_format_errors(exc))


def validate_create_request(raw: Any) -> ValidationResult[TodoCreatePayload]:
    return _validate(TodoCreatePayload, raw)


def validate_update_request(raw: Any) -> ValidationResult[TodoUpdatePayload]:
    return _validate(TodoUpdatePayload, raw)


def parse_todo_id(raw: str) -> Optional[TodoId]:
    """
    Returns None for anything that is not a UUID; callers treat it as not found.
    """
    try:
        return TodoId(UUID(str(raw)))
    except ValueError:
        return None
