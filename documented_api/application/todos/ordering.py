from __future__ import annotations

from typing import Dict, Optional

from documented_api.domain.listing import (
    DEFAULT_ORDER,
    SortDirection,
    TodoOrder,
    TodoOrderField,
)

from .errors import InvalidPayloadError

_FIELD_NAMES: Dict[str, TodoOrderField] = {
    "id": TodoOrderField.ID,
    "description": TodoOrderField.DESCRIPTION,
    "duedate": TodoOrderField.DUE_DATE,
    "due_date": TodoOrderField.DUE_DATE,
    "status": TodoOrderField.STATUS,
    "currentstatus": TodoOrderField.STATUS,
    "current_status": TodoOrderField.STATUS,
    "createdat": TodoOrderField.CREATED_AT,
    "created_at": TodoOrderField.CREATED_AT,
    "updatedat": TodoOrderField.UPDATED_AT,
    "updated_at": TodoOrderField.UPDATED_AT,
}


def parse_order(raw: Optional[str]) -> TodoOrder:
    """
    Parses `<field> [ASC|DESC]`. Blank means the default (dueDate ASC).
    Anything else is rejected instead of guessed.
    """
    if raw is None or not raw.strip():
        return DEFAULT_ORDER

    tokens = raw.split()
    if len(tokens) > 2:
        raise InvalidPayloadError([f"_order: unexpected tokens in {raw!r}"])

    order_field = _FIELD_NAMES.get(tokens[0].lower())
    if order_field is None:
        raise InvalidPayloadError([f"_order: unknown field {tokens[0]!r}"])

    direction = SortDirection.ASC
    if len(tokens) == 2:
        try:
            direction = SortDirection(tokens[1].upper())
        except ValueError:
            raise InvalidPayloadError(
                [f"_order: direction must be ASC or DESC, got {tokens[1]!r}"]
            ) from None

    return TodoOrder(field=order_field, direction=direction)
