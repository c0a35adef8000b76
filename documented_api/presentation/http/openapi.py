from __future__ import annotations

from typing import Any, Dict, Type

from pydantic import BaseModel

from .problem import ProblemDetail

_PROBLEM_DESCRIPTIONS = {
    400: "Payload or query parameters are invalid (errorCode -2)",
    404: "No todo with this id (errorCode -1 on read, -3 on write)",
    500: "Unexpected server error; report the traceId",
}


def problem_responses(*status_codes: int) -> Dict[int | str, Dict[str, Any]]:
    return {
        code: {"model": ProblemDetail, "description": _PROBLEM_DESCRIPTIONS[code]}
        for code in status_codes
    }


def json_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """
    openapi_extra documenting a JSON body that the handler validates itself.
    Nested definitions are inlined so the schema stands on its own.
    """
    schema = model.model_json_schema(by_alias=True)
    defs = schema.pop("$defs", {})

    def _inline(node: Any) -> Any:
        if isinstance(node, dict):
            ref = node.get("$ref")
            if isinstance(ref, str) and ref.startswith("#/$defs/"):
                merged = dict(defs[ref.rsplit("/", 1)[-1]])
                merged.update({k: v for k, v in node.items() if k != "$ref"})
                return _inline(merged)
            return {k: _inline(v) for k, v in node.items()}
        if isinstance(node, list):
            return [_inline(item) for item in node]
        return node

    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": _inline(schema)}},
        }
    }
