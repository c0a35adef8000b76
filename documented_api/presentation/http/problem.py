from __future__ import annotations

import logging
from typing import Dict
from uuid import UUID, uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from documented_api import config
from documented_api.application.todos.errors import (
    INVALID_PAYLOAD,
    InvalidPayloadError,
    TodoError,
    TodoNotFoundError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR = -99
ROUTING_ERROR = 0

SUPPORTED_VERSIONS_HEADER = "api-supported-versions"


def version_headers() -> Dict[str, str]:
    return {SUPPORTED_VERSIONS_HEADER: ", ".join(config.API_SUPPORTED_VERSIONS)}


class ProblemDetail(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error_code: int = Field(
        ...,
        description="The kind of the error",
        examples=[-77],
    )
    trace_id: UUID = Field(
        ...,
        description="The request trace id. Use it to ask for support when an issue happens.",
        examples=["45cbba15-976c-4387-9e64-35e7c97c052a"],
    )
    error_message: str = Field(
        ...,
        description="Friendly error message that can be shown on a user interface",
        examples=["An error occurred."],
    )


def problem_response(status_code: int, error_code: int, message: str) -> JSONResponse:
    """
    Builds the problem payload with a fresh trace id, logs it and returns it.
    """
    problem = ProblemDetail(error_code=error_code, trace_id=uuid4(), error_message=message)
    logger.info(
        "Problem %s: status=%s code=%s message=%s",
        problem.trace_id, status_code, error_code, message,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(mode="json", by_alias=True),
        headers=version_headers(),
    )


def _status_for(exc: TodoError) -> int:
    if isinstance(exc, InvalidPayloadError):
        return 400
    if isinstance(exc, TodoNotFoundError):
        return 404
    return 500


async def _todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
    if isinstance(exc, InvalidPayloadError) and exc.violations:
        logger.warning("Invalid payload on %s %s: %s", request.method, request.url.path, exc.violations)
    return problem_response(_status_for(exc), exc.error_code, exc.message)


async def _request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    logger.warning("Rejected request %s %s: %s", request.method, request.url.path, exc.errors())
    return problem_response(400, INVALID_PAYLOAD, InvalidPayloadError.message)


async def _http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    return problem_response(exc.status_code, ROUTING_ERROR, str(exc.detail))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    trace_id = uuid4()
    logger.exception(
        "Unhandled error %s on %s %s", trace_id, request.method, request.url.path,
    )
    problem = ProblemDetail(
        error_code=INTERNAL_ERROR,
        trace_id=trace_id,
        error_message="An unexpected error occurred",
    )
    # built outside the middleware stack, so the version header is set here
    return JSONResponse(
        status_code=500,
        content=problem.model_dump(mode="json", by_alias=True),
        headers=version_headers(),
    )


def register_problem_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoError, _todo_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
