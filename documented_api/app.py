from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from documented_api import config
from documented_api.infrastructure.db.database import (
    Database,
    DatabaseConfig,
    load_config_from_env,
)
from documented_api.presentation.http.problem import (
    SUPPORTED_VERSIONS_HEADER,
    register_problem_handlers,
    version_headers,
)
from documented_api.presentation.http.todos_router import router as todos_router
from documented_api.presentation.http.weather_router import router as weather_router

logger = logging.getLogger(__name__)

def create_app(db_config: Optional[DatabaseConfig] = None) -> FastAPI:
    """
    Builds the FastAPI application. The store is created on startup and
    disposed on shutdown, so every app instance has its own data.
    """
    db = Database(db_config or load_config_from_env())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await db.connect()
        try:
            yield
        finally:
            await db.close()

    app = FastAPI(
        title=config.API_TITLE,
        description=(
            "Todo management API (v2) with a weather forecast sample (v1). "
            "Errors are returned as `{errorCode, traceId, errorMessage}`."
        ),
        version=config.API_SUPPORTED_VERSIONS[-1],
        lifespan=lifespan,
        openapi_tags=[
            {"name": "v1", "description": "API version 1.0"},
            {"name": "v2", "description": "API version 2.0"},
        ],
    )
    app.state.database = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Total-Count", "Location", SUPPORTED_VERSIONS_HEADER],
    )

    @app.middleware("http")
    async def report_api_versions(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(version_headers())
        return response

    register_problem_handlers(app)

    app.include_router(weather_router)
    app.include_router(todos_router)

    return app
