from __future__ import annotations

from fastapi import Request

from documented_api.infrastructure.db.database import Database


def get_database(request: Request) -> Database:
    """
    The store lives for the whole application; see create_app's lifespan.
    """
    return request.app.state.database
