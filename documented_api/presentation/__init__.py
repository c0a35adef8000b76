# documented_api/presentation/__init__.py

"""
Presentation layer: the entry point of the system.
HTTP routers live in `http`, thin store-wiring facades in `usecases`.
"""

__all__ = [
    "http",
    "usecases",
]
