"""
Documented todo API: FastAPI routers over an in-memory SQLAlchemy store.
"""

__version__ = "2.0.0"
