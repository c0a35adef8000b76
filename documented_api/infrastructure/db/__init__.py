from .database import Database, DatabaseConfig, load_config_from_env

__all__ = [
    "Database",
    "DatabaseConfig",
    "load_config_from_env",
]
