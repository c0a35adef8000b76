from .todo_sqlalchemy_repository import TodoSqlAlchemyRepository

__all__ = [
    "TodoSqlAlchemyRepository",
]
