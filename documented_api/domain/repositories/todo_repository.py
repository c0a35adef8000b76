from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from documented_api.domain.listing import TodoOrder
from documented_api.domain.todo import Todo
from documented_api.domain.value_objects import TodoId


class TodoRepository(ABC):
    """
    Abstraction over the todo store.
    """

    @abstractmethod
    async def count(self) -> int:
        """
        Total number of stored todos.
        """
        raise NotImplementedError

    @abstractmethod
    async def list_page(
        self,
        order: TodoOrder,
        offset: int,
        limit: int,
    ) -> List[Todo]:
        """
        Ordered window of todos: skip `offset`, take at most `limit`.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, todo: Todo) -> None:
        """
        Persist a new todo entity.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, todo_id: TodoId) -> Optional[Todo]:
        """
        Return todo entity by id or None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    async def replace(self, todo: Todo) -> bool:
        """
        Overwrite the stored todo with the same id.
        Returns False when there was nothing to overwrite.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, todo_id: TodoId) -> bool:
        """
        Remove the todo permanently. Returns False if it did not exist.
        """
        raise NotImplementedError
