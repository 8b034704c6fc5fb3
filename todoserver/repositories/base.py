from abc import ABC, abstractmethod

from todoserver.schemas.todo import Todo


class TodoStore(ABC):
    """Shared set of todos, safe to call from concurrent request handlers.

    Both backends raise the same errors for the same inputs:
    ``TodoNotFound`` for an unknown id, ``TodoConflict`` for a duplicate insert,
    ``PersistenceFailure`` when storage itself fails.
    """

    async def create_schema(self) -> None:
        """Prepare backing storage. Idempotent."""

    async def close(self) -> None:
        pass

    @abstractmethod
    async def list(self) -> list[Todo]:
        """All todos in insertion order."""

    @abstractmethod
    async def get(self, todo_id: int) -> Todo:
        ...

    @abstractmethod
    async def insert(self, todo: Todo) -> None:
        ...

    @abstractmethod
    async def update(self, todo: Todo) -> None:
        """Replace text and completed of an existing todo."""

    @abstractmethod
    async def toggle(self, todo_id: int) -> bool:
        """Flip ``completed`` and return the new value."""
