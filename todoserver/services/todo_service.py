import logging

from todoserver.repositories.base import TodoStore
from todoserver.schemas.todo import Todo, ToggleResult

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, store: TodoStore):
        self.store = store

    async def list_todos(self) -> list[Todo]:
        return await self.store.list()

    async def get_todo(self, todo_id: int) -> Todo:
        return await self.store.get(todo_id)

    async def create_todo(self, todo: Todo) -> None:
        await self.store.insert(todo)
        logger.info("created todo %s", todo.id)

    async def update_todo(self, todo: Todo) -> None:
        await self.store.update(todo)
        logger.info("updated todo %s", todo.id)

    async def toggle_todo(self, todo_id: int) -> ToggleResult:
        completed = await self.store.toggle(todo_id)
        logger.info("toggled todo %s to completed=%s", todo_id, completed)
        return ToggleResult(id=todo_id, completed=completed)
