from todoserver.errors import TodoConflict, TodoNotFound
from todoserver.repositories.base import TodoStore
from todoserver.repositories.locks import ReadWriteLock
from todoserver.schemas.todo import Todo


class InMemoryTodoStore(TodoStore):
    """Todos kept in process memory behind a read/write lock.

    Reads share the lock, writes take it exclusively. Nothing inside the
    lock awaits anything but the lock itself.
    """

    def __init__(self) -> None:
        self._todos: list[Todo] = []
        self._index: dict[int, int] = {}
        self._lock = ReadWriteLock()

    async def list(self) -> list[Todo]:
        async with self._lock.read():
            return [todo.model_copy() for todo in self._todos]

    async def get(self, todo_id: int) -> Todo:
        async with self._lock.read():
            return self._find(todo_id).model_copy()

    async def insert(self, todo: Todo) -> None:
        async with self._lock.write():
            if todo.id in self._index:
                raise TodoConflict(todo.id)
            self._index[todo.id] = len(self._todos)
            self._todos.append(todo.model_copy())

    async def update(self, todo: Todo) -> None:
        async with self._lock.write():
            position = self._index.get(todo.id)
            if position is None:
                raise TodoNotFound(todo.id)
            self._todos[position] = todo.model_copy()

    async def toggle(self, todo_id: int) -> bool:
        async with self._lock.write():
            todo = self._find(todo_id)
            todo.completed = not todo.completed
            return todo.completed

    def _find(self, todo_id: int) -> Todo:
        position = self._index.get(todo_id)
        if position is None:
            raise TodoNotFound(todo_id)
        return self._todos[position]
