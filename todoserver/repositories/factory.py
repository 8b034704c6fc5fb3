from todoserver.config import Settings
from todoserver.repositories.base import TodoStore
from todoserver.repositories.memory_repo import InMemoryTodoStore
from todoserver.repositories.todo_repo import SqlTodoStore


def build_store(settings: Settings) -> TodoStore:
    if settings.backend == "memory":
        return InMemoryTodoStore()
    return SqlTodoStore.from_url(settings.database_url)
