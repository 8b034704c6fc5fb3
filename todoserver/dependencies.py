from fastapi import Request

from todoserver.repositories.base import TodoStore
from todoserver.services.todo_service import TodoService


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


def get_service(request: Request) -> TodoService:
    return TodoService(get_store(request))
