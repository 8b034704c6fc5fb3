from fastapi import APIRouter, Depends, Path, Response

from todoserver.dependencies import get_service
from todoserver.schemas.todo import UINT32_MAX, Todo
from todoserver.services.todo_service import TodoService

router = APIRouter()

@router.get("", response_model=list[Todo])
async def list_todos(service: TodoService = Depends(get_service)):
    return await service.list_todos()

@router.get("/{todo_id}", response_model=Todo)
async def get_todo(todo_id: int = Path(ge=0, le=UINT32_MAX), service: TodoService = Depends(get_service)):
    return await service.get_todo(todo_id)

@router.post("", status_code=201, response_class=Response)
async def create_todo(todo: Todo, service: TodoService = Depends(get_service)):
    await service.create_todo(todo)
    return Response(status_code=201)

@router.put("", response_class=Response)
async def update_todo(todo: Todo, service: TodoService = Depends(get_service)):
    await service.update_todo(todo)
    return Response(status_code=200)
