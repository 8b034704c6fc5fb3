from fastapi import APIRouter, Depends, Path

from todoserver.dependencies import get_service
from todoserver.schemas.todo import UINT32_MAX, ToggleResult
from todoserver.services.todo_service import TodoService

router = APIRouter()

@router.post("/{todo_id}", response_model=ToggleResult)
async def toggle_todo(todo_id: int = Path(ge=0, le=UINT32_MAX), service: TodoService = Depends(get_service)):
    return await service.toggle_todo(todo_id)
