from pydantic import BaseModel, Field

UINT32_MAX = 2**32 - 1


class Todo(BaseModel):
    id: int = Field(ge=0, le=UINT32_MAX)
    text: str
    completed: bool = False


class ToggleResult(BaseModel):
    id: int
    completed: bool
