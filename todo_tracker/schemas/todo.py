"""
Pydantic models for todos.

``CreateTodo`` and ``UpdateTodo`` are the validated payloads consumed by the
todo repositories; ``TodoEntity`` is what they return.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from todo_tracker.schemas.label import LabelEntity

TODO_TEXT_MAX_LENGTH = 100


class TodoEntity(BaseModel):
    """A todo together with its materialized labels"""
    id: int
    text: str
    completed: bool = False
    labels: List[LabelEntity] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class CreateTodo(BaseModel):
    """Model for creating a new todo"""
    text: str = Field(..., min_length=1, max_length=TODO_TEXT_MAX_LENGTH)
    labels: List[int] = Field(default_factory=list)


class UpdateTodo(BaseModel):
    """
    Model for updating an existing todo.

    Every field is optional. A field left as ``None`` keeps the stored value;
    ``labels`` replaces the whole label set when present, so ``[]`` clears it.
    """
    text: Optional[str] = Field(None, min_length=1, max_length=TODO_TEXT_MAX_LENGTH)
    completed: Optional[bool] = None
    labels: Optional[List[int]] = None
