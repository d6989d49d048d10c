"""
Pydantic payload and entity models shared by the repositories and routes.
"""

from todo_tracker.schemas.label import CreateLabel, LabelEntity
from todo_tracker.schemas.todo import CreateTodo, TodoEntity, UpdateTodo

__all__ = ['CreateLabel', 'LabelEntity', 'CreateTodo', 'TodoEntity', 'UpdateTodo']
