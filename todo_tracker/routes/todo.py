"""
Router for todo endpoints.

Handlers only translate between HTTP and the todo repository; repository
exceptions are turned into responses by the error handlers.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from todo_tracker.repositories.base import TodoRepository
from todo_tracker.schemas.todo import CreateTodo, TodoEntity, UpdateTodo

router = APIRouter(
    prefix="/todos",
    tags=["todos"]
)


def get_todo_repository(request: Request) -> TodoRepository:
    """Get the todo repository the app was built with."""
    return request.app.state.todo_repository


@router.post("", response_model=TodoEntity, status_code=status.HTTP_201_CREATED)
async def create_todo(
    payload: CreateTodo,
    repository: TodoRepository = Depends(get_todo_repository)
):
    """Create a new todo"""
    return await repository.create(payload)


@router.get("", response_model=List[TodoEntity])
async def all_todo(repository: TodoRepository = Depends(get_todo_repository)):
    """List all todos, newest first"""
    return await repository.all()


@router.get("/{id}", response_model=TodoEntity)
async def find_todo(id: int, repository: TodoRepository = Depends(get_todo_repository)):
    """Get a todo by id"""
    return await repository.find(id)


@router.patch("/{id}", response_model=TodoEntity)
async def update_todo(
    id: int,
    payload: UpdateTodo,
    repository: TodoRepository = Depends(get_todo_repository)
):
    """Partially update a todo"""
    return await repository.update(id, payload)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(id: int, repository: TodoRepository = Depends(get_todo_repository)):
    """Delete a todo"""
    await repository.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
