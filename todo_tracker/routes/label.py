"""
Router for label endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from todo_tracker.repositories.base import LabelRepository
from todo_tracker.schemas.label import CreateLabel, LabelEntity

router = APIRouter(
    prefix="/labels",
    tags=["labels"]
)


def get_label_repository(request: Request) -> LabelRepository:
    """Get the label repository the app was built with."""
    return request.app.state.label_repository


@router.post("", response_model=LabelEntity, status_code=status.HTTP_201_CREATED)
async def create_label(
    payload: CreateLabel,
    repository: LabelRepository = Depends(get_label_repository)
):
    """Create a new label"""
    return await repository.create(payload.name)


@router.get("", response_model=List[LabelEntity])
async def all_label(repository: LabelRepository = Depends(get_label_repository)):
    """List all labels"""
    return await repository.all()


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_label(id: int, repository: LabelRepository = Depends(get_label_repository)):
    """Delete a label and detach it from every todo"""
    await repository.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
