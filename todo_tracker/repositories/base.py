"""
Repository contracts for todos and labels.

Every backing store (database or in-memory) implements these interfaces, so
callers can swap one for the other without changing behaviour. Failures are
reported with the exceptions in ``todo_tracker.exceptions``:

- ``NotFoundError`` when the requested id does not exist
- ``UnexpectedError`` for any other storage failure
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from todo_tracker.exceptions import UnexpectedError
from todo_tracker.schemas.label import LABEL_NAME_MAX_LENGTH, LabelEntity
from todo_tracker.schemas.todo import (
    TODO_TEXT_MAX_LENGTH,
    CreateTodo,
    TodoEntity,
    UpdateTodo,
)


class TodoRepository(ABC):
    """Abstract base class for todo stores."""

    @abstractmethod
    async def create(self, payload: CreateTodo) -> TodoEntity:
        """Persist a new, not yet completed todo with the given labels.

        Args:
            payload: Validated creation payload

        Returns:
            The stored todo with its labels ordered by label id

        Raises:
            UnexpectedError: If a label id cannot be resolved or the write fails
        """
        pass

    @abstractmethod
    async def find(self, id: int) -> TodoEntity:
        """Get a todo by ID.

        Raises:
            NotFoundError: If no todo has this id
        """
        pass

    @abstractmethod
    async def all(self) -> List[TodoEntity]:
        """List every todo, most recent (highest id) first."""
        pass

    @abstractmethod
    async def update(self, id: int, payload: UpdateTodo) -> TodoEntity:
        """Apply a partial update to a todo.

        Fields left as ``None`` in the payload keep their stored value. When
        ``labels`` is given it replaces the whole label set.

        Raises:
            NotFoundError: If no todo has this id
            UnexpectedError: If a label id cannot be resolved or the write fails
        """
        pass

    @abstractmethod
    async def delete(self, id: int) -> None:
        """Delete a todo and all of its label associations.

        Raises:
            NotFoundError: If no todo has this id
        """
        pass


class LabelRepository(ABC):
    """Abstract base class for label stores."""

    @abstractmethod
    async def create(self, name: str) -> LabelEntity:
        """Create a new label."""
        pass

    @abstractmethod
    async def find(self, id: int) -> LabelEntity:
        """Get a label by ID.

        Raises:
            NotFoundError: If no label has this id
        """
        pass

    @abstractmethod
    async def all(self) -> List[LabelEntity]:
        """List every label ordered by id."""
        pass

    @abstractmethod
    async def delete(self, id: int) -> None:
        """Delete a label and detach it from every todo.

        Raises:
            NotFoundError: If no label has this id
        """
        pass


def check_text(text: str) -> str:
    """Re-check todo text length for payloads that skipped validation."""
    if not isinstance(text, str) or not 1 <= len(text) <= TODO_TEXT_MAX_LENGTH:
        raise UnexpectedError(
            f"todo text must be 1 to {TODO_TEXT_MAX_LENGTH} characters"
        )
    return text


def check_name(name: str) -> str:
    """Re-check label name length for payloads that skipped validation."""
    if not isinstance(name, str) or not 1 <= len(name) <= LABEL_NAME_MAX_LENGTH:
        raise UnexpectedError(
            f"label name must be 1 to {LABEL_NAME_MAX_LENGTH} characters"
        )
    return name


def unique_ids(ids: Iterable[int]) -> List[int]:
    """Drop repeated label ids, keeping the first occurrence of each."""
    return list(dict.fromkeys(ids))
