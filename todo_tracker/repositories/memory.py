"""
In-memory repositories.

These stores keep their records in a dict guarded by a reader/writer lock:
reads share the lock, every mutation holds it exclusively for its whole
duration, so no caller can observe a half-applied write. They satisfy the same
contracts as the database stores, which lets the HTTP layer and the contract
tests run without a database.
"""

import logging
from typing import Dict, Iterable, List

from todo_tracker.exceptions import NotFoundError, UnexpectedError
from todo_tracker.repositories.base import (
    LabelRepository,
    TodoRepository,
    check_name,
    check_text,
    unique_ids,
)
from todo_tracker.schemas.label import LabelEntity
from todo_tracker.schemas.todo import CreateTodo, TodoEntity, UpdateTodo
from todo_tracker.utils.locks import ReadWriteLock

logger = logging.getLogger(__name__)


class TodoRepositoryForMemory(TodoRepository):
    """
    Todo repository kept in process memory.

    Label ids are resolved against a fixed catalog passed at construction;
    labels created later through a label repository are not visible here.
    A todo's labels are kept ordered by label id, as the database store
    returns them.
    Ids come from a counter that never goes backwards, so an id freed by a
    delete is not handed out again.
    """

    def __init__(self, labels: Iterable[LabelEntity] = ()):
        """
        Args:
            labels: Label catalog used to resolve label ids in payloads
        """
        self._store: Dict[int, TodoEntity] = {}
        self._labels: Dict[int, LabelEntity] = {label.id: label for label in labels}
        self._last_id = 0
        self._lock = ReadWriteLock()

    def _resolve_labels(self, label_ids: Iterable[int]) -> List[LabelEntity]:
        labels = []
        for label_id in sorted(unique_ids(label_ids)):
            label = self._labels.get(label_id)
            if label is None:
                raise UnexpectedError(f"label {label_id} does not exist")
            labels.append(label.model_copy())
        return labels

    async def create(self, payload: CreateTodo) -> TodoEntity:
        text = check_text(payload.text)
        async with self._lock.write():
            labels = self._resolve_labels(payload.labels)
            self._last_id += 1
            todo = TodoEntity(id=self._last_id, text=text, completed=False, labels=labels)
            self._store[todo.id] = todo
            logger.debug(f"Created todo {todo.id} in memory")
            return todo.model_copy(deep=True)

    async def find(self, id: int) -> TodoEntity:
        async with self._lock.read():
            todo = self._store.get(id)
            if todo is None:
                raise NotFoundError(id)
            return todo.model_copy(deep=True)

    async def all(self) -> List[TodoEntity]:
        async with self._lock.read():
            return [
                self._store[id].model_copy(deep=True)
                for id in sorted(self._store, reverse=True)
            ]

    async def update(self, id: int, payload: UpdateTodo) -> TodoEntity:
        async with self._lock.write():
            todo = self._store.get(id)
            if todo is None:
                raise NotFoundError(id)

            text = check_text(payload.text) if payload.text is not None else todo.text
            completed = payload.completed if payload.completed is not None else todo.completed
            if payload.labels is not None:
                labels = self._resolve_labels(payload.labels)
            else:
                labels = todo.labels

            updated = TodoEntity(id=id, text=text, completed=completed, labels=labels)
            self._store[id] = updated
            return updated.model_copy(deep=True)

    async def delete(self, id: int) -> None:
        async with self._lock.write():
            if self._store.pop(id, None) is None:
                raise NotFoundError(id)


class LabelRepositoryForMemory(LabelRepository):
    """Label repository kept in process memory."""

    def __init__(self):
        self._store: Dict[int, LabelEntity] = {}
        self._last_id = 0
        self._lock = ReadWriteLock()

    async def create(self, name: str) -> LabelEntity:
        name = check_name(name)
        async with self._lock.write():
            self._last_id += 1
            label = LabelEntity(id=self._last_id, name=name)
            self._store[label.id] = label
            return label.model_copy()

    async def find(self, id: int) -> LabelEntity:
        async with self._lock.read():
            label = self._store.get(id)
            if label is None:
                raise NotFoundError(id)
            return label.model_copy()

    async def all(self) -> List[LabelEntity]:
        async with self._lock.read():
            return [self._store[id].model_copy() for id in sorted(self._store)]

    async def delete(self, id: int) -> None:
        async with self._lock.write():
            if self._store.pop(id, None) is None:
                raise NotFoundError(id)
