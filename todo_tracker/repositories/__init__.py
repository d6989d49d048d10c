"""
This package contains the todo and label repositories.

Repositories are the only way the rest of the application reads or writes
todos and labels. Each contract in ``base`` has a database-backed and an
in-memory implementation.
"""

from todo_tracker.repositories.base import LabelRepository, TodoRepository
from todo_tracker.repositories.folding import JoinedRow, fold_entities
from todo_tracker.repositories.label import LabelRepositoryForDb
from todo_tracker.repositories.memory import LabelRepositoryForMemory, TodoRepositoryForMemory
from todo_tracker.repositories.todo import TodoRepositoryForDb

__all__ = [
    'TodoRepository',
    'LabelRepository',
    'JoinedRow',
    'fold_entities',
    'TodoRepositoryForDb',
    'LabelRepositoryForDb',
    'TodoRepositoryForMemory',
    'LabelRepositoryForMemory',
]
