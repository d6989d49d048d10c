"""
Reconstruction of todo entities from a flat todo x label join.

The read queries return one row per (todo, label) pair, or a single row with
null label columns for a todo without labels. ``fold_entities`` turns that
result set back into nested ``TodoEntity`` objects.
"""

from typing import Dict, Iterable, List, NamedTuple, Optional

from todo_tracker.schemas.label import LabelEntity
from todo_tracker.schemas.todo import TodoEntity


class JoinedRow(NamedTuple):
    """One row of ``todos LEFT JOIN todo_labels LEFT JOIN labels``."""
    todo_id: int
    text: str
    completed: bool
    label_id: Optional[int] = None
    label_name: Optional[str] = None


def fold_entities(rows: Iterable[JoinedRow]) -> List[TodoEntity]:
    """
    Fold joined rows into todos carrying their labels.

    Todos come out in the order their id is first seen, and each todo's labels
    keep the order of their rows. Rows of one todo do not need to be
    contiguous. Repeated (todo, label) rows are kept as they are; uniqueness
    is the job of the association write path.

    Args:
        rows: Joined rows in query order

    Returns:
        List[TodoEntity]: One entity per distinct todo id
    """
    todos: List[TodoEntity] = []
    positions: Dict[int, int] = {}

    for row in rows:
        position = positions.get(row.todo_id)
        if position is None:
            positions[row.todo_id] = len(todos)
            todo = TodoEntity(id=row.todo_id, text=row.text, completed=row.completed)
            todos.append(todo)
        else:
            todo = todos[position]

        if row.label_id is not None:
            todo.labels.append(LabelEntity(id=row.label_id, name=row.label_name))

    return todos
