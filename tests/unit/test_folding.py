"""
Unit tests for folding joined rows into todo entities.
"""

from todo_tracker.repositories.folding import JoinedRow, fold_entities
from todo_tracker.schemas.label import LabelEntity
from todo_tracker.schemas.todo import TodoEntity

LABEL_1 = LabelEntity(id=1, name="label 1")
LABEL_2 = LabelEntity(id=2, name="label 2")


def test_fold_entities_groups_labels_per_todo():
    rows = [
        JoinedRow(1, "todo 1", False, LABEL_1.id, LABEL_1.name),
        JoinedRow(1, "todo 1", False, LABEL_2.id, LABEL_2.name),
        JoinedRow(2, "todo 2", False, LABEL_1.id, LABEL_1.name),
    ]

    assert fold_entities(rows) == [
        TodoEntity(id=1, text="todo 1", completed=False, labels=[LABEL_1, LABEL_2]),
        TodoEntity(id=2, text="todo 2", completed=False, labels=[LABEL_1]),
    ]


def test_fold_entities_todo_without_labels():
    """A null label from the outer join yields an empty label list."""
    rows = [JoinedRow(3, "no labels", True, None, None)]

    assert fold_entities(rows) == [
        TodoEntity(id=3, text="no labels", completed=True, labels=[]),
    ]


def test_fold_entities_rows_need_not_be_contiguous():
    rows = [
        JoinedRow(2, "todo 2", False, LABEL_2.id, LABEL_2.name),
        JoinedRow(1, "todo 1", False, LABEL_2.id, LABEL_2.name),
        JoinedRow(2, "todo 2", False, LABEL_1.id, LABEL_1.name),
    ]

    todos = fold_entities(rows)

    assert [todo.id for todo in todos] == [2, 1]
    assert todos[0].labels == [LABEL_2, LABEL_1]
    assert todos[1].labels == [LABEL_2]


def test_fold_entities_keeps_repeated_labels():
    rows = [
        JoinedRow(1, "todo 1", False, LABEL_1.id, LABEL_1.name),
        JoinedRow(1, "todo 1", False, LABEL_1.id, LABEL_1.name),
    ]

    todos = fold_entities(rows)

    assert len(todos) == 1
    assert todos[0].labels == [LABEL_1, LABEL_1]


def test_fold_entities_empty_input():
    assert fold_entities([]) == []


def test_fold_entities_accepts_a_generator():
    rows = (JoinedRow(i, f"todo {i}", False) for i in (5, 4))

    assert [todo.id for todo in fold_entities(rows)] == [5, 4]
