from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from todo_tracker.models.base import Base


class Todo(Base):
    """
    Table model for todo rows.

    The labels of a todo are not stored here; they are materialized from
    ``todo_labels`` on every read.

    Attributes:
        id (int): Primary key, assigned by the database
        text (str): Todo text, 1 to 100 characters
        completed (bool): Completion flag, false on creation
    """
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(String(100), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<Todo {self.id}>"


class TodoLabel(Base):
    """
    Association between a todo and a label.

    The composite primary key keeps a (todo, label) pair unique. Rows are
    written only by the todo write paths and by label deletion.
    """
    __tablename__ = "todo_labels"

    todo_id = Column(Integer, ForeignKey("todos.id"), primary_key=True)
    label_id = Column(Integer, ForeignKey("labels.id"), primary_key=True)

    def __repr__(self):
        return f"<TodoLabel {self.todo_id}:{self.label_id}>"
