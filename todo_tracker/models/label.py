from sqlalchemy import Column, Integer, String

from todo_tracker.models.base import Base


class Label(Base):
    """
    Table model for standalone labels.

    Labels are referenced by todos through the ``todo_labels`` join table
    but never owned by them.

    Attributes:
        id (int): Primary key, assigned by the database
        name (str): Display name of the label
    """
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Label {self.id} {self.name}>"
