"""
This package contains the database models for the application.
"""

from todo_tracker.models.base import Base
from todo_tracker.models.label import Label
from todo_tracker.models.todo import Todo, TodoLabel

__all__ = ['Base', 'Label', 'Todo', 'TodoLabel']
