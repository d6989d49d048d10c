"""
Base model configuration for SQLAlchemy ORM.

This module defines the base declarative class that all table models
inherit from. Every model registered on ``Base.metadata`` is created by
the database adapters at startup.

Usage:
    from todo_tracker.models.base import Base

    class MyModel(Base):
        __tablename__ = "my_table"

        id = Column(Integer, primary_key=True)
        name = Column(String)
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
