"""
Database-backed todo repository.

Each write runs inside a single session transaction: the todo row and its
label associations are committed together or not at all. Reads join
``todos``, ``todo_labels`` and ``labels`` and fold the flat result back into
``TodoEntity`` objects.
"""

import logging
from typing import List

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from todo_tracker.adapters.database import DatabaseAdapter
from todo_tracker.exceptions import NotFoundError, UnexpectedError
from todo_tracker.models.label import Label
from todo_tracker.models.todo import Todo, TodoLabel
from todo_tracker.repositories.base import TodoRepository, check_text, unique_ids
from todo_tracker.repositories.folding import JoinedRow, fold_entities
from todo_tracker.schemas.todo import CreateTodo, TodoEntity, UpdateTodo

logger = logging.getLogger(__name__)


def joined_todos() -> Select:
    """Select every todo with each of its labels, one row per pair."""
    return (
        select(
            Todo.id.label("todo_id"),
            Todo.text,
            Todo.completed,
            Label.id.label("label_id"),
            Label.name.label("label_name"),
        )
        .select_from(Todo)
        .outerjoin(TodoLabel, TodoLabel.todo_id == Todo.id)
        .outerjoin(Label, Label.id == TodoLabel.label_id)
    )


class TodoRepositoryForDb(TodoRepository):
    """
    Todo repository on top of a SQLAlchemy async engine.

    Attributes:
        adapter (DatabaseAdapter): Source of database sessions
    """

    def __init__(self, adapter: DatabaseAdapter):
        """
        Initialize the repository with a database adapter.

        Args:
            adapter (DatabaseAdapter): An initialized database adapter
        """
        self.adapter = adapter

    async def _fetch(self, session: AsyncSession, id: int) -> TodoEntity:
        result = await session.execute(
            joined_todos().where(Todo.id == id).order_by(Label.id)
        )
        todos = fold_entities(JoinedRow(*row) for row in result.all())
        if not todos:
            raise NotFoundError(id)
        return todos[0]

    async def _insert_labels(self, session: AsyncSession, todo_id: int, label_ids: List[int]) -> None:
        if not label_ids:
            return
        await session.execute(
            insert(TodoLabel),
            [{"todo_id": todo_id, "label_id": label_id} for label_id in label_ids],
        )

    async def create(self, payload: CreateTodo) -> TodoEntity:
        text = check_text(payload.text)
        label_ids = unique_ids(payload.labels)

        session = await self.adapter.get_session()
        try:
            async with session.begin():
                todo = Todo(text=text, completed=False)
                session.add(todo)
                await session.flush()
                await self._insert_labels(session, todo.id, label_ids)
                created = await self._fetch(session, todo.id)
            logger.info(f"Created todo {created.id} with labels {label_ids}")
            return created
        except SQLAlchemyError as e:
            logger.error(f"Error creating todo: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()

    async def find(self, id: int) -> TodoEntity:
        session = await self.adapter.get_session()
        try:
            return await self._fetch(session, id)
        except SQLAlchemyError as e:
            logger.error(f"Error finding todo {id}: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()

    async def all(self) -> List[TodoEntity]:
        session = await self.adapter.get_session()
        try:
            result = await session.execute(
                joined_todos().order_by(Todo.id.desc(), Label.id)
            )
            return fold_entities(JoinedRow(*row) for row in result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing todos: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()

    async def update(self, id: int, payload: UpdateTodo) -> TodoEntity:
        text = check_text(payload.text) if payload.text is not None else None
        label_ids = unique_ids(payload.labels) if payload.labels is not None else None

        session = await self.adapter.get_session()
        try:
            async with session.begin():
                # Row lock serializes writers of the same todo
                result = await session.execute(
                    select(Todo).where(Todo.id == id).with_for_update()
                )
                todo = result.scalar_one_or_none()
                if todo is None:
                    logger.info(f"Todo {id} not found for update")
                    raise NotFoundError(id)

                if text is not None:
                    todo.text = text
                if payload.completed is not None:
                    todo.completed = payload.completed
                await session.flush()

                if label_ids is not None:
                    await session.execute(delete(TodoLabel).where(TodoLabel.todo_id == id))
                    await self._insert_labels(session, id, label_ids)

                updated = await self._fetch(session, id)
            logger.info(f"Updated todo {id}")
            return updated
        except SQLAlchemyError as e:
            logger.error(f"Error updating todo {id}: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()

    async def delete(self, id: int) -> None:
        session = await self.adapter.get_session()
        try:
            async with session.begin():
                await session.execute(delete(TodoLabel).where(TodoLabel.todo_id == id))
                result = await session.execute(delete(Todo).where(Todo.id == id))
                if result.rowcount == 0:
                    logger.info(f"Todo {id} not found for delete")
                    raise NotFoundError(id)
            logger.info(f"Deleted todo {id}")
        except SQLAlchemyError as e:
            logger.error(f"Error deleting todo {id}: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()
