"""
Database-backed label repository.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from todo_tracker.adapters.database import DatabaseAdapter
from todo_tracker.exceptions import NotFoundError, UnexpectedError
from todo_tracker.models.label import Label
from todo_tracker.models.todo import TodoLabel
from todo_tracker.repositories.base import LabelRepository, check_name
from todo_tracker.schemas.label import LabelEntity

logger = logging.getLogger(__name__)


class LabelRepositoryForDb(LabelRepository):
    """Label repository on top of a SQLAlchemy async engine."""

    def __init__(self, adapter: DatabaseAdapter):
        self.adapter = adapter

    async def create(self, name: str) -> LabelEntity:
        name = check_name(name)
        session = await self.adapter.get_session()
        try:
            async with session.begin():
                label = Label(name=name)
                session.add(label)
                await session.flush()
                created = LabelEntity.model_validate(label)
            logger.info(f"Created label {created.id}")
            return created
        except SQLAlchemyError as e:
            logger.error(f"Error creating label: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()

    async def find(self, id: int) -> LabelEntity:
        session = await self.adapter.get_session()
        try:
            label = await session.get(Label, id)
            if label is None:
                raise NotFoundError(id)
            return LabelEntity.model_validate(label)
        except SQLAlchemyError as e:
            logger.error(f"Error finding label {id}: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()

    async def all(self) -> List[LabelEntity]:
        session = await self.adapter.get_session()
        try:
            result = await session.execute(select(Label).order_by(Label.id))
            return [LabelEntity.model_validate(label) for label in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error listing labels: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()

    async def delete(self, id: int) -> None:
        session = await self.adapter.get_session()
        try:
            async with session.begin():
                # Detach from todos first so no association outlives the label
                await session.execute(delete(TodoLabel).where(TodoLabel.label_id == id))
                result = await session.execute(delete(Label).where(Label.id == id))
                if result.rowcount == 0:
                    raise NotFoundError(id)
            logger.info(f"Deleted label {id}")
        except SQLAlchemyError as e:
            logger.error(f"Error deleting label {id}: {str(e)}")
            raise UnexpectedError(str(e)) from e
        finally:
            await session.close()
