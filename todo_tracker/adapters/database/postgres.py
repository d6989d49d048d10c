"""
PostgreSQL database adapter.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from todo_tracker.adapters.database import DatabaseAdapter
from todo_tracker.models import Base

logger = logging.getLogger(__name__)


class PostgresAdapter(DatabaseAdapter):
    """PostgreSQL database adapter."""

    def __init__(self, database_url: str = None, pool_size: int = 5,
                 max_overflow: int = 10, echo: bool = False):
        """Initialize the adapter.

        Args:
            database_url (str, optional): Database connection URL
            pool_size (int): Connections kept open in the pool
            max_overflow (int): Extra connections allowed above pool_size
            echo (bool): Log every SQL statement
        """
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.echo = echo
        self.engine = None
        self.session_factory = None

    async def init(self) -> None:
        """Initialize the database connection and create tables."""
        if not self.database_url:
            raise ValueError("Database URL is required")

        self.engine = create_async_engine(
            self.database_url,
            echo=self.echo,
            pool_size=self.pool_size,
            max_overflow=self.max_overflow,
            pool_pre_ping=True,
        )

        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Initialized PostgreSQL database")

    async def close(self) -> None:
        """Close the database connection."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info("Closed PostgreSQL database connection")
