"""
SQLite database adapter implementation.

This module provides a SQLite-specific implementation of the DatabaseAdapter
interface, used for development and testing.
"""

import logging
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from todo_tracker.adapters.database import DatabaseAdapter
from todo_tracker.models import Base

logger = logging.getLogger(__name__)

IN_MEMORY_URLS = ("sqlite+aiosqlite://", "sqlite+aiosqlite:///:memory:")


class SQLiteAdapter(DatabaseAdapter):
    """SQLite adapter implementation."""

    def __init__(self, database_url: Optional[str] = None, echo: bool = False):
        """Initialize the SQLite adapter.

        Args:
            database_url: Optional database URL. If not provided, uses in-memory SQLite.
            echo: Log every SQL statement
        """
        self.database_url = database_url or "sqlite+aiosqlite://"
        self.echo = echo
        self.engine = None
        self.session_factory = None

    async def init(self) -> None:
        """Initialize the SQLite database connection and create tables."""
        try:
            # An in-memory database lives only as long as its connection
            in_memory = self.database_url in IN_MEMORY_URLS
            self.engine = create_async_engine(
                self.database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool if in_memory else NullPool,
                echo=self.echo,
            )

            # Enable foreign key support for SQLite
            @event.listens_for(self.engine.sync_engine, "connect", insert=True)
            def _enable_foreign_keys(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

            self.session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )

            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            logger.info(f"Initialized SQLite database at {self.database_url}")
        except Exception as e:
            logger.error(f"Error initializing SQLite database: {str(e)}")
            raise

    async def close(self) -> None:
        """Close the SQLite database connection."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info("Closed SQLite database connection")
