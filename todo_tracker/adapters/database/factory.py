"""
Database adapter factory.

This module provides a factory for creating the appropriate database adapter
based on the environment configuration.
"""

import logging
from typing import Optional

from todo_tracker.adapters.database import DatabaseAdapter
from todo_tracker.adapters.database.postgres import PostgresAdapter
from todo_tracker.adapters.database.sqlite import SQLiteAdapter
from todo_tracker.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_adapter(settings: Settings) -> DatabaseAdapter:
    """Build an uninitialized adapter for the configured environment.

    ``development`` uses SQLite (``DATABASE_URL`` if set, else ``SQLITE_PATH``);
    every other environment requires a PostgreSQL ``DATABASE_URL``.
    """
    environment = settings.ENVIRONMENT.lower()

    if environment == "development":
        database_url = settings.DATABASE_URL or f"sqlite+aiosqlite:///{settings.SQLITE_PATH}"
        logger.info("Using SQLite adapter for development")
        return SQLiteAdapter(database_url, echo=settings.DEBUG)

    if not settings.DATABASE_URL:
        raise ValueError("DATABASE_URL environment variable is required for non-development environments")
    logger.info(f"Using PostgreSQL adapter for {environment}")
    return PostgresAdapter(
        settings.DATABASE_URL,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        echo=settings.DEBUG,
    )


class DatabaseAdapterFactory:
    """Factory for creating database adapters."""

    _instance: Optional[DatabaseAdapter] = None

    @classmethod
    async def get_adapter(cls, settings: Optional[Settings] = None) -> DatabaseAdapter:
        """Get the appropriate database adapter based on environment.

        Returns:
            DatabaseAdapter: The configured, initialized database adapter

        Only one adapter instance exists at a time; it is created and
        initialized on first use.
        """
        if cls._instance is None:
            adapter = create_adapter(settings or get_settings())
            await adapter.init()
            cls._instance = adapter

        return cls._instance

    @classmethod
    async def close_adapter(cls) -> None:
        """Close the current database adapter if it exists."""
        if cls._instance:
            await cls._instance.close()
            cls._instance = None
            logger.info("Closed database adapter")
