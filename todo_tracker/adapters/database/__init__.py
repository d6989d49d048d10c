"""
Database adapters for seamless switching between SQLite and PostgreSQL.

This module provides a consistent interface for engine setup and session
creation regardless of the underlying database engine. The repositories only
ever ask an adapter for a session.
"""

from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession


class DatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    engine = None
    session_factory = None

    @abstractmethod
    async def init(self) -> None:
        """Initialize the database connection and create tables."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the database connection."""
        pass

    async def get_session(self) -> AsyncSession:
        """Get a database session.

        Returns:
            AsyncSession: A new database session

        Raises:
            RuntimeError: If ``init()`` has not been called
        """
        if not self.session_factory:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self.session_factory()
