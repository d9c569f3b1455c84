"""
Database adapter factory.

This module provides a factory for creating the appropriate database adapter
based on the database URL.
"""

import logging
from typing import Optional

from passenger_service.adapters.database import DatabaseAdapter
from passenger_service.adapters.database.sqlite import SQLiteAdapter
from passenger_service.adapters.database.postgres import PostgresAdapter

logger = logging.getLogger(__name__)


def create_adapter(database_url: str) -> DatabaseAdapter:
    """Create an uninitialized adapter matching ``database_url``."""
    if database_url.startswith("sqlite"):
        return SQLiteAdapter(database_url)
    if database_url.startswith("postgresql"):
        return PostgresAdapter(database_url)
    raise ValueError(f"Unsupported database URL: {database_url.split('://')[0]}")


class DatabaseAdapterFactory:
    """Factory for creating database adapters."""

    _instance: Optional[DatabaseAdapter] = None

    @classmethod
    async def get_adapter(cls, database_url: Optional[str] = None) -> DatabaseAdapter:
        """Get the database adapter, creating and initializing it on first use.

        Only one adapter instance exists throughout the application.

        Args:
            database_url: Database URL; determined from the environment if None

        Returns:
            DatabaseAdapter: The initialized database adapter
        """
        if cls._instance is None:
            if database_url is None:
                # Imported here; utils.database depends on this module
                from passenger_service.utils.database import get_database_url
                database_url = get_database_url()

            adapter = create_adapter(database_url)
            await adapter.init()
            cls._instance = adapter
            logger.info(f"Using {type(adapter).__name__}")

        return cls._instance

    @classmethod
    async def close_adapter(cls) -> None:
        """Close the current database adapter if it exists."""
        if cls._instance:
            await cls._instance.close()
            cls._instance = None
            logger.info("Closed database adapter")
