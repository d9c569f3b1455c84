"""
SQLite database adapter implementation.

Used for development and testing. Foreign keys are enforced on every
connection so the notifications.passenger_id constraint holds.
"""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from passenger_service.adapters.database import DatabaseAdapter
from passenger_service.utils.config import get_settings

logger = logging.getLogger(__name__)

IN_MEMORY_URLS = ("sqlite+aiosqlite://", "sqlite+aiosqlite:///:memory:")


class SQLiteAdapter(DatabaseAdapter):
    """SQLite adapter implementation."""

    def __init__(self, database_url: str = None):
        """Initialize the SQLite adapter.

        Args:
            database_url: Optional database URL. If not provided, uses in-memory SQLite.
        """
        super().__init__(database_url or "sqlite+aiosqlite://")

    @property
    def in_memory(self) -> bool:
        return self.database_url in IN_MEMORY_URLS

    def create_engine(self) -> AsyncEngine:
        # An in-memory database lives only as long as its single connection
        poolclass = StaticPool if self.in_memory else NullPool
        engine = create_async_engine(
            self.database_url,
            connect_args={"check_same_thread": False},
            poolclass=poolclass,
            echo=get_settings().DEBUG,
        )

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        logger.info(f"Using {poolclass.__name__} for SQLite database")
        return engine
