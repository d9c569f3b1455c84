"""
PostgreSQL database adapter.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from passenger_service.adapters.database import DatabaseAdapter
from passenger_service.utils.config import get_settings

logger = logging.getLogger(__name__)


class PostgresAdapter(DatabaseAdapter):
    """PostgreSQL database adapter."""

    def create_engine(self) -> AsyncEngine:
        settings = get_settings()
        logger.info(
            f"Using connection pool for PostgreSQL database "
            f"(size={settings.POOL_SIZE}, max_overflow={settings.MAX_OVERFLOW})"
        )
        return create_async_engine(
            self.database_url,
            echo=settings.DEBUG,
            pool_size=settings.POOL_SIZE,
            max_overflow=settings.MAX_OVERFLOW,
            pool_timeout=settings.POOL_TIMEOUT,
            pool_recycle=settings.POOL_RECYCLE,
            pool_pre_ping=True,  # Verify connections before using them
        )
