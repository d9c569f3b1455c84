"""
Database configuration and session management for the passenger service.

This module provides:
- Database URL selection for testing, development and production
- Dependency function for FastAPI to get database sessions
- Startup/shutdown hooks that open and close the database adapter

The application supports both SQLite (development, testing) and PostgreSQL
(production) databases through environment configuration.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from passenger_service.adapters.database.factory import DatabaseAdapterFactory
from passenger_service.utils.config import get_settings

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_SQLITE_URL = "sqlite+aiosqlite:///passengers.db"


def to_async_url(db_url: str) -> str:
    """Rewrite a plain database URL to use the async driver."""
    # Fix potential newline issues in .env file
    db_url = db_url.split('\n')[0].strip()

    if db_url.startswith("sqlite:///"):
        return db_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if db_url.startswith("postgres://"):
        return db_url.replace("postgres://", "postgresql+asyncpg://", 1)
    if db_url.startswith("postgresql://"):
        return db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return db_url


def get_database_url() -> str:
    """
    Get database URL based on environment.

    Returns:
        str: Async database connection URL
    """
    settings = get_settings()

    # For testing, always use in-memory SQLite
    if settings.TESTING:
        logger.info("Using in-memory SQLite database for testing")
        return "sqlite+aiosqlite://"

    env = settings.ENVIRONMENT.lower()
    logger.info(f"Current environment: {env}")

    if env == "development":
        if settings.DATABASE_URL_DEV:
            db_url = to_async_url(settings.DATABASE_URL_DEV)
            logger.info(f"Using database for development: {db_url.split('://')[0]}")
            return db_url

        logger.info("Using default SQLite database for development")
        return DEFAULT_SQLITE_URL

    if settings.DATABASE_URL:
        db_url = to_async_url(settings.DATABASE_URL)
        logger.info(f"Using database for {env}: {db_url.split('://')[0]}")
        return db_url

    logger.warning(f"No DATABASE_URL found, falling back to SQLite for {env}")
    return DEFAULT_SQLITE_URL


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session.

    This is a FastAPI dependency that provides a database session
    for route handlers.

    Yields:
        AsyncSession: A database session
    """
    adapter = await DatabaseAdapterFactory.get_adapter()
    async with adapter.get_session() as session:
        yield session


async def init_db() -> None:
    """Initialize the database connection and schema.

    This function should be called during application startup.
    """
    try:
        await DatabaseAdapterFactory.get_adapter(get_database_url())
    except Exception as e:
        logger.error(f"Error initializing database: {str(e)}")
        raise


async def close_db() -> None:
    """Close the database connection.

    This function should be called during application shutdown.
    """
    try:
        await DatabaseAdapterFactory.close_adapter()
    except Exception as e:
        logger.error(f"Error closing database connection: {str(e)}")
        raise
