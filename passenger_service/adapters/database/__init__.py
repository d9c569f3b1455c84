"""
Database adapters for seamless switching between SQLite and PostgreSQL.

An adapter owns the async engine and session factory for one database and
creates the schema on initialization. Subclasses supply the engine
configuration suited to their database engine.
"""

from abc import ABC, abstractmethod
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# Importing the package registers every model on Base.metadata
from passenger_service.models import Base

logger = logging.getLogger(__name__)


class DatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    def __init__(self, database_url: str):
        """Initialize the adapter.

        Args:
            database_url: Async SQLAlchemy database URL
        """
        self.database_url = database_url
        self.engine = None
        self.session_factory = None

    @abstractmethod
    def create_engine(self) -> AsyncEngine:
        """Create the async engine for this database."""
        pass

    async def init(self) -> None:
        """Initialize the database connection and create tables."""
        try:
            self.engine = self.create_engine()
            self.session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            logger.info(f"Initialized {type(self).__name__} database")
        except Exception as e:
            logger.error(f"Error initializing database: {str(e)}")
            raise

    def get_session(self) -> AsyncSession:
        """Get a database session.

        Returns:
            AsyncSession: A new database session
        """
        if not self.session_factory:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self.session_factory()

    async def close(self) -> None:
        """Close the database connection."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info(f"Closed {type(self).__name__} database connection")
