"""
Base repository pattern implementation for database operations.

This module provides a generic async repository that specific model
repositories extend. It owns the commit/rollback discipline shared by all
stores: a write is either fully committed or rolled back, and any
SQLAlchemy failure surfaces as StorageError.
"""

from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar
import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from passenger_service.exceptions import StorageError
from passenger_service.models.base import Base

# Type variable for the model
T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic repository for database operations.

    Attributes:
        db (AsyncSession): SQLAlchemy async database session
        model (Type[T]): SQLAlchemy model class
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        """
        Initialize the repository with a database session and model class.

        Args:
            db (AsyncSession): SQLAlchemy async database session
            model (Type[T]): SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def get_all(self) -> List[T]:
        """
        Get all records in insertion order.

        Returns:
            List[T]: List of model instances
        """
        return await self.fetch_all(select(self.model).order_by(self.model.id))

    async def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get a record by ID.

        Args:
            id (Any): Primary key value

        Returns:
            Optional[T]: Model instance if found, None otherwise
        """
        return await self.fetch_one(select(self.model).where(self.model.id == id))

    async def create(self, item: T) -> T:
        """
        Persist a new record.

        Args:
            item (T): Unsaved model instance

        Returns:
            T: The same instance with its primary key assigned
        """
        await self.create_many([item])
        return item

    async def create_many(self, items: Iterable[T]) -> List[T]:
        """
        Persist several new records in a single transaction.

        Either every record is committed or none is.

        Args:
            items (Iterable[T]): Unsaved model instances

        Returns:
            List[T]: The persisted instances
        """
        items = list(items)
        if not items:
            return items
        try:
            self.db.add_all(items)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._storage_error("create", e) from e
        except asyncio.CancelledError:
            await self.db.rollback()
            raise
        return items

    async def fetch_all(self, stmt) -> List[T]:
        """Execute a select statement and return all scalar results."""
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._storage_error("query", e) from e

    async def fetch_one(self, stmt) -> Optional[T]:
        """Execute a select statement and return at most one scalar result."""
        try:
            result = await self.db.execute(stmt)
            return result.scalars().first()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._storage_error("query", e) from e

    def _storage_error(self, operation: str, exc: Exception) -> StorageError:
        logger.error(f"Database error during {self.model.__name__} {operation}: {str(exc)}")
        return StorageError(f"Could not {operation} {self.model.__tablename__}: {str(exc)}")
