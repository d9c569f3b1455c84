"""
Repository for Notification model operations.

Notifications are immutable once stored: there is no update, and the only
removal outside a passenger delete is the administrative delete_all.
"""

from typing import List
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from passenger_service.models.notification import Notification
from passenger_service.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class NotificationRepository(BaseRepository[Notification]):
    """
    Repository for Notification database operations.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with a database session.

        Args:
            db (AsyncSession): SQLAlchemy async database session
        """
        super().__init__(db, Notification)

    async def get_by_passenger_id(self, passenger_id: int) -> List[Notification]:
        """
        Get all notifications of a passenger.

        Args:
            passenger_id (int): Owning passenger ID

        Returns:
            List[Notification]: Notifications in creation order; empty if none
        """
        return await self.fetch_all(
            select(Notification)
            .where(Notification.passenger_id == passenger_id)
            .order_by(Notification.id)
        )

    async def delete_all(self) -> int:
        """
        Delete every notification.

        Returns:
            int: Number of notifications removed
        """
        try:
            result = await self.db.execute(delete(Notification))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._storage_error("delete", e) from e

        logger.debug(f"Deleted {result.rowcount} notifications")
        return result.rowcount
