"""
Repository for Passenger model operations.

Passengers own their notifications, so every read eagerly loads the
notification collection and deletes remove the notifications in the same
transaction as the passenger row.
"""

from typing import List, Optional
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from passenger_service.models.notification import Notification
from passenger_service.models.passenger import Passenger
from passenger_service.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class PassengerRepository(BaseRepository[Passenger]):
    """
    Repository for Passenger database operations.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with a database session.

        Args:
            db (AsyncSession): SQLAlchemy async database session
        """
        super().__init__(db, Passenger)

    def _select(self):
        # populate_existing keeps already-loaded collections in step with storage
        return (
            select(Passenger)
            .options(selectinload(Passenger.notifications))
            .execution_options(populate_existing=True)
        )

    async def get_all(self) -> List[Passenger]:
        """
        Get all passengers in insertion order, with their notifications.

        Returns:
            List[Passenger]: All stored passengers
        """
        return await self.fetch_all(self._select().order_by(Passenger.id))

    async def get_by_id(self, id: int) -> Optional[Passenger]:
        """
        Get a passenger by ID, with its notifications.

        Args:
            id (int): Passenger ID

        Returns:
            Optional[Passenger]: Passenger if found, None otherwise
        """
        return await self.fetch_one(self._select().where(Passenger.id == id))

    async def get_by_flight_id(self, flight_id: int) -> List[Passenger]:
        """
        Get every passenger booked on a flight.

        Args:
            flight_id (int): Flight identifier

        Returns:
            List[Passenger]: Matching passengers in insertion order
        """
        return await self.fetch_all(
            self._select().where(Passenger.flight_id == flight_id).order_by(Passenger.id)
        )

    async def delete(self, id: int) -> bool:
        """
        Delete a passenger and all of its notifications.

        Both deletes run in one transaction; either both are committed or
        neither is.

        Args:
            id (int): Passenger ID

        Returns:
            bool: True if a passenger was deleted, False if not found
        """
        try:
            await self.db.execute(
                delete(Notification).where(Notification.passenger_id == id)
            )
            result = await self.db.execute(delete(Passenger).where(Passenger.id == id))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._storage_error("delete", e) from e

        deleted = result.rowcount > 0
        if deleted:
            logger.debug(f"Deleted passenger {id} with its notifications")
        return deleted
