"""
Service for managing passengers.

This module handles the logic for:
- Listing passengers, optionally by flight
- Creating validated passengers
- Looking up a passenger
- Deleting a passenger together with its notifications
"""

import logging
from typing import List, Optional

from passenger_service.exceptions import ValidationError
from passenger_service.models.passenger import Passenger
from passenger_service.repositories.passenger import PassengerRepository
from passenger_service.services.validation import validate_passenger

logger = logging.getLogger(__name__)


class PassengerService:
    """Service for passenger CRUD."""

    def __init__(self, passenger_repository: PassengerRepository):
        """Initialize the service.

        Args:
            passenger_repository: Store for passenger records
        """
        self.passenger_repository = passenger_repository

    async def list_all(self) -> List[Passenger]:
        """Get all passengers."""
        return await self.passenger_repository.get_all()

    async def list_by_flight(self, flight_id: int) -> List[Passenger]:
        """Get all passengers booked on ``flight_id``."""
        return await self.passenger_repository.get_by_flight_id(flight_id)

    async def create_passenger(self, dto) -> Passenger:
        """
        Create a new passenger.

        Args:
            dto: Creation transfer object (first_name, last_name, email, flight_id)

        Returns:
            The persisted Passenger, including its assigned ID

        Raises:
            ValidationError: If a required field is missing or invalid
            StorageError: If the passenger could not be stored
        """
        errors = validate_passenger(dto)
        if errors:
            logger.warning(f"Rejected passenger creation: {', '.join(errors)}")
            raise ValidationError(errors)

        passenger = await self.passenger_repository.create(Passenger.from_dto(dto))
        logger.info(f"Created passenger {passenger.id} on flight {passenger.flight_id}")
        return passenger

    async def get_passenger(self, passenger_id: int) -> Optional[Passenger]:
        """
        Get a passenger by ID.

        Returns:
            The Passenger, or None if no passenger has that ID
        """
        return await self.passenger_repository.get_by_id(passenger_id)

    async def delete_passenger(self, passenger_id: int) -> bool:
        """
        Delete a passenger and its notifications.

        Returns:
            True if the passenger was deleted, False if it did not exist
        """
        deleted = await self.passenger_repository.delete(passenger_id)
        if deleted:
            logger.info(f"Deleted passenger {passenger_id}")
        else:
            logger.info(f"Passenger {passenger_id} not found for deletion")
        return deleted
