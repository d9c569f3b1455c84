"""
Service for passenger notifications.

This module handles the logic for:
- Creating a notification for a single passenger
- Listing a passenger's notifications
- Deleting all notifications (administrative reset)
- Notifying every passenger of a cancelled flight

The flight-cancelled fan-out is atomic: all notifications of one call are
written in a single transaction, so a storage failure or a cancellation
before the commit leaves no notification of that call behind.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from passenger_service.exceptions import PassengerNotFoundError, ValidationError
from passenger_service.models.notification import Notification
from passenger_service.repositories.notification import NotificationRepository
from passenger_service.repositories.passenger import PassengerRepository
from passenger_service.services.validation import render_message
from passenger_service.utils.config import get_settings

logger = logging.getLogger(__name__)


@dataclass
class FanOutResult:
    """
    Outcome of a flight-cancelled fan-out.

    Attributes:
        flight_id: The cancelled flight
        notifications: One persisted notification per matching passenger
    """
    flight_id: int
    notifications: List[Notification] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.notifications)

    @property
    def passenger_ids(self) -> List[int]:
        return [n.passenger_id for n in self.notifications]


class NotificationService:
    """Service for creating and querying passenger notifications."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        passenger_repository: PassengerRepository,
    ):
        """Initialize the service.

        Args:
            notification_repository: Store for notification records
            passenger_repository: Store used to resolve notification recipients
        """
        self.notification_repository = notification_repository
        self.passenger_repository = passenger_repository

    async def list_all(self, passenger_id: int) -> List[Notification]:
        """Get a passenger's notifications; empty if it has none."""
        return await self.notification_repository.get_by_passenger_id(passenger_id)

    async def delete_all(self) -> int:
        """Delete every notification and return how many were removed."""
        deleted = await self.notification_repository.delete_all()
        logger.info(f"Deleted {deleted} notifications")
        return deleted

    async def create_notification(self, passenger_id: int, content: str) -> Notification:
        """
        Create a notification for one passenger.

        The destination email is copied from the passenger.

        Raises:
            ValidationError: If content is empty
            PassengerNotFoundError: If the passenger does not exist
            StorageError: If the notification could not be stored
        """
        if not content or not content.strip():
            raise ValidationError(["content is required"])

        passenger = await self.passenger_repository.get_by_id(passenger_id)
        if passenger is None:
            raise PassengerNotFoundError(passenger_id)

        notification = Notification.for_passenger(passenger, content)
        passenger.notifications.append(notification)
        await self.notification_repository.create(notification)
        logger.info(f"Created notification {notification.id} for passenger {passenger_id}")
        return notification

    async def notify_flight_cancelled(
        self,
        flight_id: int,
        message_template: Optional[str] = None,
    ) -> FanOutResult:
        """
        Notify every passenger booked on a cancelled flight.

        Creates exactly one notification per passenger whose flight_id equals
        ``flight_id``. A flight without passengers yields an empty result.
        Repeated calls are not deduplicated.

        Args:
            flight_id: The cancelled flight
            message_template: ``str.format`` template for the message content.
                Defaults to the configured CANCELLATION_MESSAGE_TEMPLATE.

        Returns:
            FanOutResult with the persisted notifications

        Raises:
            ValidationError: If the template cannot be rendered (nothing is read or written)
            StorageError: If storing fails; no notification of this call is kept
            asyncio.CancelledError: If cancelled before the commit; no
                notification of this call is kept
        """
        if message_template is None:
            message_template = get_settings().CANCELLATION_MESSAGE_TEMPLATE
        # Fails fast on a bad template before touching storage
        render_message(message_template, flight_id=flight_id)

        passengers = await self.passenger_repository.get_by_flight_id(flight_id)
        if not passengers:
            logger.info(f"Flight {flight_id} cancelled: no passengers to notify")
            return FanOutResult(flight_id=flight_id)

        notifications = []
        for passenger in passengers:
            content = render_message(
                message_template,
                flight_id=flight_id,
                first_name=passenger.first_name,
                last_name=passenger.last_name,
                email=passenger.email,
            )
            notification = Notification.for_passenger(passenger, content)
            passenger.notifications.append(notification)
            notifications.append(notification)

        try:
            await self.notification_repository.create_many(notifications)
        except asyncio.CancelledError:
            logger.warning(f"Fan-out for flight {flight_id} cancelled; no notifications stored")
            raise

        logger.info(
            f"Flight {flight_id} cancelled: notified {len(notifications)} passengers"
        )
        return FanOutResult(flight_id=flight_id, notifications=notifications)
