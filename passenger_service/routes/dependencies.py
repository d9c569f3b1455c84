"""
FastAPI dependency providers for the service layer.

Each request gets its own database session; the services built here share it.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from passenger_service.repositories.notification import NotificationRepository
from passenger_service.repositories.passenger import PassengerRepository
from passenger_service.services.notification_service import NotificationService
from passenger_service.services.passenger_service import PassengerService
from passenger_service.utils.database import get_db


def get_passenger_service(db: AsyncSession = Depends(get_db)) -> PassengerService:
    """Get passenger service instance."""
    return PassengerService(PassengerRepository(db))


def get_notification_service(db: AsyncSession = Depends(get_db)) -> NotificationService:
    """Get notification service instance."""
    return NotificationService(NotificationRepository(db), PassengerRepository(db))
