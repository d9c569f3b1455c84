"""
This package contains repository implementations for database operations.

Repositories provide a clean abstraction layer for database access,
implementing the repository pattern to separate business logic from
data access concerns. Every repository method is a coroutine and reports
persistence failures as StorageError.
"""

from passenger_service.repositories.passenger import PassengerRepository
from passenger_service.repositories.notification import NotificationRepository

__all__ = ['PassengerRepository', 'NotificationRepository']
