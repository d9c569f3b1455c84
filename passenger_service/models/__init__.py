"""
This package contains the database models for the application.
"""

from passenger_service.models.base import Base
from passenger_service.models.passenger import Passenger
from passenger_service.models.notification import Notification

__all__ = ['Base', 'Passenger', 'Notification']
