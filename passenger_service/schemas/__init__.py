"""
This package contains Pydantic models for request/response validation.

JSON payloads use camelCase field names; Python code uses snake_case.
"""

from passenger_service.schemas.passenger import (
    PassengerCreate,
    PassengerResponse,
)
from passenger_service.schemas.notification import (
    NotificationResponse,
    FlightCancelledEvent,
    FanOutResponse,
)

__all__ = [
    'PassengerCreate',
    'PassengerResponse',
    'NotificationResponse',
    'FlightCancelledEvent',
    'FanOutResponse',
]
