"""
Pydantic models for notifications and the flight-cancelled event.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NotificationResponse(BaseModel):
    """Model for notification response"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    content: str
    email: str
    passenger_id: int
    created_at: datetime


class FlightCancelledEvent(BaseModel):
    """Event published by the flight service when a flight is cancelled"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    flight_id: int
    message: Optional[str] = Field(
        default=None,
        description="Message template; may use {flight_id}, {first_name}, {last_name} and {email}",
    )


class FanOutResponse(BaseModel):
    """Model for the result of a flight-cancelled fan-out"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    flight_id: int
    count: int
    notifications: List[NotificationResponse] = []
