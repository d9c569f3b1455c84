"""
Pydantic models for passengers.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from passenger_service.schemas.notification import NotificationResponse


class PassengerCreate(BaseModel):
    """Model for creating a new passenger.

    Fields are optional at the schema level so that missing values are
    reported by the passenger validator together with any other problems.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    flight_id: Optional[int] = None


class PassengerResponse(BaseModel):
    """Model for passenger response"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    first_name: str
    last_name: str
    email: str
    flight_id: int
    notifications: List[NotificationResponse] = []
