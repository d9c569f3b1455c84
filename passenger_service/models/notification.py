from datetime import datetime, timezone

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from passenger_service.models.base import Base
from passenger_service.models.custom_types import UTCDateTime


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Notification(Base):
    """
    Model for a message sent to a passenger.

    Notifications are immutable once stored and always belong to the
    passenger they were created for.

    Attributes:
        id (int): Primary key, assigned by the database on insert
        content (str): Message text
        email (str): Destination address, copied from the passenger at creation
        passenger_id (int): Foreign key to the owning passenger
        created_at (datetime): When the notification was created (UTC)

    Relationships:
        passenger: Many-to-one relationship with Passenger (lookup only)
    """
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(String, nullable=False)
    email = Column(String, nullable=False)
    passenger_id = Column(
        Integer,
        ForeignKey("passengers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    # Relationships
    passenger = relationship("Passenger", back_populates="notifications")

    @classmethod
    def for_passenger(cls, passenger, content: str) -> "Notification":
        """Build an unsaved notification addressed to ``passenger``."""
        return cls(
            content=content,
            email=passenger.email,
            passenger_id=passenger.id,
            created_at=utcnow(),
        )

    def __repr__(self):
        return f"<Notification {self.id} passenger={self.passenger_id}>"
