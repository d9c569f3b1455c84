from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from passenger_service.models.base import Base


class Passenger(Base):
    """
    Model for a passenger booked on a flight.

    Attributes:
        id (int): Primary key, assigned by the database on insert
        first_name (str): Passenger's first name
        last_name (str): Passenger's last name
        email (str): Destination address for notifications
        flight_id (int): Identifier of the flight in the flight service

    Relationships:
        notifications: One-to-many relationship with Notification. The
            passenger owns its notifications; removing the passenger removes
            them as well.
    """
    __tablename__ = "passengers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    flight_id = Column(Integer, nullable=False, index=True)

    # Relationships
    notifications = relationship(
        "Notification",
        back_populates="passenger",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Notification.id",
    )

    @classmethod
    def from_dto(cls, dto) -> "Passenger":
        """
        Build an unsaved passenger from a creation transfer object.

        Args:
            dto: Object exposing first_name, last_name, email and flight_id

        Returns:
            Passenger: New passenger with an empty notification collection
        """
        return cls(
            first_name=dto.first_name.strip(),
            last_name=dto.last_name.strip(),
            email=dto.email.strip(),
            flight_id=dto.flight_id,
            notifications=[],
        )

    def __repr__(self):
        return f"<Passenger {self.id} flight={self.flight_id}>"
