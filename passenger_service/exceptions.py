"""
Custom exceptions for the application.
"""

from typing import List, Optional


class PassengerServiceError(Exception):
    """Base exception for passenger-service errors."""
    pass


class ValidationError(PassengerServiceError):
    """Raised when input is missing required fields or holds invalid values."""

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message or "; ".join(self.errors) or "Validation error")


class NotFoundError(PassengerServiceError):
    """Raised when a referenced record does not exist."""
    pass


class PassengerNotFoundError(NotFoundError):
    """Raised when a passenger is not found."""

    def __init__(self, passenger_id: int):
        self.passenger_id = passenger_id
        super().__init__(f"Passenger with ID {passenger_id} not found")


class StorageError(PassengerServiceError):
    """Raised when the underlying storage could not complete an operation."""
    pass
