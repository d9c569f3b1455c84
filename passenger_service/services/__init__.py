from passenger_service.services.passenger_service import PassengerService
from passenger_service.services.notification_service import NotificationService, FanOutResult

__all__ = [
    "PassengerService",
    "NotificationService",
    "FanOutResult",
]
