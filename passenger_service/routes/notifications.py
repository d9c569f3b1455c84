"""
Router for notification endpoints.

This module handles API routes for:
- Receiving flight-cancelled events and notifying the flight's passengers
- Deleting all notifications (administrative reset)

Notifications are never created directly by clients; they are produced by
the flight-cancelled fan-out.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from passenger_service.routes.dependencies import get_notification_service
from passenger_service.schemas.notification import (
    FanOutResponse,
    FlightCancelledEvent,
    NotificationResponse,
)
from passenger_service.services.notification_service import NotificationService
from passenger_service.utils.config import get_settings

router = APIRouter(
    prefix="/api/notifications",
    tags=["notifications"]
)

logger = logging.getLogger(__name__)


@router.post("/flight-cancelled", response_model=FanOutResponse)
async def flight_cancelled(
    event: FlightCancelledEvent,
    service: NotificationService = Depends(get_notification_service),
):
    """Notify every passenger of a cancelled flight"""
    timeout = get_settings().FANOUT_TIMEOUT_SECONDS
    try:
        result = await asyncio.wait_for(
            service.notify_flight_cancelled(event.flight_id, event.message),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.error(f"Fan-out for flight {event.flight_id} timed out after {timeout}s")
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=f"Notifying passengers of flight {event.flight_id} timed out"
        )

    return FanOutResponse(
        flight_id=result.flight_id,
        count=result.count,
        notifications=[NotificationResponse.model_validate(n) for n in result.notifications],
    )


@router.delete("")
async def delete_all_notifications(
    service: NotificationService = Depends(get_notification_service),
):
    """Delete all notifications"""
    deleted = await service.delete_all()
    return {"deleted": deleted}
