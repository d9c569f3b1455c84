"""
Router for passenger endpoints.

This module handles API routes for:
- Listing passengers, optionally filtered by flight
- Creating, fetching and deleting passengers
- Listing a passenger's notifications
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from passenger_service.routes.dependencies import (
    get_notification_service,
    get_passenger_service,
)
from passenger_service.schemas.notification import NotificationResponse
from passenger_service.schemas.passenger import PassengerCreate, PassengerResponse
from passenger_service.services.notification_service import NotificationService
from passenger_service.services.passenger_service import PassengerService

router = APIRouter(
    prefix="/api/passengers",
    tags=["passengers"]
)

logger = logging.getLogger(__name__)


def passenger_not_found(passenger_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Passenger with ID {passenger_id} not found"
    )


@router.get("", response_model=List[PassengerResponse])
async def list_passengers(
    flight_id: Optional[int] = Query(None, alias="flightId", description="Only passengers of this flight"),
    service: PassengerService = Depends(get_passenger_service),
):
    """List all passengers"""
    if flight_id is not None:
        return await service.list_by_flight(flight_id)
    return await service.list_all()


@router.post("", response_model=PassengerResponse, status_code=status.HTTP_201_CREATED)
async def create_passenger(
    passenger: PassengerCreate,
    service: PassengerService = Depends(get_passenger_service),
):
    """Create a new passenger"""
    return await service.create_passenger(passenger)


@router.get("/{passenger_id}", response_model=PassengerResponse)
async def get_passenger(
    passenger_id: int,
    service: PassengerService = Depends(get_passenger_service),
):
    """Get a passenger by ID"""
    passenger = await service.get_passenger(passenger_id)
    if passenger is None:
        raise passenger_not_found(passenger_id)
    return passenger


@router.delete("/{passenger_id}")
async def delete_passenger(
    passenger_id: int,
    service: PassengerService = Depends(get_passenger_service),
):
    """Delete a passenger and its notifications"""
    if not await service.delete_passenger(passenger_id):
        raise passenger_not_found(passenger_id)
    return {"deleted": True}


@router.get("/{passenger_id}/notifications", response_model=List[NotificationResponse])
async def list_passenger_notifications(
    passenger_id: int,
    service: NotificationService = Depends(get_notification_service),
):
    """List a passenger's notifications"""
    return await service.list_all(passenger_id)
