"""
Trip API endpoints - trip CRUD for the signed-in user
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from travel_tracker.core.db import get_db
from travel_tracker.core.dependencies import get_current_user
from travel_tracker.core.exceptions import TripNotFoundError
from travel_tracker.models.user import User
from travel_tracker.schemas.base import Envelope
from travel_tracker.schemas.trip import TripCreate, TripRead, TripUpdate
from travel_tracker.services.trip_service import TripService

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("", response_model=Envelope[list[TripRead]])
def list_trips(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    List the user's trips, most recent departure first
    """
    trips = TripService(db).list_trips(current_user.id)
    return Envelope(status="ok", data=[TripRead.model_validate(t) for t in trips])


@router.post("", response_model=Envelope[TripRead], status_code=status.HTTP_201_CREATED)
def create_trip(
    trip_data: TripCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Record a trip

    - **destination**: Where the trip went (e.g., "Lisbon, Portugal")
    - **departure_date**: Day you left the country
    - **return_date**: Day you came back; on or after departure_date
    - **notes**: Optional free text
    """
    trip = TripService(db).create_trip(current_user.id, trip_data)
    return Envelope(status="ok", data=TripRead.model_validate(trip))


@router.get("/{trip_id}", response_model=Envelope[TripRead])
def get_trip(
    trip_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    trip = TripService(db).get_trip(trip_id, current_user.id)
    if not trip:
        raise TripNotFoundError(trip_id)
    return Envelope(status="ok", data=TripRead.model_validate(trip))


@router.put("/{trip_id}", response_model=Envelope[TripRead])
def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Replace a trip

    All fields are rewritten; omitting notes clears them
    """
    trip = TripService(db).update_trip(trip_id, current_user.id, trip_data)
    if not trip:
        raise TripNotFoundError(trip_id)
    return Envelope(status="ok", data=TripRead.model_validate(trip))


@router.delete("/{trip_id}", response_model=Envelope[dict])
def delete_trip(
    trip_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not TripService(db).delete_trip(trip_id, current_user.id):
        raise TripNotFoundError(trip_id)
    return Envelope(status="ok", data={"deleted": True})
