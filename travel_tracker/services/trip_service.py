"""
Trip Service - per-user trip storage
"""
import logging
from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select, func

from travel_tracker.models.trip import Trip
from travel_tracker.schemas.trip import TripCreate, TripUpdate

logger = logging.getLogger(__name__)


class TripService:
    """Manages trip CRUD operations, always scoped to the owning user"""

    def __init__(self, db: Session):
        self.db = db

    def create_trip(self, user_id: int, trip_data: TripCreate) -> Trip:
        """
        Create a new trip for a user

        Args:
            user_id: User ID
            trip_data: Trip creation data

        Returns:
            Created trip
        """
        trip = Trip(
            user_id=user_id,
            destination=trip_data.destination,
            departure_date=trip_data.departure_date,
            return_date=trip_data.return_date,
            notes=trip_data.notes,
        )
        self.db.add(trip)
        self.db.commit()
        self.db.refresh(trip)
        logger.info(
            f"Created trip {trip.id} for user {user_id}",
            extra={"user_id": user_id, "trip_id": trip.id},
        )
        return trip

    def get_trip(self, trip_id: int, user_id: int) -> Optional[Trip]:
        """
        Get a trip by ID (scoped to user)

        Args:
            trip_id: Trip ID
            user_id: User ID (for security scoping)

        Returns:
            Trip or None
        """
        stmt = select(Trip).where(
            Trip.id == trip_id,
            Trip.user_id == user_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_trips(self, user_id: int) -> List[Trip]:
        """All of a user's trips, most recent departure first"""
        stmt = (
            select(Trip)
            .where(Trip.user_id == user_id)
            .order_by(Trip.departure_date.desc(), Trip.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def count_trips(self, user_id: int) -> int:
        stmt = select(func.count(Trip.id)).where(Trip.user_id == user_id)
        return self.db.execute(stmt).scalar() or 0

    def update_trip(
        self,
        trip_id: int,
        user_id: int,
        trip_data: TripUpdate
    ) -> Optional[Trip]:
        """
        Replace a trip's destination, dates and notes

        Args:
            trip_id: Trip ID
            user_id: User ID (for security scoping)
            trip_data: Replacement data

        Returns:
            Updated trip or None
        """
        trip = self.get_trip(trip_id, user_id)
        if not trip:
            return None

        for field, value in trip_data.model_dump().items():
            setattr(trip, field, value)

        self.db.commit()
        self.db.refresh(trip)
        logger.info(
            f"Updated trip {trip_id} for user {user_id}",
            extra={"user_id": user_id, "trip_id": trip_id},
        )
        return trip

    def delete_trip(self, trip_id: int, user_id: int) -> bool:
        """Delete a trip; returns False when nothing matched"""
        trip = self.get_trip(trip_id, user_id)
        if not trip:
            return False

        self.db.delete(trip)
        self.db.commit()
        logger.info(
            f"Deleted trip {trip_id} for user {user_id}",
            extra={"user_id": user_id, "trip_id": trip_id},
        )
        return True
