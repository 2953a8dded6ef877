"""
Sample trip history for trying the tracker out
"""
import logging
from datetime import date
from typing import List, Tuple

from sqlalchemy.orm import Session

from travel_tracker.models.user import User
from travel_tracker.schemas.trip import TripCreate
from travel_tracker.services.settings_service import SettingsService
from travel_tracker.services.trip_service import TripService

logger = logging.getLogger(__name__)

SAMPLE_GREEN_CARD_DATE = date(2023, 8, 13)

SAMPLE_TRIPS: List[Tuple[str, str, str]] = [
    ("2024-01-20", "2024-02-05", "Trip 1"),
    ("2024-04-26", "2024-05-13", "Trip 2"),
    ("2024-08-25", "2024-12-04", "Trip 3"),
    ("2025-03-15", "2025-04-27", "Trip 4"),
    ("2025-06-24", "2025-07-11", "Trip 5"),
    ("2025-08-03", "2025-08-14", "Trip 6"),
    ("2025-08-17", "2025-09-19", "Trip 7"),
    ("2025-12-04", "2026-02-10", "Trip 8"),
    ("2026-06-16", "2026-08-21", "Trip 9"),
]


def seed_sample_history(db: Session, user: User) -> int:
    """
    Give a user the sample green card date and trips.

    Does nothing when the user already has trips.

    Returns:
        Number of trips inserted
    """
    trips = TripService(db)
    existing = trips.count_trips(user.id)
    if existing:
        logger.info(
            f"User {user.id} already has {existing} trips, skipping seed",
            extra={"user_id": user.id},
        )
        return 0

    SettingsService(db).set_green_card_date(user.id, SAMPLE_GREEN_CARD_DATE)
    for departure, return_, destination in SAMPLE_TRIPS:
        trips.create_trip(
            user.id,
            TripCreate(
                destination=destination,
                departure_date=date.fromisoformat(departure),
                return_date=date.fromisoformat(return_),
            ),
        )
    return len(SAMPLE_TRIPS)
