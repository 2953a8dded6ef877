"""
Stats Service - feeds stored trips and settings into the calculator
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from travel_tracker.schemas.stats import EligibilityStats
from travel_tracker.services.eligibility import compute_stats
from travel_tracker.services.settings_service import SettingsService
from travel_tracker.services.trip_service import TripService

logger = logging.getLogger(__name__)


class StatsService:

    def __init__(self, db: Session):
        self.trips = TripService(db)
        self.settings = SettingsService(db)

    def get_stats(self, user_id: int, now: Optional[datetime] = None) -> EligibilityStats:
        """Recompute statistics from the user's current trips"""
        if now is None:
            now = datetime.now(timezone.utc)
        trips = self.trips.list_trips(user_id)
        green_card_date = self.settings.get_green_card_date(user_id)
        stats = compute_stats(now, green_card_date, trips)
        logger.debug(
            f"Computed stats for user {user_id}: {stats.total_days_outside} days outside",
            extra={"user_id": user_id, "warning_level": stats.warning_level.value},
        )
        return stats
