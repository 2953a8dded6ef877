"""
Eligibility statistics endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from travel_tracker.core.db import get_db
from travel_tracker.core.dependencies import get_current_user
from travel_tracker.models.user import User
from travel_tracker.schemas.base import Envelope
from travel_tracker.schemas.stats import EligibilityStats
from travel_tracker.services.stats_service import StatsService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=Envelope[EligibilityStats])
def get_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Days spent outside the country against the 913-day ceiling

    Counted from the green card date when set, otherwise over the last
    1825 days. Trips departing after today are reported separately as
    planned days.
    """
    return Envelope(status="ok", data=StatsService(db).get_stats(current_user.id))
