"""
Eligibility statistics schema
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class WarningLevel(str, Enum):
    """How close the absence total is to the legal ceiling"""
    SAFE = "safe"
    CAUTION = "caution"
    DANGER = "danger"


class EligibilityStats(BaseModel):
    """Snapshot of absence totals; recomputed on every request, never stored"""
    model_config = ConfigDict(frozen=True)

    total_days_outside: int
    planned_days_outside: int
    projected_total_days: int
    days_remaining: int
    projected_days_remaining: int
    percent_used: float
    projected_percent_used: float
    longest_trip: int
    trip_count: int
    past_trip_count: int
    planned_trip_count: int
    period_start: str
    eligibility_date: Optional[str] = None
    days_until_eligible: Optional[int] = None
    green_card_date: Optional[str] = None
    warning_level: WarningLevel
    projected_warning_level: WarningLevel
