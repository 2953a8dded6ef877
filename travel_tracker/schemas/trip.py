"""
Trip schemas for API requests/responses
"""
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from datetime import date, datetime
from typing import Optional

from travel_tracker.core.validation import (
    normalize_notes,
    sanitize_destination,
    validate_trip_dates,
)
from travel_tracker.services.eligibility import SINGLE_TRIP_LIMIT_DAYS, inclusive_day_count


class TripCreate(BaseModel):
    """Schema for creating a new trip"""
    destination: str = Field(..., min_length=1, max_length=255)
    departure_date: date
    return_date: date
    notes: Optional[str] = None

    @field_validator("destination")
    @classmethod
    def clean_destination(cls, v: str) -> str:
        return sanitize_destination(v)

    @field_validator("notes")
    @classmethod
    def clean_notes(cls, v: Optional[str]) -> Optional[str]:
        return normalize_notes(v)

    @model_validator(mode="after")
    def check_date_order(self):
        validate_trip_dates(self.departure_date, self.return_date)
        return self


class TripUpdate(TripCreate):
    """Schema for replacing a trip; every field is rewritten"""


class TripRead(BaseModel):
    """Schema for trip read response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    destination: str
    departure_date: date
    return_date: date
    notes: Optional[str] = None
    created_at: datetime

    @computed_field
    @property
    def day_count(self) -> int:
        return inclusive_day_count(self.departure_date, self.return_date)

    @computed_field
    @property
    def exceeds_single_trip_limit(self) -> bool:
        return self.day_count > SINGLE_TRIP_LIMIT_DAYS
