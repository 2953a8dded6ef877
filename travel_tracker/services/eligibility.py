"""
Naturalization eligibility calculator.

Turns a user's trips into absence statistics for the continuous residence
rule: no more than 913 days (30 months) outside the country during the
five-year period before filing. Pure and synchronous; callers pass ``now``
explicitly so results are reproducible.
"""
import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, NamedTuple, Optional, Union

from dateutil.relativedelta import relativedelta

from travel_tracker.schemas.stats import EligibilityStats, WarningLevel

MAX_DAYS_ALLOWED = 913
ROLLING_WINDOW = timedelta(days=5 * 365)
ELIGIBILITY_YEARS = 5

# Informational only; long trips are flagged for display, never rejected
SINGLE_TRIP_LIMIT_DAYS = 365

CAUTION_PERCENT = 70
DANGER_PERCENT = 90

_SECONDS_PER_DAY = 24 * 60 * 60


class TripSpan(NamedTuple):
    """Minimal trip shape the calculator reads.

    Any object exposing ``departure_date`` and ``return_date`` works,
    including ORM ``Trip`` rows and ``TripRead`` schemas.
    """
    departure_date: date
    return_date: date


def inclusive_day_count(start: date, end: date) -> int:
    """Days from start to end with both endpoints counted.

    Argument order does not matter; the result is always at least 1.
    """
    return abs((end - start).days) + 1


def warning_level(percent: float) -> WarningLevel:
    if percent >= DANGER_PERCENT:
        return WarningLevel.DANGER
    if percent >= CAUTION_PERCENT:
        return WarningLevel.CAUTION
    return WarningLevel.SAFE


def eligibility_date_for(green_card_date: date) -> date:
    """Five calendar years after the green card date.

    Feb 29 anniversaries roll over to Mar 1 of the target year.
    """
    eligibility_date = green_card_date + relativedelta(years=ELIGIBILITY_YEARS)
    if eligibility_date.day != green_card_date.day:
        # relativedelta clamps Feb 29 to Feb 28
        eligibility_date += timedelta(days=1)
    return eligibility_date


def _to_utc_naive(now: Union[datetime, date]) -> datetime:
    if not isinstance(now, datetime):
        return datetime.combine(now, time.min)
    if now.tzinfo is not None:
        return now.astimezone(timezone.utc).replace(tzinfo=None)
    return now


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min)


def _percent(days: int) -> float:
    return min(100.0, days / MAX_DAYS_ALLOWED * 100)


def compute_stats(
    now: Union[datetime, date],
    green_card_date: Optional[date],
    trips: Iterable,
) -> EligibilityStats:
    """
    Compute eligibility statistics for one user.

    Args:
        now: Current moment. Aware datetimes are converted to UTC; a plain
            date is treated as midnight.
        green_card_date: Date permanent residence began, or None to fall
            back to a rolling 1825-day window ending at ``now``.
        trips: Objects with ``departure_date`` and ``return_date`` dates,
            departure on or before return. Order is irrelevant.

    Returns:
        EligibilityStats snapshot
    """
    now = _to_utc_naive(now)
    today = now.date()

    eligibility_date: Optional[date] = None
    if green_card_date is not None:
        period_start = _midnight(green_card_date)
        eligibility_date = eligibility_date_for(green_card_date)
    else:
        period_start = now - ROLLING_WINDOW

    total_days_outside = 0
    planned_days_outside = 0
    longest_trip = 0
    trip_count = 0
    past_trip_count = 0
    planned_trip_count = 0

    for trip in trips:
        trip_count += 1
        departure = trip.departure_date
        return_ = trip.return_date

        if _midnight(return_) < period_start:
            continue

        full_trip_days = inclusive_day_count(departure, return_)
        longest_trip = max(longest_trip, full_trip_days)

        if departure > today:
            planned_trip_count += 1
            planned_days_outside += full_trip_days
            continue

        past_trip_count += 1
        effective_start = max(_midnight(departure), period_start)
        effective_end = min(_midnight(return_), now)
        if effective_start <= now:
            total_days_outside += inclusive_day_count(
                effective_start.date(), effective_end.date()
            )

    projected_total_days = total_days_outside + planned_days_outside
    percent_used = _percent(total_days_outside)
    projected_percent_used = _percent(projected_total_days)

    days_until_eligible: Optional[int] = None
    if eligibility_date is not None:
        remaining = _midnight(eligibility_date) - now
        days_until_eligible = max(
            0, math.ceil(remaining.total_seconds() / _SECONDS_PER_DAY)
        )

    return EligibilityStats(
        total_days_outside=total_days_outside,
        planned_days_outside=planned_days_outside,
        projected_total_days=projected_total_days,
        days_remaining=max(0, MAX_DAYS_ALLOWED - total_days_outside),
        projected_days_remaining=max(0, MAX_DAYS_ALLOWED - projected_total_days),
        percent_used=percent_used,
        projected_percent_used=projected_percent_used,
        longest_trip=longest_trip,
        trip_count=trip_count,
        past_trip_count=past_trip_count,
        planned_trip_count=planned_trip_count,
        period_start=period_start.date().isoformat(),
        eligibility_date=eligibility_date.isoformat() if eligibility_date else None,
        days_until_eligible=days_until_eligible,
        green_card_date=green_card_date.isoformat() if green_card_date else None,
        warning_level=warning_level(percent_used),
        projected_warning_level=warning_level(projected_percent_used),
    )
