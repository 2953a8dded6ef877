"""
Unit tests for the eligibility calculator
"""
from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from travel_tracker.schemas.stats import WarningLevel
from travel_tracker.services.eligibility import (
    MAX_DAYS_ALLOWED,
    TripSpan,
    compute_stats,
    eligibility_date_for,
    inclusive_day_count,
    warning_level,
)

GREEN_CARD = date(2023, 8, 13)
NOW = datetime(2025, 1, 1)


def span(departure: str, return_: str) -> TripSpan:
    return TripSpan(date.fromisoformat(departure), date.fromisoformat(return_))


class TestInclusiveDayCount:

    def test_same_day_counts_once(self):
        for day in (date(2024, 1, 1), date(2024, 2, 29), date(2025, 12, 31)):
            assert inclusive_day_count(day, day) == 1

    def test_both_endpoints_counted(self):
        assert inclusive_day_count(date(2024, 1, 20), date(2024, 2, 5)) == 17

    def test_argument_order_does_not_matter(self):
        pairs = [
            (date(2024, 1, 20), date(2024, 2, 5)),
            (date(2023, 12, 31), date(2024, 1, 1)),
            (date(2020, 2, 28), date(2020, 3, 1)),
        ]
        for a, b in pairs:
            assert inclusive_day_count(a, b) == inclusive_day_count(b, a)
            assert inclusive_day_count(a, b) >= 1


class TestWarningLevel:

    def test_boundaries(self):
        assert warning_level(0) == WarningLevel.SAFE
        assert warning_level(69.999) == WarningLevel.SAFE
        assert warning_level(70) == WarningLevel.CAUTION
        assert warning_level(89.99) == WarningLevel.CAUTION
        assert warning_level(90) == WarningLevel.DANGER
        assert warning_level(100) == WarningLevel.DANGER


def test_eligibility_date_is_five_calendar_years():
    assert eligibility_date_for(GREEN_CARD) == date(2028, 8, 13)
    assert eligibility_date_for(date(2024, 2, 28)) == date(2029, 2, 28)
    assert eligibility_date_for(date(2024, 3, 1)) == date(2029, 3, 1)


def test_leap_day_green_card_rolls_over_to_march_first():
    assert eligibility_date_for(date(2024, 2, 29)) == date(2029, 3, 1)

    stats = compute_stats(datetime(2025, 1, 1), date(2024, 2, 29), [])
    assert stats.eligibility_date == "2029-03-01"
    assert stats.period_start == "2024-02-29"
    # 2025-01-01 through 2029-03-01
    assert stats.days_until_eligible == 1520


def test_green_card_date_without_trips():
    """Green card 2023-08-13 checked on 2025-01-01 with no travel"""
    stats = compute_stats(NOW, GREEN_CARD, [])

    assert stats.total_days_outside == 0
    assert stats.planned_days_outside == 0
    assert stats.period_start == "2023-08-13"
    assert stats.eligibility_date == "2028-08-13"
    assert stats.days_until_eligible == 1320
    assert stats.green_card_date == "2023-08-13"
    assert stats.days_remaining == MAX_DAYS_ALLOWED
    assert stats.percent_used == 0
    assert stats.warning_level == WarningLevel.SAFE
    assert stats.trip_count == 0
    assert stats.longest_trip == 0


def test_past_trip_counts_both_travel_days():
    stats = compute_stats(NOW, GREEN_CARD, [span("2024-01-20", "2024-02-05")])

    assert stats.total_days_outside == 17
    assert stats.past_trip_count == 1
    assert stats.planned_trip_count == 0
    assert stats.longest_trip == 17
    assert stats.days_remaining == MAX_DAYS_ALLOWED - 17


def test_future_trip_is_planned_only():
    stats = compute_stats(NOW, GREEN_CARD, [span("2025-03-01", "2025-03-10")])

    assert stats.total_days_outside == 0
    assert stats.past_trip_count == 0
    assert stats.planned_days_outside == 10
    assert stats.planned_trip_count == 1
    assert stats.projected_total_days == 10
    assert stats.days_remaining == MAX_DAYS_ALLOWED
    assert stats.projected_days_remaining == MAX_DAYS_ALLOWED - 10


def test_trip_departing_today_is_in_progress():
    now = datetime(2025, 1, 1, 15, 0)
    stats = compute_stats(now, GREEN_CARD, [span("2025-01-01", "2025-01-05")])

    assert stats.past_trip_count == 1
    assert stats.planned_trip_count == 0
    # Only today has been spent outside so far
    assert stats.total_days_outside == 1
    assert stats.longest_trip == 5


def test_in_progress_trip_clipped_at_now():
    now = datetime(2025, 1, 1, 12, 0)
    stats = compute_stats(now, GREEN_CARD, [span("2024-12-20", "2025-01-10")])

    assert stats.total_days_outside == 13
    assert stats.planned_days_outside == 0
    assert stats.longest_trip == 22


def test_trip_spanning_period_start_is_clipped():
    stats = compute_stats(NOW, GREEN_CARD, [span("2023-08-01", "2023-08-20")])

    # Aug 13 through Aug 20
    assert stats.total_days_outside == 8
    assert stats.longest_trip == 20


def test_trip_returning_on_period_start_counts_one_day():
    stats = compute_stats(NOW, GREEN_CARD, [span("2023-08-01", "2023-08-13")])

    assert stats.total_days_outside == 1
    assert stats.past_trip_count == 1


def test_trip_before_period_is_ignored_but_counted_in_trip_count():
    stats = compute_stats(NOW, GREEN_CARD, [span("2023-07-01", "2023-07-10")])

    assert stats.trip_count == 1
    assert stats.past_trip_count == 0
    assert stats.planned_trip_count == 0
    assert stats.total_days_outside == 0
    assert stats.longest_trip == 0


def test_exactly_at_ceiling():
    departure = date(2021, 1, 1)
    trip = TripSpan(departure, departure + timedelta(days=MAX_DAYS_ALLOWED - 1))
    stats = compute_stats(NOW, date(2020, 1, 1), [trip])

    assert stats.total_days_outside == 913
    assert stats.days_remaining == 0
    assert stats.percent_used == 100
    assert stats.warning_level == WarningLevel.DANGER


def test_percentages_are_clamped():
    trips = [
        span("2020-02-01", "2022-12-31"),
        span("2025-02-01", "2026-01-31"),
    ]
    stats = compute_stats(NOW, date(2020, 1, 1), trips)

    assert stats.total_days_outside > MAX_DAYS_ALLOWED
    assert stats.percent_used == 100
    assert stats.projected_percent_used == 100
    assert stats.days_remaining == 0
    assert stats.projected_days_remaining == 0


def test_projected_total_is_past_plus_planned():
    trips = [
        span("2024-01-20", "2024-02-05"),
        span("2024-04-26", "2024-05-13"),
        span("2025-02-10", "2025-02-20"),
        span("2025-06-01", "2025-06-30"),
    ]
    stats = compute_stats(NOW, GREEN_CARD, trips)

    assert stats.total_days_outside == 17 + 18
    assert stats.planned_days_outside == 11 + 30
    assert stats.projected_total_days == stats.total_days_outside + stats.planned_days_outside
    assert stats.projected_percent_used == pytest.approx(76 / MAX_DAYS_ALLOWED * 100)
    assert stats.trip_count == 4


def test_projected_warning_level_can_differ():
    trips = [
        span("2023-09-01", "2025-01-01"),
        span("2025-03-01", "2026-03-01"),
    ]
    stats = compute_stats(NOW, GREEN_CARD, trips)

    assert stats.warning_level == WarningLevel.SAFE
    assert stats.projected_warning_level == WarningLevel.DANGER


def test_rolling_window_without_green_card_date():
    now = datetime(2025, 1, 1, 12, 0)
    trips = [
        # Returns on the window's first day, but before its time of day
        span("2019-12-20", "2020-01-03"),
        span("2019-12-20", "2020-01-04"),
    ]
    stats = compute_stats(now, None, trips)

    assert stats.period_start == "2020-01-03"
    assert stats.eligibility_date is None
    assert stats.days_until_eligible is None
    assert stats.green_card_date is None
    assert stats.past_trip_count == 1
    assert stats.total_days_outside == 2
    assert stats.longest_trip == 16


def test_days_until_eligible_rounds_partial_days_up():
    stats = compute_stats(datetime(2028, 8, 12, 6, 0), GREEN_CARD, [])
    assert stats.days_until_eligible == 1


def test_days_until_eligible_never_negative():
    stats = compute_stats(datetime(2029, 1, 1), GREEN_CARD, [])
    assert stats.days_until_eligible == 0


def test_aware_now_is_read_in_utc():
    # 02:00 at UTC+5 is still Dec 31 in UTC
    now = datetime(2025, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=5)))
    stats = compute_stats(now, GREEN_CARD, [span("2025-01-01", "2025-01-03")])

    assert stats.planned_trip_count == 1
    assert stats.total_days_outside == 0


def test_plain_date_now_means_midnight():
    by_date = compute_stats(date(2025, 1, 1), GREEN_CARD, [span("2024-01-20", "2024-02-05")])
    by_datetime = compute_stats(NOW, GREEN_CARD, [span("2024-01-20", "2024-02-05")])
    assert by_date == by_datetime


def test_accepts_any_trip_shaped_objects():
    trips = [
        SimpleNamespace(
            id=1,
            destination="Lisbon",
            departure_date=date(2024, 1, 20),
            return_date=date(2024, 2, 5),
        )
    ]
    stats = compute_stats(NOW, GREEN_CARD, trips)
    assert stats.total_days_outside == 17


def test_inputs_not_mutated_and_output_deterministic():
    trips = [span("2024-01-20", "2024-02-05"), span("2025-03-01", "2025-03-10")]
    snapshot = list(trips)

    first = compute_stats(NOW, GREEN_CARD, trips)
    second = compute_stats(NOW, GREEN_CARD, trips)

    assert trips == snapshot
    assert first.model_dump_json() == second.model_dump_json()


def test_trip_order_is_irrelevant():
    trips = [
        span("2025-03-01", "2025-03-10"),
        span("2023-08-01", "2023-08-20"),
        span("2024-01-20", "2024-02-05"),
    ]
    assert compute_stats(NOW, GREEN_CARD, trips) == compute_stats(NOW, GREEN_CARD, reversed(trips))
