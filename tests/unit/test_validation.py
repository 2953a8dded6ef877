"""
Edge case tests for request validation helpers and schemas.
"""
from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from travel_tracker.core.validation import (
    ValidationError,
    normalize_notes,
    sanitize_destination,
    validate_password_strength,
    validate_trip_dates,
)
from travel_tracker.schemas.trip import TripCreate, TripRead


class TestTripDates:

    def test_same_day_trip_allowed(self):
        validate_trip_dates(date(2024, 1, 1), date(2024, 1, 1))

    def test_return_before_departure_rejected(self):
        with pytest.raises(ValidationError, match="before departure"):
            validate_trip_dates(date(2024, 1, 2), date(2024, 1, 1))

    def test_schema_rejects_inverted_range(self):
        with pytest.raises(PydanticValidationError):
            TripCreate(destination="Rome", departure_date="2024-03-10", return_date="2024-03-01")

    def test_schema_rejects_malformed_date(self):
        with pytest.raises(PydanticValidationError):
            TripCreate(destination="Rome", departure_date="2024-13-40", return_date="2024-03-01")


class TestDestination:

    def test_trimmed(self):
        assert sanitize_destination("  São Paulo, Brazil ") == "São Paulo, Brazil"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            sanitize_destination("   ")

    def test_control_characters_rejected(self):
        with pytest.raises(ValidationError, match="control characters"):
            sanitize_destination("Oslo\x00")


class TestNotes:

    def test_blank_notes_become_none(self):
        assert normalize_notes("   ") is None
        assert normalize_notes(None) is None

    def test_notes_trimmed(self):
        assert normalize_notes(" conference ") == "conference"

    def test_long_notes_rejected(self):
        with pytest.raises(ValidationError, match="too long"):
            normalize_notes("x" * 2001)


class TestAccountFields:

    def test_password_needs_letter_and_digit(self):
        assert validate_password_strength("Passw0rd!") == "Passw0rd!"
        with pytest.raises(ValidationError, match="at least one letter and one number"):
            validate_password_strength("onlyletters")

    def test_password_too_short(self):
        with pytest.raises(ValidationError, match="at least 8"):
            validate_password_strength("a1")


def test_trip_read_flags_long_trips():
    base = dict(id=1, destination="Abroad", created_at="2024-01-01T00:00:00")
    short = TripRead(departure_date="2024-01-01", return_date="2024-12-30", **base)
    long = TripRead(departure_date="2024-01-01", return_date="2024-12-31", **base)

    assert short.day_count == 365
    assert short.exceeds_single_trip_limit is False
    assert long.day_count == 366
    assert long.exceeds_single_trip_limit is True
