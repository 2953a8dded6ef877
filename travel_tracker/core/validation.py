"""
Input validation helpers shared by the request schemas and the legacy importer.

Each helper returns the cleaned value or raises ``ValidationError``. It
subclasses ``ValueError`` so pydantic validators report it as a field error.
"""
import re
from datetime import date
from typing import Optional

MAX_DESTINATION_LENGTH = 255
MAX_NOTES_LENGTH = 2000

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


class ValidationError(ValueError):
    """Custom validation error"""
    pass


def validate_text_length(text: str, max_length: int, field_name: str = "Text") -> str:
    """Strip ``text``; reject it if blank or longer than ``max_length``."""
    if not text or not text.strip():
        raise ValidationError(f"{field_name} cannot be empty")

    text = text.strip()
    if len(text) > max_length:
        raise ValidationError(
            f"{field_name} too long ({len(text)} chars, max {max_length})"
        )
    return text


def validate_password_strength(password: str) -> str:
    """
    At least 8 characters with a letter and a digit.

    Raises:
        ValidationError: If password doesn't meet requirements
    """
    if len(password) < 8:
        raise ValidationError("Password must be at least 8 characters")

    # bcrypt only looks at the first 72 bytes
    if len(password.encode("utf-8")) > 72:
        raise ValidationError("Password too long (max 72 bytes)")

    if not (any(c.isalpha() for c in password) and any(c.isdigit() for c in password)):
        raise ValidationError(
            "Password must contain at least one letter and one number"
        )

    return password


def sanitize_destination(destination: str) -> str:
    destination = validate_text_length(destination, MAX_DESTINATION_LENGTH, "Destination")
    if _CONTROL_CHARS.search(destination):
        raise ValidationError("Destination contains control characters")
    return destination


def normalize_notes(notes: Optional[str]) -> Optional[str]:
    """Trim notes; blank notes are stored as NULL."""
    if notes is None or not notes.strip():
        return None
    return validate_text_length(notes, MAX_NOTES_LENGTH, "Notes")


def validate_trip_dates(departure_date: date, return_date: date) -> None:
    """
    Ensure a trip does not end before it starts. Same-day trips are fine.

    Raises:
        ValidationError: If return_date precedes departure_date
    """
    if return_date < departure_date:
        raise ValidationError(
            f"Return date {return_date.isoformat()} is before "
            f"departure date {departure_date.isoformat()}"
        )
