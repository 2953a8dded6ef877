"""
Import from the legacy single-user SQLite database.

The legacy file holds two tables with no owner column:

    trips(id, destination, departure_date, return_date, notes, created_at)
    settings(key, value)

Rows are attached to one account in the current database.
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import create_engine, inspect, select, text
from sqlalchemy.orm import Session

from travel_tracker.core.exceptions import LegacyImportError
from travel_tracker.core.validation import MAX_NOTES_LENGTH
from travel_tracker.models.setting import GREEN_CARD_DATE_KEY
from travel_tracker.models.trip import Trip
from travel_tracker.models.user import User
from travel_tracker.schemas.trip import TripCreate
from travel_tracker.services.settings_service import SettingsService
from travel_tracker.services.trip_service import TripService

logger = logging.getLogger(__name__)

# Legacy camelCase keys mapped to current setting keys
LEGACY_SETTING_KEYS = {
    "greenCardDate": GREEN_CARD_DATE_KEY,
}


@dataclass
class LegacyImportResult:
    trips_imported: int = 0
    trips_skipped: int = 0
    settings_imported: int = 0
    settings_skipped: int = 0
    notes_truncated: int = 0
    messages: List[str] = field(default_factory=list)


def _is_duplicate(db: Session, user_id: int, trip: TripCreate) -> bool:
    stmt = select(Trip.id).where(
        Trip.user_id == user_id,
        Trip.destination == trip.destination,
        Trip.departure_date == trip.departure_date,
        Trip.return_date == trip.return_date,
    )
    return db.execute(stmt).first() is not None


def _notes_too_long(notes: Optional[str]) -> bool:
    return bool(notes) and len(notes.strip()) > MAX_NOTES_LENGTH


def import_legacy_database(
    db: Session,
    user: User,
    sqlite_path: Union[str, Path],
) -> LegacyImportResult:
    """
    Copy trips and settings from a legacy SQLite file into ``user``'s account.

    Trips already present with the same destination and dates are skipped,
    as are rows with unparseable or inverted dates. Notes longer than the
    current limit are truncated rather than dropping the trip. Settings the
    user has already set are left untouched.

    Raises:
        LegacyImportError: If the file is missing or has no trips table
    """
    path = Path(sqlite_path)
    if not path.is_file():
        raise LegacyImportError(
            f"Legacy database {path} not found", details={"path": str(path)}
        )

    legacy_engine = create_engine(f"sqlite:///{path}", future=True)
    try:
        tables = set(inspect(legacy_engine).get_table_names())
        if "trips" not in tables:
            raise LegacyImportError(
                f"{path} has no trips table", details={"tables": sorted(tables)}
            )
        with legacy_engine.connect() as conn:
            trip_rows = conn.execute(
                text(
                    "SELECT destination, departure_date, return_date, notes "
                    "FROM trips ORDER BY departure_date"
                )
            ).mappings().all()
            setting_rows = []
            if "settings" in tables:
                setting_rows = conn.execute(
                    text("SELECT key, value FROM settings")
                ).mappings().all()
    finally:
        legacy_engine.dispose()

    result = LegacyImportResult()
    trips = TripService(db)
    settings = SettingsService(db)

    for row in trip_rows:
        label = f"{row['destination']} ({row['departure_date']} - {row['return_date']})"
        # Over-long notes are cut so the absence itself still counts
        truncate_notes = _notes_too_long(row["notes"])
        notes = row["notes"].strip()[:MAX_NOTES_LENGTH] if truncate_notes else row["notes"]
        try:
            trip = TripCreate(
                destination=row["destination"],
                departure_date=row["departure_date"],
                return_date=row["return_date"],
                notes=notes,
            )
        except PydanticValidationError as e:
            logger.warning(f"Skipping invalid legacy trip {label}: {e.error_count()} errors")
            result.trips_skipped += 1
            result.messages.append(f"- Skipped invalid: {label}")
            continue

        if _is_duplicate(db, user.id, trip):
            result.trips_skipped += 1
            result.messages.append(f"- Skipped: {label} (already exists)")
            continue

        trips.create_trip(user.id, trip)
        result.trips_imported += 1
        result.messages.append(f"+ {label}")
        if truncate_notes:
            result.notes_truncated += 1
            result.messages.append(f"~ Notes truncated to {MAX_NOTES_LENGTH} chars: {label}")

    for row in setting_rows:
        key = LEGACY_SETTING_KEYS.get(row["key"], row["key"])
        if settings.get_setting(user.id, key) is not None:
            result.settings_skipped += 1
            result.messages.append(f"- Skipped: {key} (already set)")
            continue
        if key == GREEN_CARD_DATE_KEY:
            try:
                date.fromisoformat(row["value"])
            except ValueError:
                result.settings_skipped += 1
                result.messages.append(f"- Skipped invalid: {key}={row['value']}")
                continue
        settings.set_setting(user.id, key, row["value"])
        result.settings_imported += 1
        result.messages.append(f"+ {key}: {row['value']}")

    logger.info(
        f"Legacy import for user {user.id}: {result.trips_imported} trips, "
        f"{result.settings_imported} settings",
        extra={"user_id": user.id, "source": str(path)},
    )
    return result
