#!/usr/bin/env python3
"""
Import trips and settings from the legacy single-user SQLite database.

Usage:
    python scripts/import_legacy.py you@example.com travel-tracker.db

Prerequisites:
    1. Point DATABASE_URL at the target database
    2. Run migrations first: alembic upgrade head
    3. Register the account through the API
"""
import argparse
import sys

from travel_tracker.core.db import db_session
from travel_tracker.core.exceptions import LegacyImportError, UserNotFoundError
from travel_tracker.core.logging import configure_logging
from travel_tracker.services.legacy_import import import_legacy_database
from travel_tracker.services.user_service import UserService


def main() -> int:
    parser = argparse.ArgumentParser(description="Import a legacy SQLite database")
    parser.add_argument("email", help="Email of the account receiving the data")
    parser.add_argument(
        "sqlite_file",
        nargs="?",
        default="travel-tracker.db",
        help="Legacy database file (default: travel-tracker.db)",
    )
    args = parser.parse_args()

    configure_logging("WARNING", "text")

    print("Starting data migration...\n")
    try:
        with db_session() as session:
            user = UserService(session).require_by_email(args.email)
            print(f"Found user: {user.name} ({user.id})")
            result = import_legacy_database(session, user, args.sqlite_file)
    except (UserNotFoundError, LegacyImportError) as e:
        print(f"\nError: {e.message}")
        return 1

    for line in result.messages:
        print(f"   {line}")

    print("\n========================================")
    print("Migration Complete!")
    print("========================================")
    print(f"Trips imported:    {result.trips_imported}")
    print(f"Trips skipped:     {result.trips_skipped}")
    print(f"Settings imported: {result.settings_imported}")
    print(f"Settings skipped:  {result.settings_skipped}")
    if result.notes_truncated:
        print(f"Notes truncated:   {result.notes_truncated}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
