#!/usr/bin/env python3
"""
Seed an account with the sample trip history.

Usage:
    python scripts/seed.py you@example.com

The account must exist (register through the API first). Accounts that
already have trips are left alone.
"""
import argparse
import sys

from travel_tracker.core.db import db_session
from travel_tracker.core.exceptions import UserNotFoundError
from travel_tracker.core.logging import configure_logging
from travel_tracker.services.seed import SAMPLE_GREEN_CARD_DATE, seed_sample_history
from travel_tracker.services.user_service import UserService


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed sample trips for a user")
    parser.add_argument("email", help="Email of an existing account")
    args = parser.parse_args()

    configure_logging("INFO", "text")

    try:
        with db_session() as session:
            user = UserService(session).require_by_email(args.email)
            inserted = seed_sample_history(session, user)
    except UserNotFoundError as e:
        print(f"✗ {e.message}. Sign up first to create the account.")
        return 1

    if not inserted:
        print("Account already has trips. Skipping seed.")
        return 0

    print(f"✓ Set green card date to {SAMPLE_GREEN_CARD_DATE.isoformat()}")
    print(f"✓ Seeded {inserted} trips")
    return 0


if __name__ == "__main__":
    sys.exit(main())
