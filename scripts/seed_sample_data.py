#!/usr/bin/env python3
"""Prepare a local tripbook database with demo trips.

Applies migrations to the configured database (TRIPBOOK_DATABASE_URL) and
seeds a past, a current and a future trip if the database holds none.

Usage:
    python scripts/seed_sample_data.py
    python scripts/seed_sample_data.py --clear
"""

import sys
from pathlib import Path

# Add src to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tripbook.config import get_config
from tripbook.db.store import TripStore
from tripbook.services.migration import run_migrations
from tripbook.services.sample_data import create_sample_data
from tripbook.services.trips import format_date_range


def main(argv: list[str]) -> None:
    """Migrate, optionally clear, then seed."""
    config = get_config()

    print(f"Preparing database at {config.database_url}...")
    print()

    run_migrations(config.database_url)
    print("✓ Schema is up to date")

    with TripStore(config) as store:
        if "--clear" in argv:
            removed = store.clear_all()
            print(f"✓ Removed {removed} existing trips")

        created = create_sample_data(store)
        if created:
            print(f"✓ Created {created} sample trips")
        else:
            print("✓ Trips already exist, nothing seeded")

        print()
        for trip in store.list_trips():
            print(f"  {trip.title:<24} {format_date_range(trip.start_date, trip.end_date)}")

    print()
    print("✅ Database ready")


if __name__ == "__main__":
    main(sys.argv[1:])
