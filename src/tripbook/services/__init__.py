"""
Services for tripbook.

- calendar.py: month grid for a trip (42 cells, trip range, item and destination flags)
- colors.py: hex color parsing and normalization
- documents.py: document size and type helpers
- expenses.py: due/paid arithmetic, totals, filtering and sorting
- migration.py: Alembic upgrades for the local database
- preferences.py: persisted currency and dark-mode preferences
- sample_data.py: demo trips for an empty store
- trips.py: progress, status, duration and statistics
"""

__all__: list[str] = []
