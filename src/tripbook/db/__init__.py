"""
Database ORM models and store for tripbook.

Importing this package registers all tables on Base.metadata,
which Alembic needs for autogenerate.
"""

from tripbook.db.schemas.base import Base
from tripbook.db.schemas.destination import TripDestination
from tripbook.db.schemas.document import TravelDocument
from tripbook.db.schemas.expense import Expense
from tripbook.db.schemas.itinerary_item import ItineraryItem
from tripbook.db.schemas.setting import AppSetting
from tripbook.db.schemas.trip import Trip
from tripbook.db.store import TripStore

__all__ = [
    "AppSetting",
    "Base",
    "Expense",
    "ItineraryItem",
    "TravelDocument",
    "Trip",
    "TripDestination",
    "TripStore",
]
