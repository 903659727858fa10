"""Seed a store with a past, a current and a future trip for demos."""

import logging
from datetime import date, datetime, time, timedelta

from tripbook.db.store import TripStore
from tripbook.models.enums import ExpenseCategory, ItineraryCategory, PaymentStatus
from tripbook.models.forms import DestinationForm, ExpenseForm, ItineraryItemForm, TripForm
from tripbook.services.calendar import shift_month

logger = logging.getLogger(__name__)


def _at(day: date, hour: int) -> datetime:
    return datetime.combine(day, time(hour=hour))


def create_sample_data(store: TripStore, today: date | None = None) -> int:
    """Create sample trips when the store is empty. Returns the number created."""
    if store.list_trips():
        logger.info("Store already has trips, skipping sample data")
        return 0

    today = today or date.today()
    past_start = shift_month(today, -1).replace(day=min(today.day, 28))
    future_start = shift_month(today, 2).replace(day=min(today.day, 28))

    store.create_trip(
        TripForm(
            title="Barcelona Weekend",
            destination="Barcelona, Spain",
            start_date=past_start,
            end_date=past_start + timedelta(days=3),
            notes="Short weekend getaway to explore Barcelona's architecture and cuisine",
            budget=800,
            currency="EUR",
            color_hex="#FF9500",
        )
    )

    current = store.create_trip(
        TripForm(
            title="Thailand Adventure",
            destination="Bangkok, Thailand",
            start_date=today - timedelta(days=3),
            end_date=today + timedelta(days=7),
            notes="Exploring temples, street food, and islands",
            budget=1500,
            currency="USD",
            color_hex="#5856D6",
        )
    )
    islands = store.add_destination(
        current.id,
        DestinationForm(
            name="Koh Phangan",
            start_date=today + timedelta(days=3),
            end_date=today + timedelta(days=7),
            color_hex="#34C759",
        ),
    )
    store.add_itinerary_item(
        current.id,
        ItineraryItemForm(
            title="Check-in: Riverside Hostel",
            description="Reservation #BKK28745",
            location="Charoen Krung Rd, Bangkok",
            start_time=_at(today + timedelta(days=1), 14),
            end_time=_at(today + timedelta(days=1), 15),
            category=ItineraryCategory.ACCOMMODATION,
        ),
    )
    store.add_itinerary_item(
        current.id,
        ItineraryItemForm(
            title="Ferry to Koh Phangan",
            location="Donsak Pier",
            start_time=_at(today + timedelta(days=3), 9),
            end_time=_at(today + timedelta(days=3), 12),
            category=ItineraryCategory.TRANSPORT,
            destination_id=islands.id,
        ),
    )
    store.add_expense(
        current.id,
        ExpenseForm(
            title="Hostel Deposit",
            amount=200,
            category=ExpenseCategory.ACCOMMODATION,
            payment_status=PaymentStatus.PAID,
            expense_date=today - timedelta(days=10),
        ),
    )
    store.add_expense(
        current.id,
        ExpenseForm(
            title="Flight TG917",
            amount=850,
            category=ExpenseCategory.TRANSPORT,
            payment_status=PaymentStatus.PARTIAL,
            paid_amount=400,
            due_date=today + timedelta(days=14),
            expense_date=today - timedelta(days=30),
        ),
    )

    store.create_trip(
        TripForm(
            title="New Zealand Trek",
            destination="Auckland, New Zealand",
            start_date=future_start,
            end_date=future_start + timedelta(days=14),
            notes="Hiking, nature photography, and adventure sports",
            budget=3000,
            currency="USD",
            color_hex="#34C759",
        )
    )

    logger.info("Created sample data: 3 trips")
    return 3
