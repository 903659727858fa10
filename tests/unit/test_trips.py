from datetime import date, datetime
from types import SimpleNamespace

import pytest

from tripbook.models.enums import TripStatus
from tripbook.services.trips import (
    calculate_progress,
    format_date_range,
    search_trips,
    trip_duration_days,
    trip_statistics,
    trip_status,
)

START = date(2026, 3, 10)
END = date(2026, 3, 19)


def test_progress_before_trip_is_zero():
    assert calculate_progress(START, END, datetime(2026, 3, 9, 23, 59)) == 0


def test_progress_after_trip_is_one():
    assert calculate_progress(START, END, datetime(2026, 3, 20, 0, 1)) == 1


def test_progress_at_start_is_zero():
    assert calculate_progress(START, END, datetime(2026, 3, 10)) == 0


def test_progress_midway():
    # Ten whole days; noon on the 15th is 5.5 days in
    assert calculate_progress(START, END, datetime(2026, 3, 15, 12)) == pytest.approx(0.55, abs=1e-6)


def test_progress_single_day_trip():
    assert calculate_progress(START, START, datetime(2026, 3, 10, 12)) == pytest.approx(0.5, abs=1e-6)


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2026, 3, 1), TripStatus.UPCOMING),
        (datetime(2026, 3, 10, 8), TripStatus.IN_PROGRESS),
        (datetime(2026, 3, 19, 22), TripStatus.IN_PROGRESS),
        (datetime(2026, 3, 20, 8), TripStatus.COMPLETED),
    ],
)
def test_trip_status(now, expected):
    assert trip_status(START, END, now) is expected


def test_trip_duration_is_inclusive():
    assert trip_duration_days(START, END) == 10
    assert trip_duration_days(START, START) == 1


def test_format_date_range():
    assert format_date_range(START, END) == "Mar 10, 2026 - Mar 19, 2026"
    assert format_date_range(None, END) == "Not set - Mar 19, 2026"


def _trip(title, destination, start, end, budget=0.0):
    return SimpleNamespace(title=title, destination=destination, start_date=start, end_date=end, budget=budget)


def test_search_trips_matches_title_or_destination():
    trips = [
        _trip("Japan Adventure", "Tokyo, Japan", START, END),
        _trip("Costa Rica Eco-Tour", "San José, Costa Rica", date(2026, 4, 1), date(2026, 4, 8)),
    ]
    assert [t.title for t in search_trips(trips, "tokyo")] == ["Japan Adventure"]
    assert [t.title for t in search_trips(trips, "ECO")] == ["Costa Rica Eco-Tour"]
    assert len(search_trips(trips, "  ")) == 2


def test_trip_statistics():
    trips = [
        _trip("Past", "Barcelona", date(2026, 9, 1), date(2026, 9, 4), 800),
        _trip("Current", "Bangkok", date(2026, 10, 16), date(2026, 10, 26), 1500),
        _trip("Future", "Auckland", date(2026, 12, 19), date(2027, 1, 2), 3000),
    ]
    stats = trip_statistics(trips, today=date(2026, 10, 19))

    assert stats.total_trips == 3
    assert stats.upcoming_trips == 1
    assert stats.travel_days == 4 + 11 + 15
    assert stats.total_budget == 5300
