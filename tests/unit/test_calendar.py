import calendar as stdlib_calendar
from datetime import date, datetime
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from tripbook.config import Config
from tripbook.models.calendar import DateRange, DestinationSpan
from tripbook.services.calendar import (
    build_month_grid,
    color_for_date,
    is_date_in_range,
    items_on_day,
    leading_offset,
    month_grid_for_trip,
    month_title,
    shift_month,
    weekday_headers,
    weekday_number,
)

TRIP_COLOR = "#4A90E2"
MARCH_TRIP = DateRange(start=date(2026, 3, 10), end=date(2026, 3, 19))

ALL_MONTHS = [date(year, month, 15) for year in (2023, 2024, 2026) for month in range(1, 13)]


# --- Grid shape ---


@pytest.mark.parametrize("month", ALL_MONTHS)
@pytest.mark.parametrize("first_weekday", range(1, 8))
def test_grid_always_has_42_cells(month, first_weekday):
    grid = build_month_grid(month, first_weekday=first_weekday)
    days_in_month = stdlib_calendar.monthrange(month.year, month.month)[1]

    assert len(grid.cells) == 42
    assert len(grid.month_cells) == days_in_month
    assert len(grid.filler_cells) == 42 - days_in_month
    assert [cell.index for cell in grid.cells] == list(range(42))


@pytest.mark.parametrize("first_weekday", range(1, 8))
def test_first_column_matches_first_weekday(first_weekday):
    grid = build_month_grid(date(2026, 10, 1), first_weekday=first_weekday)
    for week in grid.weeks:
        assert weekday_number(week[0].day) == first_weekday


def test_cells_are_consecutive_days():
    grid = build_month_grid(date(2026, 2, 1))
    days = [cell.day for cell in grid.cells]
    assert all((b - a).days == 1 for a, b in zip(days, days[1:]))


def test_month_cells_cover_the_month_in_order():
    grid = build_month_grid(date(2024, 2, 20))
    assert [cell.day for cell in grid.month_cells] == [date(2024, 2, d) for d in range(1, 30)]


def test_leading_cells_are_previous_month_days():
    # 1 October 2026 is a Thursday
    grid = build_month_grid(date(2026, 10, 1), first_weekday=1)
    leading = grid.cells[:4]
    assert [cell.day for cell in leading] == [date(2026, 9, d) for d in (27, 28, 29, 30)]
    assert not any(cell.in_current_month for cell in leading)


def test_trailing_cells_are_next_month_days():
    grid = build_month_grid(date(2026, 10, 1), first_weekday=1)
    trailing = grid.cells[4 + 31 :]
    assert trailing[0].day == date(2026, 11, 1)
    assert trailing[-1].day == date(2026, 11, 7)


def test_february_starting_on_first_weekday_has_no_leading_filler():
    # 1 February 2026 is a Sunday: four full weeks, then two weeks of March
    grid = build_month_grid(date(2026, 2, 1), first_weekday=1)
    assert grid.cells[0].day == date(2026, 2, 1)
    assert all(not cell.in_current_month for cell in grid.weeks[4] + grid.weeks[5])


def test_hidden_adjacent_days_have_no_date():
    grid = build_month_grid(date(2026, 10, 1), first_weekday=1, show_adjacent_days=False)
    assert all(cell.day is None for cell in grid.filler_cells)
    assert all(cell.day is not None for cell in grid.month_cells)
    assert len(grid.cells) == 42


def test_grid_month_is_first_of_month():
    assert build_month_grid(date(2026, 7, 23)).month == date(2026, 7, 1)


@pytest.mark.parametrize("first_weekday", [0, 8, -1])
def test_invalid_first_weekday_raises(first_weekday):
    with pytest.raises(ValueError):
        build_month_grid(date(2026, 3, 1), first_weekday=first_weekday)


# --- Trip range ---


def test_ten_day_trip_highlights_ten_cells():
    grid = build_month_grid(date(2026, 4, 1), trip_range=DateRange(start=date(2026, 4, 5), end=date(2026, 4, 14)))
    assert len(grid.cells) == 42
    assert len(grid.trip_cells) == 10


def test_trip_range_is_inclusive_on_both_ends():
    grid = build_month_grid(date(2026, 3, 1), trip_range=MARCH_TRIP)
    in_trip = {cell.day for cell in grid.trip_cells}
    assert date(2026, 3, 10) in in_trip
    assert date(2026, 3, 19) in in_trip
    assert date(2026, 3, 9) not in in_trip
    assert date(2026, 3, 20) not in in_trip


def test_trip_spanning_months_flags_adjacent_days():
    trip = DateRange(start=date(2026, 9, 28), end=date(2026, 10, 3))
    grid = build_month_grid(date(2026, 10, 1), first_weekday=1, trip_range=trip)
    flagged = [cell for cell in grid.trip_cells]
    assert len(flagged) == 6
    assert sum(1 for cell in flagged if not cell.in_current_month) == 3


def test_no_trip_range_flags_nothing():
    assert build_month_grid(date(2026, 3, 1)).trip_cells == []


def test_is_date_in_range_missing_bounds():
    assert not is_date_in_range(date(2026, 3, 1), None, date(2026, 3, 5))
    assert is_date_in_range(date(2026, 3, 5), date(2026, 3, 1), date(2026, 3, 5))


# --- Items and colors ---


def test_has_items_ignores_time_of_day():
    starts = [datetime(2026, 3, 12, 23, 59), datetime(2026, 3, 15, 0, 0)]
    grid = build_month_grid(date(2026, 3, 1), item_starts=starts)
    flagged = {cell.day for cell in grid.cells if cell.has_items}
    assert flagged == {date(2026, 3, 12), date(2026, 3, 15)}


def test_color_uses_single_covering_destination():
    spans = [DestinationSpan(start=date(2026, 3, 10), end=date(2026, 3, 13), color="#FF9500")]
    grid = build_month_grid(date(2026, 3, 1), trip_range=MARCH_TRIP, destinations=spans, trip_color=TRIP_COLOR)
    by_day = {cell.day: cell.color for cell in grid.cells}
    assert by_day[date(2026, 3, 10)] == "#FF9500"
    assert by_day[date(2026, 3, 13)] == "#FF9500"
    assert by_day[date(2026, 3, 14)] == TRIP_COLOR


def test_overlapping_destinations_fall_back_to_trip_color():
    spans = [
        DestinationSpan(start=date(2026, 3, 10), end=date(2026, 3, 14), color="#FF9500"),
        DestinationSpan(start=date(2026, 3, 14), end=date(2026, 3, 19), color="#34C759"),
    ]
    assert color_for_date(date(2026, 3, 14), spans, TRIP_COLOR) == TRIP_COLOR
    assert color_for_date(date(2026, 3, 13), spans, TRIP_COLOR) == "#FF9500"
    assert color_for_date(date(2026, 3, 15), spans, TRIP_COLOR) == "#34C759"


def test_items_on_day_sorted_by_start():
    late = SimpleNamespace(title="Dinner", start_time=datetime(2026, 3, 12, 19))
    early = SimpleNamespace(title="Museum", start_time=datetime(2026, 3, 12, 9))
    other = SimpleNamespace(title="Ferry", start_time=datetime(2026, 3, 13, 9))
    assert items_on_day([late, other, early], date(2026, 3, 12)) == [early, late]


def test_month_grid_for_trip_defaults_to_trip_start_month():
    trip = SimpleNamespace(start_date=date(2026, 3, 10), end_date=date(2026, 3, 19), color_hex="#4a90e2")
    destinations = [SimpleNamespace(start_date=date(2026, 3, 15), end_date=date(2026, 3, 19), color_hex="not-a-color")]
    items = [SimpleNamespace(start_time=datetime(2026, 3, 11, 10))]

    grid = month_grid_for_trip(trip, items, destinations)

    assert grid.month == date(2026, 3, 1)
    assert len(grid.trip_cells) == 10
    assert [cell.day for cell in grid.cells if cell.has_items] == [date(2026, 3, 11)]
    # Unparseable destination color falls back to the trip color
    assert {cell.color for cell in grid.trip_cells} == {"#4A90E2"}


def test_month_grid_for_trip_uses_configured_defaults():
    config = Config(
        database_url="sqlite://",
        default_currency="EUR",
        default_color="#FF9500",
        first_weekday=2,
        environment="test",
    )
    trip = SimpleNamespace(start_date=date(2026, 3, 10), end_date=date(2026, 3, 12), color_hex="")

    with patch("tripbook.services.calendar.get_config", return_value=config):
        grid = month_grid_for_trip(trip, [], [])

    assert grid.first_weekday == 2
    assert weekday_number(grid.cells[0].day) == 2
    assert {cell.color for cell in grid.trip_cells} == {"#FF9500"}


# --- Helpers ---


def test_weekday_number_sunday_is_one():
    assert weekday_number(date(2026, 3, 1)) == 1  # Sunday
    assert weekday_number(date(2026, 3, 7)) == 7  # Saturday


def test_weekday_headers_rotate():
    sunday_first = weekday_headers(1)
    monday_first = weekday_headers(2)
    assert len(sunday_first) == 7
    assert monday_first == sunday_first[1:] + sunday_first[:1]


def test_leading_offset():
    assert leading_offset(date(2026, 10, 20), 1) == 4
    assert leading_offset(date(2026, 10, 20), 2) == 3
    assert leading_offset(date(2026, 3, 1), 1) == 0


@pytest.mark.parametrize(
    "month, delta, expected",
    [
        (date(2026, 1, 31), 1, date(2026, 2, 1)),
        (date(2026, 1, 15), -1, date(2025, 12, 1)),
        (date(2026, 12, 1), 1, date(2027, 1, 1)),
        (date(2026, 5, 9), 0, date(2026, 5, 1)),
        (date(2026, 5, 9), -17, date(2024, 12, 1)),
    ],
)
def test_shift_month(month, delta, expected):
    assert shift_month(month, delta) == expected


def test_month_title():
    assert month_title(date(2026, 10, 19)) == "October 2026"
