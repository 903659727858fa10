"""Month calendar grid for a trip.

The grid always holds 42 cells (six weeks of seven days), laid out
left-to-right, top-to-bottom, starting on the configured first weekday.
Weekdays use the 1-7 numbering where 1 is Sunday and 7 is Saturday.

Usage:
    grid = build_month_grid(
        month=date(2026, 3, 1),
        first_weekday=2,
        trip_range=DateRange(start=date(2026, 3, 10), end=date(2026, 3, 19)),
        item_starts=[item.start_time for item in items],
        destinations=[DestinationSpan(start=..., end=..., color="#FF9500")],
        trip_color="#4A90E2",
    )
"""

import calendar
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta
from typing import Any

from tripbook.config import get_config
from tripbook.models.calendar import DAYS_PER_WEEK, GRID_SIZE, CalendarCell, CalendarGrid, DateRange, DestinationSpan
from tripbook.services.colors import DEFAULT_COLOR, resolve_color

# calendar.day_abbr is indexed Monday=0 .. Sunday=6
_SUNDAY_FIRST_ABBR = [calendar.day_abbr[(i + 6) % 7] for i in range(DAYS_PER_WEEK)]


def _check_first_weekday(first_weekday: int) -> None:
    if not 1 <= first_weekday <= DAYS_PER_WEEK:
        raise ValueError(f"first_weekday must be in 1..7, got {first_weekday}")


def weekday_number(day: date) -> int:
    """Weekday of a date as 1 (Sunday) .. 7 (Saturday)."""
    return day.isoweekday() % 7 + 1


def weekday_headers(first_weekday: int = 1) -> list[str]:
    """Short weekday names in grid column order."""
    _check_first_weekday(first_weekday)
    offset = first_weekday - 1
    return _SUNDAY_FIRST_ABBR[offset:] + _SUNDAY_FIRST_ABBR[:offset]


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def shift_month(month: date, months: int) -> date:
    """First day of the month `months` away from the month containing `month`."""
    index = month.year * 12 + (month.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_title(month: date) -> str:
    return f"{calendar.month_name[month.month]} {month.year}"


def leading_offset(month: date, first_weekday: int) -> int:
    """Number of filler cells before the 1st of the month."""
    _check_first_weekday(first_weekday)
    return (weekday_number(first_of_month(month)) + DAYS_PER_WEEK - first_weekday) % DAYS_PER_WEEK


def is_date_in_range(day: date, start: date | None, end: date | None) -> bool:
    if start is None or end is None:
        return False
    return start <= day <= end


def color_for_date(day: date, destinations: Iterable[DestinationSpan], default: str) -> str:
    """Destination color when exactly one destination covers the day, else default."""
    covering = [span for span in destinations if span.contains(day)]
    if len(covering) == 1:
        return covering[0].color
    return default


def items_on_day(items: Iterable[Any], day: date) -> list[Any]:
    """Items whose start_time falls on the given day, earliest first."""
    return sorted(
        (item for item in items if item.start_time is not None and item.start_time.date() == day),
        key=lambda item: item.start_time,
    )


def build_month_grid(
    month: date,
    first_weekday: int = 1,
    trip_range: DateRange | None = None,
    item_starts: Iterable[datetime] = (),
    destinations: Sequence[DestinationSpan] = (),
    trip_color: str = DEFAULT_COLOR,
    show_adjacent_days: bool = True,
) -> CalendarGrid:
    """Build the 42-cell grid for the month containing `month`.

    Filler cells before and after the month carry the adjacent months' dates
    when `show_adjacent_days` is set, and no date otherwise.
    """
    first_day = first_of_month(month)
    offset = leading_offset(first_day, first_weekday)
    days_in_month = calendar.monthrange(first_day.year, first_day.month)[1]
    item_days = {start.date() for start in item_starts}

    cells: list[CalendarCell] = []
    grid_start = first_day - timedelta(days=offset)
    for index in range(GRID_SIZE):
        day = grid_start + timedelta(days=index)
        in_current_month = offset <= index < offset + days_in_month
        if not in_current_month and not show_adjacent_days:
            cells.append(CalendarCell(index=index, in_current_month=False, color=trip_color))
            continue
        cells.append(
            CalendarCell(
                index=index,
                day=day,
                in_current_month=in_current_month,
                in_trip=trip_range is not None and trip_range.contains(day),
                has_items=day in item_days,
                color=color_for_date(day, destinations, trip_color),
            )
        )

    return CalendarGrid(month=first_day, first_weekday=first_weekday, cells=cells)


def month_grid_for_trip(
    trip: Any,
    items: Iterable[Any],
    destinations: Iterable[Any],
    month: date | None = None,
    first_weekday: int | None = None,
    show_adjacent_days: bool = True,
) -> CalendarGrid:
    """Grid for a stored trip, its itinerary items and its destinations.

    Defaults to the month the trip starts in and to the configured first
    weekday and fallback color.
    """
    config = get_config()
    if first_weekday is None:
        first_weekday = config.first_weekday
    trip_color = resolve_color(trip.color_hex, config.default_color)
    spans = [
        DestinationSpan(start=d.start_date, end=d.end_date, color=resolve_color(d.color_hex, trip_color))
        for d in destinations
        if d.start_date is not None and d.end_date is not None
    ]
    return build_month_grid(
        month=month or trip.start_date,
        first_weekday=first_weekday,
        trip_range=DateRange(start=trip.start_date, end=trip.end_date),
        item_starts=[item.start_time for item in items if item.start_time is not None],
        destinations=spans,
        trip_color=trip_color,
        show_adjacent_days=show_adjacent_days,
    )
