"""Trip timeline helpers: progress, status, duration and statistics."""

from collections.abc import Iterable
from datetime import date, datetime, time
from typing import Any

from tripbook.models.enums import TripStatus
from tripbook.models.summaries import TripStatistics


def _trip_window(start: date, end: date) -> tuple[datetime, datetime]:
    # A trip covers its whole first and last day
    return datetime.combine(start, time.min), datetime.combine(end, time.max)


def calculate_progress(start: date, end: date, now: datetime) -> float:
    """Elapsed fraction of the trip in [0, 1]."""
    window_start, window_end = _trip_window(start, end)
    if now < window_start:
        return 0.0
    if now > window_end:
        return 1.0
    return (now - window_start) / (window_end - window_start)


def trip_status(start: date, end: date, now: datetime) -> TripStatus:
    window_start, window_end = _trip_window(start, end)
    if now < window_start:
        return TripStatus.UPCOMING
    if now > window_end:
        return TripStatus.COMPLETED
    return TripStatus.IN_PROGRESS


def trip_duration_days(start: date, end: date) -> int:
    return (end - start).days + 1


def format_date_range(start: date | None, end: date | None) -> str:
    def fmt(value: date | None) -> str:
        return f"{value:%b} {value.day}, {value.year}" if value is not None else "Not set"

    return f"{fmt(start)} - {fmt(end)}"


def search_trips(trips: Iterable[Any], text: str) -> list[Any]:
    needle = text.strip().casefold()
    if not needle:
        return list(trips)
    return [
        trip
        for trip in trips
        if needle in (trip.title or "").casefold() or needle in (trip.destination or "").casefold()
    ]


def trip_statistics(trips: Iterable[Any], today: date) -> TripStatistics:
    trips = list(trips)
    return TripStatistics(
        total_trips=len(trips),
        upcoming_trips=sum(1 for trip in trips if trip.start_date > today),
        travel_days=sum(trip_duration_days(trip.start_date, trip.end_date) for trip in trips),
        total_budget=sum(trip.budget for trip in trips),
    )
