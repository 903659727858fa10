"""Pydantic models for the month calendar grid."""

from datetime import date

from pydantic import BaseModel, model_validator

GRID_SIZE = 42
DAYS_PER_WEEK = 7


class DateRange(BaseModel):
    start: date
    end: date

    @model_validator(mode="after")
    def end_not_before_start(self) -> "DateRange":
        if self.end < self.start:
            raise ValueError("end must not be before start")
        return self

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class DestinationSpan(BaseModel):
    start: date
    end: date
    color: str

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class CalendarCell(BaseModel):
    index: int
    day: date | None = None
    in_current_month: bool
    in_trip: bool = False
    has_items: bool = False
    color: str

    @property
    def day_number(self) -> int | None:
        return self.day.day if self.day is not None else None


class CalendarGrid(BaseModel):
    month: date
    first_weekday: int
    cells: list[CalendarCell]

    @property
    def weeks(self) -> list[list[CalendarCell]]:
        return [self.cells[i : i + DAYS_PER_WEEK] for i in range(0, len(self.cells), DAYS_PER_WEEK)]

    @property
    def month_cells(self) -> list[CalendarCell]:
        return [cell for cell in self.cells if cell.in_current_month]

    @property
    def filler_cells(self) -> list[CalendarCell]:
        return [cell for cell in self.cells if not cell.in_current_month]

    @property
    def trip_cells(self) -> list[CalendarCell]:
        return [cell for cell in self.cells if cell.in_trip]
