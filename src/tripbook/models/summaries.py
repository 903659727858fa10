"""Pydantic models for computed trip and expense summaries."""

from pydantic import BaseModel

from tripbook.models.enums import PaymentStatus


class ExpenseSummary(BaseModel):
    total: float
    by_status: dict[PaymentStatus, float]
    settled: float
    outstanding: float
    budget: float
    remaining_budget: float
    over_budget: bool


class TripStatistics(BaseModel):
    total_trips: int
    upcoming_trips: int
    travel_days: int
    total_budget: float


class Preferences(BaseModel):
    preferred_currency: str
    dark_mode: bool = False
