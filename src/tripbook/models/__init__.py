"""
Pydantic models for tripbook.
"""

from tripbook.models.calendar import CalendarCell, CalendarGrid, DateRange, DestinationSpan
from tripbook.models.enums import DocumentType, ExpenseCategory, ItineraryCategory, PaymentStatus, TripStatus
from tripbook.models.forms import DestinationForm, DocumentForm, ExpenseForm, ItineraryItemForm, TripForm
from tripbook.models.summaries import ExpenseSummary, Preferences, TripStatistics

__all__ = [
    "CalendarCell",
    "CalendarGrid",
    "DateRange",
    "DestinationForm",
    "DestinationSpan",
    "DocumentForm",
    "DocumentType",
    "ExpenseCategory",
    "ExpenseForm",
    "ExpenseSummary",
    "ItineraryCategory",
    "ItineraryItemForm",
    "PaymentStatus",
    "Preferences",
    "TripForm",
    "TripStatistics",
    "TripStatus",
]
