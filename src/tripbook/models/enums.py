"""Closed tag sets shared by forms, storage and services."""

from enum import Enum


class ItineraryCategory(str, Enum):
    ACCOMMODATION = "accommodation"
    TRANSPORT = "transport"
    EXCURSION = "excursion"
    FOOD = "food"
    OTHER = "other"


class ExpenseCategory(str, Enum):
    ACCOMMODATION = "accommodation"
    TRANSPORT = "transport"
    FOOD = "food"
    ACTIVITIES = "activities"
    SHOPPING = "shopping"
    OTHER = "other"


class PaymentStatus(str, Enum):
    PAID = "paid"
    DUE = "due"
    PARTIAL = "partial"


class DocumentType(str, Enum):
    PASSPORT = "passport"
    VISA = "visa"
    INSURANCE = "insurance"
    TICKET = "ticket"
    RESERVATION = "reservation"
    VACCINATION = "vaccination"
    IMAGE = "image"
    PDF = "pdf"
    OTHER = "other"


class TripStatus(str, Enum):
    UPCOMING = "upcoming"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    TripStatus.UPCOMING: "Upcoming",
    TripStatus.IN_PROGRESS: "In Progress",
    TripStatus.COMPLETED: "Completed",
}


EXPENSE_CATEGORY_LABELS: dict[ExpenseCategory, str] = {
    ExpenseCategory.ACCOMMODATION: "Accommodation",
    ExpenseCategory.TRANSPORT: "Transportation",
    ExpenseCategory.FOOD: "Food & Dining",
    ExpenseCategory.ACTIVITIES: "Activities & Tours",
    ExpenseCategory.SHOPPING: "Shopping",
    ExpenseCategory.OTHER: "Other",
}

PAYMENT_STATUS_LABELS: dict[PaymentStatus, str] = {
    PaymentStatus.PAID: "Paid",
    PaymentStatus.DUE: "Due",
    PaymentStatus.PARTIAL: "Partially Paid",
}
