"""Form models validated at the point of user submission."""

import re
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from tripbook.config import get_config
from tripbook.models.enums import DocumentType, ExpenseCategory, ItineraryCategory, PaymentStatus
from tripbook.services.colors import DEFAULT_COLOR, parse_hex, to_hex

_CURRENCY_PATTERN = "^[A-Z]{3}$"
_HEX_COLOR = re.compile(r"^#?[0-9A-Fa-f]{6}$")


def _normalize_color(value: str) -> str:
    if not _HEX_COLOR.match(value.strip()):
        raise ValueError(f"invalid hex color: {value!r}, expected #RRGGBB")
    return to_hex(*parse_hex(value))


def _require_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class TripForm(BaseModel):
    title: str
    destination: str
    start_date: date
    end_date: date
    notes: str = ""
    budget: float = Field(default=0.0, ge=0)
    currency: str = Field(default_factory=lambda: get_config().default_currency, pattern=_CURRENCY_PATTERN)
    color_hex: str = DEFAULT_COLOR

    @field_validator("title", "destination")
    @classmethod
    def required_text(cls, value: str) -> str:
        return _require_text(value)

    @field_validator("color_hex")
    @classmethod
    def valid_color(cls, value: str) -> str:
        return _normalize_color(value)

    @model_validator(mode="after")
    def end_not_before_start(self) -> "TripForm":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class DestinationForm(BaseModel):
    name: str
    start_date: date
    end_date: date
    notes: str = ""
    color_hex: str = DEFAULT_COLOR

    @field_validator("name")
    @classmethod
    def required_text(cls, value: str) -> str:
        return _require_text(value)

    @field_validator("color_hex")
    @classmethod
    def valid_color(cls, value: str) -> str:
        return _normalize_color(value)

    @model_validator(mode="after")
    def end_not_before_start(self) -> "DestinationForm":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ItineraryItemForm(BaseModel):
    title: str
    description: str = ""
    location: str = ""
    start_time: datetime
    end_time: datetime | None = None
    category: ItineraryCategory = ItineraryCategory.EXCURSION
    destination_id: str | None = None

    @field_validator("title")
    @classmethod
    def required_text(cls, value: str) -> str:
        return _require_text(value)

    @model_validator(mode="after")
    def end_not_before_start(self) -> "ItineraryItemForm":
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class ExpenseForm(BaseModel):
    """Expense input.

    Payment fields are normalized to the chosen status: a paid expense is paid
    in full with no due date, a due expense has nothing paid, and a partial
    expense needs 0 < paid_amount < amount (half the amount when omitted).
    """

    title: str
    amount: float = Field(..., gt=0)
    # None takes the trip currency when the expense is stored
    currency: str | None = Field(default=None, pattern=_CURRENCY_PATTERN)
    category: ExpenseCategory = ExpenseCategory.OTHER
    payment_status: PaymentStatus = PaymentStatus.DUE
    paid_amount: float | None = None
    due_date: date | None = None
    expense_date: date | None = None
    notes: str = ""

    @field_validator("title")
    @classmethod
    def required_text(cls, value: str) -> str:
        return _require_text(value)

    @model_validator(mode="after")
    def normalize_payment(self) -> "ExpenseForm":
        if self.payment_status is PaymentStatus.PAID:
            self.paid_amount = self.amount
            self.due_date = None
        elif self.payment_status is PaymentStatus.DUE:
            self.paid_amount = 0.0
        else:
            if self.paid_amount is None:
                half = round(self.amount / 2, 2)
                self.paid_amount = half if 0 < half < self.amount else self.amount / 2
            if not 0 < self.paid_amount < self.amount:
                raise ValueError("paid_amount must be greater than zero and less than amount")
        return self


class DocumentForm(BaseModel):
    title: str
    document_type: DocumentType = DocumentType.OTHER
    filename: str
    document_data: bytes = Field(..., min_length=1)
    notes: str = ""

    @field_validator("title", "filename")
    @classmethod
    def required_text(cls, value: str) -> str:
        return _require_text(value)
