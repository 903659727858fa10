"""SQLAlchemy ORM model for the trips table."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, DateTime, Float, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tripbook.db.schemas.base import Base, new_id

if TYPE_CHECKING:
    from tripbook.db.schemas.destination import TripDestination
    from tripbook.db.schemas.document import TravelDocument
    from tripbook.db.schemas.expense import Expense
    from tripbook.db.schemas.itinerary_item import ItineraryItem


class Trip(Base):
    __tablename__ = "trips"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    destination: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    budget: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    color_hex: Mapped[str] = mapped_column(String(9), nullable=False, default="#4A90E2")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.current_timestamp())

    destinations: Mapped[list[TripDestination]] = relationship(
        cascade="all, delete-orphan", order_by="TripDestination.start_date"
    )
    itinerary_items: Mapped[list[ItineraryItem]] = relationship(
        cascade="all, delete-orphan", order_by="ItineraryItem.start_time"
    )
    expenses: Mapped[list[Expense]] = relationship(cascade="all, delete-orphan")
    documents: Mapped[list[TravelDocument]] = relationship(cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("budget >= 0", name="chk_trips_budget"),
        Index("idx_trips_start_date", "start_date"),
    )
