"""SQLAlchemy ORM model for the itinerary_items table."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tripbook.db.schemas.base import Base, new_id


class ItineraryItem(Base):
    __tablename__ = "itinerary_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    trip_id: Mapped[str] = mapped_column(String(36), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    destination_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("trip_destinations.id", ondelete="SET NULL")
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    start_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_time: Mapped[datetime | None] = mapped_column(DateTime)
    category: Mapped[str] = mapped_column(String(20), nullable=False, default="excursion")

    __table_args__ = (
        CheckConstraint(
            "category IN ('accommodation', 'transport', 'excursion', 'food', 'other')",
            name="chk_itinerary_items_category",
        ),
        Index("idx_itinerary_items_trip_id", "trip_id"),
        Index("idx_itinerary_items_start_time", "start_time"),
    )
