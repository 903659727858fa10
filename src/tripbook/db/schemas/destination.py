"""SQLAlchemy ORM model for the trip_destinations table."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tripbook.db.schemas.base import Base, new_id


class TripDestination(Base):
    __tablename__ = "trip_destinations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    trip_id: Mapped[str] = mapped_column(String(36), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    color_hex: Mapped[str] = mapped_column(String(9), nullable=False, default="#4A90E2")

    __table_args__ = (Index("idx_trip_destinations_trip_id", "trip_id"),)
