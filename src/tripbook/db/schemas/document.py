"""SQLAlchemy ORM model for the travel_documents table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tripbook.db.schemas.base import Base, new_id


class TravelDocument(Base):
    __tablename__ = "travel_documents"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    trip_id: Mapped[str] = mapped_column(String(36), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    document_type: Mapped[str] = mapped_column(String(20), nullable=False, default="other")
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    # Opaque payload: images, PDFs, scans
    document_data: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    date_added: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (Index("idx_travel_documents_trip_id", "trip_id"),)
