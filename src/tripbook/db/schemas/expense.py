"""SQLAlchemy ORM model for the expenses table."""

from datetime import date

from sqlalchemy import CheckConstraint, Date, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tripbook.db.schemas.base import Base, new_id


class Expense(Base):
    __tablename__ = "expenses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    trip_id: Mapped[str] = mapped_column(String(36), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    category: Mapped[str] = mapped_column(String(20), nullable=False, default="other")
    payment_status: Mapped[str] = mapped_column(String(10), nullable=False, default="due")
    paid_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    due_date: Mapped[date | None] = mapped_column(Date)
    expense_date: Mapped[date | None] = mapped_column(Date)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        CheckConstraint("payment_status IN ('paid', 'due', 'partial')", name="chk_expenses_payment_status"),
        CheckConstraint(
            "category IN ('accommodation', 'transport', 'food', 'activities', 'shopping', 'other')",
            name="chk_expenses_category",
        ),
        Index("idx_expenses_trip_id", "trip_id"),
    )
