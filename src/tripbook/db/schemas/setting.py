"""SQLAlchemy ORM model for the app_settings key-value table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tripbook.db.schemas.base import Base


class AppSetting(Base):
    __tablename__ = "app_settings"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
