"""
SQLAlchemy declarative base and shared column helpers for tripbook tables.

Import Base from here when defining new tables.
"""

from uuid import uuid4

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    return str(uuid4())


class Base(DeclarativeBase):
    pass
