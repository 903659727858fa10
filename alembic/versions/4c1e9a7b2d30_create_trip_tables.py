"""create_trip_tables

Revision ID: 4c1e9a7b2d30
Revises: 
Create Date: 2026-10-19 09:12:44.103512

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e9a7b2d30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        CREATE TABLE trips (
            id VARCHAR(36) PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            destination VARCHAR(255) NOT NULL,
            start_date DATE NOT NULL,
            end_date DATE NOT NULL,
            notes TEXT NOT NULL,
            budget FLOAT NOT NULL,
            currency VARCHAR(3) NOT NULL,
            color_hex VARCHAR(9) NOT NULL,
            created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT chk_trips_budget CHECK (budget >= 0)
        )
    """)
    op.execute("CREATE INDEX idx_trips_start_date ON trips (start_date)")

    op.execute("""
        CREATE TABLE trip_destinations (
            id VARCHAR(36) PRIMARY KEY,
            trip_id VARCHAR(36) NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            name VARCHAR(255) NOT NULL,
            start_date DATE NOT NULL,
            end_date DATE NOT NULL,
            notes TEXT NOT NULL,
            color_hex VARCHAR(9) NOT NULL
        )
    """)
    op.execute("CREATE INDEX idx_trip_destinations_trip_id ON trip_destinations (trip_id)")

    op.execute("""
        CREATE TABLE itinerary_items (
            id VARCHAR(36) PRIMARY KEY,
            trip_id VARCHAR(36) NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            destination_id VARCHAR(36) REFERENCES trip_destinations (id) ON DELETE SET NULL,
            title VARCHAR(255) NOT NULL,
            description TEXT NOT NULL,
            location VARCHAR(255) NOT NULL,
            start_time DATETIME NOT NULL,
            end_time DATETIME,
            category VARCHAR(20) NOT NULL,
            CONSTRAINT chk_itinerary_items_category
                CHECK (category IN ('accommodation', 'transport', 'excursion', 'food', 'other'))
        )
    """)
    op.execute("CREATE INDEX idx_itinerary_items_trip_id ON itinerary_items (trip_id)")
    op.execute("CREATE INDEX idx_itinerary_items_start_time ON itinerary_items (start_time)")

    op.execute("""
        CREATE TABLE expenses (
            id VARCHAR(36) PRIMARY KEY,
            trip_id VARCHAR(36) NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            title VARCHAR(255) NOT NULL,
            amount FLOAT NOT NULL,
            currency VARCHAR(3) NOT NULL,
            category VARCHAR(20) NOT NULL,
            payment_status VARCHAR(10) NOT NULL,
            paid_amount FLOAT NOT NULL,
            due_date DATE,
            expense_date DATE,
            notes TEXT NOT NULL,
            CONSTRAINT chk_expenses_payment_status CHECK (payment_status IN ('paid', 'due', 'partial')),
            CONSTRAINT chk_expenses_category
                CHECK (category IN ('accommodation', 'transport', 'food', 'activities', 'shopping', 'other'))
        )
    """)
    op.execute("CREATE INDEX idx_expenses_trip_id ON expenses (trip_id)")

    op.execute("""
        CREATE TABLE travel_documents (
            id VARCHAR(36) PRIMARY KEY,
            trip_id VARCHAR(36) NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            title VARCHAR(255) NOT NULL,
            document_type VARCHAR(20) NOT NULL,
            filename VARCHAR(255) NOT NULL,
            document_data BLOB NOT NULL,
            date_added DATETIME NOT NULL,
            notes TEXT NOT NULL
        )
    """)
    op.execute("CREATE INDEX idx_travel_documents_trip_id ON travel_documents (trip_id)")

    op.create_table(
        "app_settings",
        sa.Column("key", sa.String(64), primary_key=True),
        sa.Column("value", sa.String(255), nullable=False),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("app_settings")
    op.execute("DROP TABLE IF EXISTS travel_documents")
    op.execute("DROP TABLE IF EXISTS expenses")
    op.execute("DROP TABLE IF EXISTS itinerary_items")
    op.execute("DROP TABLE IF EXISTS trip_destinations")
    op.execute("DROP TABLE IF EXISTS trips")
