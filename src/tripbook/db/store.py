"""Local trip database: session management and CRUD over a trip and what it owns."""

import logging
from datetime import date, datetime, time, timedelta

from sqlalchemy import Engine, create_engine, event, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from tripbook.config import Config
from tripbook.db.schemas.base import Base
from tripbook.db.schemas.destination import TripDestination
from tripbook.db.schemas.document import TravelDocument
from tripbook.db.schemas.expense import Expense
from tripbook.db.schemas.itinerary_item import ItineraryItem
from tripbook.db.schemas.setting import AppSetting
from tripbook.db.schemas.trip import Trip
from tripbook.errors import ErrorCode, NotFoundError, StorageError, TripbookError
from tripbook.models.forms import DestinationForm, DocumentForm, ExpenseForm, ItineraryItemForm, TripForm
from tripbook.services.expenses import toggle_paid

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class TripStore:
    """Single-writer store for trips and everything a trip owns.

    One Session is held for the lifetime of the connection and must only be
    used from the thread that owns the store.
    """

    def __init__(self, config: Config) -> None:
        self._config = config
        self._engine: Engine | None = None
        self._session: Session | None = None

    def connect(self) -> None:
        try:
            self._engine = create_engine(self._config.database_url, echo=self._config.sql_echo)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not open database: {e}", code=ErrorCode.STORAGE_UNAVAILABLE) from e
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
        self._session = sessionmaker(self._engine, expire_on_commit=False)()

    def disconnect(self) -> None:
        if self._session is not None:
            self._session.close()
        if self._engine is not None:
            self._engine.dispose()
        self._session = None
        self._engine = None

    def _require_session(self) -> Session:
        """Return the active session or raise if not connected."""
        if self._session is None:
            raise TripbookError("TripStore is not connected. Call connect() first.")
        return self._session

    def create_schema(self) -> None:
        self._require_session()
        Base.metadata.create_all(self._engine)

    def health_check(self) -> bool:
        try:
            session = self._require_session()
            session.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    def _commit(self) -> None:
        session = self._require_session()
        try:
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Commit failed")
            raise StorageError(f"Commit failed: {e}", code=ErrorCode.SAVE_FAILED) from e

    def _get(self, model: type, row_id: str, code: ErrorCode):
        row = self._require_session().get(model, row_id)
        if row is None:
            raise NotFoundError(f"{model.__name__} {row_id} not found", code=code)
        return row

    # --- Trips ---

    def create_trip(self, form: TripForm) -> Trip:
        trip = Trip(**form.model_dump())
        self._require_session().add(trip)
        self._commit()
        logger.info("Created trip %s", trip.id)
        return trip

    def get_trip(self, trip_id: str) -> Trip:
        return self._get(Trip, trip_id, ErrorCode.TRIP_NOT_FOUND)

    def list_trips(self, search: str = "") -> list[Trip]:
        """Trips ordered by start date, optionally matching title or destination."""
        stmt = select(Trip).order_by(Trip.start_date, Trip.title)
        needle = search.strip()
        if needle:
            stmt = stmt.where(
                Trip.title.icontains(needle, autoescape=True) | Trip.destination.icontains(needle, autoescape=True)
            )
        return list(self._require_session().scalars(stmt))

    def update_trip(self, trip_id: str, form: TripForm) -> Trip:
        trip = self.get_trip(trip_id)
        for field, value in form.model_dump().items():
            setattr(trip, field, value)
        self._commit()
        return trip

    def delete_trip(self, trip_id: str) -> None:
        trip = self.get_trip(trip_id)
        self._require_session().delete(trip)
        self._commit()
        logger.info("Deleted trip %s", trip_id)

    def clear_all(self) -> int:
        """Delete every trip (and, by cascade, everything it owns)."""
        session = self._require_session()
        trips = list(session.scalars(select(Trip)))
        for trip in trips:
            session.delete(trip)
        self._commit()
        logger.info("Cleared %d trips", len(trips))
        return len(trips)

    # --- Destinations ---

    def add_destination(self, trip_id: str, form: DestinationForm) -> TripDestination:
        trip = self.get_trip(trip_id)
        destination = TripDestination(**form.model_dump())
        trip.destinations.append(destination)
        self._commit()
        return destination

    def get_destination(self, destination_id: str) -> TripDestination:
        return self._get(TripDestination, destination_id, ErrorCode.DESTINATION_NOT_FOUND)

    def list_destinations(self, trip_id: str) -> list[TripDestination]:
        stmt = (
            select(TripDestination)
            .where(TripDestination.trip_id == trip_id)
            .order_by(TripDestination.start_date, TripDestination.name)
        )
        return list(self._require_session().scalars(stmt))

    def update_destination(self, destination_id: str, form: DestinationForm) -> TripDestination:
        destination = self.get_destination(destination_id)
        for field, value in form.model_dump().items():
            setattr(destination, field, value)
        self._commit()
        return destination

    def delete_destination(self, destination_id: str) -> None:
        destination = self.get_destination(destination_id)
        session = self._require_session()
        session.execute(
            update(ItineraryItem)
            .where(ItineraryItem.destination_id == destination_id)
            .values(destination_id=None)
            .execution_options(synchronize_session="fetch")
        )
        trip = self.get_trip(destination.trip_id)
        trip.destinations.remove(destination)
        self._commit()

    # --- Itinerary ---

    def add_itinerary_item(self, trip_id: str, form: ItineraryItemForm) -> ItineraryItem:
        trip = self.get_trip(trip_id)
        if form.destination_id is not None:
            destination = self.get_destination(form.destination_id)
            if destination.trip_id != trip_id:
                raise NotFoundError(
                    f"Destination {form.destination_id} does not belong to trip {trip_id}",
                    code=ErrorCode.DESTINATION_NOT_FOUND,
                )
        item = ItineraryItem(**form.model_dump(exclude={"category"}), category=form.category.value)
        trip.itinerary_items.append(item)
        self._commit()
        return item

    def get_itinerary_item(self, item_id: str) -> ItineraryItem:
        return self._get(ItineraryItem, item_id, ErrorCode.ITEM_NOT_FOUND)

    def list_itinerary_items(self, trip_id: str) -> list[ItineraryItem]:
        stmt = select(ItineraryItem).where(ItineraryItem.trip_id == trip_id).order_by(ItineraryItem.start_time)
        return list(self._require_session().scalars(stmt))

    def items_on(self, trip_id: str, day: date) -> list[ItineraryItem]:
        """Items of a trip that start on the given calendar day, earliest first."""
        day_start = datetime.combine(day, time.min)
        stmt = (
            select(ItineraryItem)
            .where(
                ItineraryItem.trip_id == trip_id,
                ItineraryItem.start_time >= day_start,
                ItineraryItem.start_time < day_start + timedelta(days=1),
            )
            .order_by(ItineraryItem.start_time)
        )
        return list(self._require_session().scalars(stmt))

    def delete_itinerary_item(self, item_id: str) -> None:
        item = self.get_itinerary_item(item_id)
        self.get_trip(item.trip_id).itinerary_items.remove(item)
        self._commit()

    # --- Expenses ---

    def add_expense(self, trip_id: str, form: ExpenseForm) -> Expense:
        trip = self.get_trip(trip_id)
        expense = Expense(currency=trip.currency)
        self._apply_expense_form(expense, form)
        trip.expenses.append(expense)
        self._commit()
        return expense

    def get_expense(self, expense_id: str) -> Expense:
        return self._get(Expense, expense_id, ErrorCode.EXPENSE_NOT_FOUND)

    def list_expenses(self, trip_id: str) -> list[Expense]:
        stmt = (
            select(Expense)
            .where(Expense.trip_id == trip_id)
            .order_by(Expense.expense_date.desc().nulls_last(), Expense.title)
        )
        return list(self._require_session().scalars(stmt))

    def update_expense(self, expense_id: str, form: ExpenseForm) -> Expense:
        expense = self.get_expense(expense_id)
        self._apply_expense_form(expense, form)
        self._commit()
        return expense

    def toggle_expense_paid(self, expense_id: str) -> Expense:
        expense = self.get_expense(expense_id)
        toggle_paid(expense)
        self._commit()
        return expense

    def delete_expense(self, expense_id: str) -> None:
        expense = self.get_expense(expense_id)
        self.get_trip(expense.trip_id).expenses.remove(expense)
        self._commit()

    @staticmethod
    def _apply_expense_form(expense: Expense, form: ExpenseForm) -> None:
        expense.title = form.title
        expense.amount = form.amount
        if form.currency is not None:
            expense.currency = form.currency
        expense.category = form.category.value
        expense.payment_status = form.payment_status.value
        expense.paid_amount = form.paid_amount or 0.0
        expense.due_date = form.due_date
        expense.expense_date = form.expense_date
        expense.notes = form.notes

    # --- Documents ---

    def add_document(self, trip_id: str, form: DocumentForm, added_at: datetime | None = None) -> TravelDocument:
        trip = self.get_trip(trip_id)
        document = TravelDocument(
            title=form.title,
            document_type=form.document_type.value,
            filename=form.filename,
            document_data=form.document_data,
            notes=form.notes,
            date_added=added_at or datetime.now(),
        )
        trip.documents.append(document)
        self._commit()
        logger.info("Stored document %s (%d bytes) for trip %s", document.id, len(form.document_data), trip_id)
        return document

    def get_document(self, document_id: str) -> TravelDocument:
        return self._get(TravelDocument, document_id, ErrorCode.DOCUMENT_NOT_FOUND)

    def list_documents(self, trip_id: str) -> list[TravelDocument]:
        stmt = (
            select(TravelDocument)
            .where(TravelDocument.trip_id == trip_id)
            .order_by(TravelDocument.date_added.desc())
        )
        return list(self._require_session().scalars(stmt))

    def delete_document(self, document_id: str) -> None:
        document = self.get_document(document_id)
        self.get_trip(document.trip_id).documents.remove(document)
        self._commit()

    # --- Settings ---

    def get_setting(self, key: str, default: str | None = None) -> str | None:
        row = self._require_session().get(AppSetting, key)
        return row.value if row is not None else default

    def set_setting(self, key: str, value: str) -> None:
        session = self._require_session()
        row = session.get(AppSetting, key)
        if row is None:
            session.add(AppSetting(key=key, value=value))
        else:
            row.value = value
        self._commit()

    def __enter__(self) -> "TripStore":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
