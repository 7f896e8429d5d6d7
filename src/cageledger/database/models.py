"""SQLAlchemy models for the cageledger store."""

import uuid
from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Index,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class DecimalText(TypeDecorator):
    """Exact decimal stored as text.

    SQLite has no decimal type and Numeric round-trips through float, which
    would break the record invariants.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Optional[Decimal], dialect) -> Optional[str]:
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return Decimal(value)


def utc_now() -> datetime:
    """Return the current UTC time as the naive value SQLite reads back."""
    return datetime.now(UTC).replace(tzinfo=None)


def new_object_id() -> str:
    """Return an opaque store-assigned identifier."""
    return uuid.uuid4().hex


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(String, primary_key=True, default=new_object_id)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False, default="")
    address = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=utc_now, nullable=False)


class DailyRecord(Base):
    """Daily delivery record model.

    ``customer_id`` is a plain column, not a foreign key: deleting a customer
    leaves its records in place.
    """

    __tablename__ = "daily_records"

    id = Column(String, primary_key=True, default=new_object_id)
    date = Column(Date, nullable=False)
    cages = Column(Integer, nullable=False)
    customer_id = Column(String, nullable=False)
    customer_name = Column(String, nullable=False)
    gross_weight = Column(DecimalText, nullable=False)
    empty_weight = Column(DecimalText, nullable=False)
    net_weight = Column(DecimalText, nullable=False)
    price_per_kg = Column(DecimalText, nullable=False)
    total = Column(DecimalText, nullable=False)
    paid = Column(DecimalText, nullable=False)
    remaining = Column(DecimalText, nullable=False)
    old_balance = Column(DecimalText, nullable=False)
    total_balance = Column(DecimalText, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    __table_args__ = (Index("ix_daily_records_customer_date", "customer_id", "date"),)


# Collection name -> model
COLLECTIONS = {
    "Customer": Customer,
    "DailyRecord": DailyRecord,
}


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
