"""Store layer for cageledger."""

from cageledger.database.base import Store, StoreQuery, CUSTOMER, DAILY_RECORD
from cageledger.database.factories import create_sqlite_store

__all__ = ["Store", "StoreQuery", "CUSTOMER", "DAILY_RECORD", "create_sqlite_store"]
