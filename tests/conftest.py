"""Shared pytest fixtures for cageledger tests."""

import logging
import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from cageledger.database.factories import create_sqlite_store
from cageledger.domain.customer import CustomerService
from cageledger.domain.ledger import LedgerService


@pytest.fixture
def temp_store():
    """Create a store backed by a temporary SQLite file."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for CLI tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def customer_service(temp_store):
    """Create a CustomerService with a temporary store."""
    return CustomerService(temp_store)


@pytest.fixture
def ledger_service(temp_store, customer_service):
    """Create a LedgerService with a temporary store."""
    return LedgerService(temp_store, customer_service)


@pytest.fixture
def sample_customer(customer_service):
    """Register a sample customer."""
    return customer_service.register(name="Abu Ahmed", phone="0100000000", address="Tanta")


@pytest.fixture
def other_customer(customer_service):
    """Register a second customer."""
    return customer_service.register(name="Hassan Farm")


@pytest.fixture
def record_delivery(ledger_service):
    """Return a helper that records a delivery with sensible defaults."""

    def _record(customer, day, gross="100", empty="20", price="10", paid="0", cages=10):
        return ledger_service.create_transaction(
            date=day,
            cages=cages,
            customer_id=customer.id,
            gross_weight=Decimal(gross),
            empty_weight=Decimal(empty),
            price_per_kg=Decimal(price),
            paid=Decimal(paid),
        )

    return _record


@pytest.fixture
def jan_first():
    return date(2024, 1, 1)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def package_logger(monkeypatch):
    """Give each test a fresh cageledger logger.

    The CLI installs its stderr handler on first use; resetting here binds it
    to the stderr of the test that triggers it, so CliRunner captures the logs.
    """
    from cageledger import logging_utils

    logger = logging.getLogger("cageledger")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    for handler in saved_handlers:
        logger.removeHandler(handler)
    monkeypatch.setattr(logging_utils, "_LOGGER_INITIALISED", False)

    yield logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)
