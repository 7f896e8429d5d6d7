"""Tests for the SQLAlchemy document store."""

import pytest
from datetime import date, datetime
from decimal import Decimal
from sqlalchemy.exc import OperationalError

from cageledger.database.base import CUSTOMER, DAILY_RECORD, StoreQuery
from cageledger.database.factories import create_sqlite_store
from cageledger.domain.errors import StorageError


def record_fields(customer_id="c1", day=date(2024, 1, 1), remaining="100", **overrides):
    fields = {
        "date": day,
        "cages": 10,
        "customer_id": customer_id,
        "customer_name": "Abu Ahmed",
        "gross_weight": Decimal("100"),
        "empty_weight": Decimal("20"),
        "net_weight": Decimal("80"),
        "price_per_kg": Decimal("10"),
        "total": Decimal("800"),
        "paid": Decimal("700"),
        "remaining": Decimal(remaining),
        "old_balance": Decimal("0"),
        "total_balance": Decimal(remaining),
    }
    fields.update(overrides)
    return fields


class TestInsertAndGet:
    """Tests for writing and reading documents."""

    def test_insert_returns_id_and_created_at(self, temp_store):
        created = temp_store.insert(CUSTOMER, {"name": "Abu Ahmed", "phone": "", "address": ""})

        assert set(created) == {"id", "created_at"}
        assert isinstance(created["id"], str)
        assert isinstance(created["created_at"], datetime)

    def test_get_returns_full_document(self, temp_store):
        created = temp_store.insert(CUSTOMER, {"name": "Abu Ahmed", "phone": "010", "address": "Tanta"})

        doc = temp_store.get(CUSTOMER, created["id"])

        assert doc == {
            "id": created["id"],
            "name": "Abu Ahmed",
            "phone": "010",
            "address": "Tanta",
            "created_at": created["created_at"],
        }

    def test_get_missing(self, temp_store):
        assert temp_store.get(CUSTOMER, "missing") is None

    def test_decimals_round_trip_exactly(self, temp_store):
        """Test that money and weight values are stored without float rounding."""
        fields = record_fields(total=Decimal("811.265625"), price_per_kg=Decimal("0.1"))
        created = temp_store.insert(DAILY_RECORD, fields)

        doc = temp_store.get(DAILY_RECORD, created["id"])

        assert doc["total"] == Decimal("811.265625")
        assert doc["price_per_kg"] == Decimal("0.1")
        assert isinstance(doc["remaining"], Decimal)
        assert doc["date"] == date(2024, 1, 1)

    def test_caller_cannot_choose_id(self, temp_store):
        created = temp_store.insert(CUSTOMER, {"id": "chosen", "name": "A"})
        assert created["id"] != "chosen"


class TestQuery:
    """Tests for filtered queries."""

    def test_equality_and_less_than(self, temp_store):
        temp_store.insert(DAILY_RECORD, record_fields("c1", date(2024, 1, 1)))
        temp_store.insert(DAILY_RECORD, record_fields("c1", date(2024, 1, 2)))
        temp_store.insert(DAILY_RECORD, record_fields("c1", date(2024, 1, 3)))
        temp_store.insert(DAILY_RECORD, record_fields("c2", date(2024, 1, 1)))

        docs = temp_store.query(
            DAILY_RECORD,
            StoreQuery(equal={"customer_id": "c1"}, less_than={"date": date(2024, 1, 3)}),
        )

        assert sorted(doc["date"] for doc in docs) == [date(2024, 1, 1), date(2024, 1, 2)]
        assert all(doc["customer_id"] == "c1" for doc in docs)

    def test_order_by_created_at(self, temp_store):
        ids = [temp_store.insert(CUSTOMER, {"name": name})["id"] for name in ("A", "B", "C")]

        newest_first = temp_store.query(CUSTOMER, StoreQuery(order_by="created_at", descending=True))
        oldest_first = temp_store.query(CUSTOMER, StoreQuery(order_by="created_at"))

        assert [doc["id"] for doc in newest_first] == list(reversed(ids))
        assert [doc["id"] for doc in oldest_first] == ids

    def test_less_than_on_money_field_is_numeric(self, temp_store):
        for remaining in ("9", "50", "100"):
            temp_store.insert(DAILY_RECORD, record_fields(remaining=remaining))

        docs = temp_store.query(DAILY_RECORD, StoreQuery(less_than={"remaining": Decimal("100")}))

        assert sorted(doc["remaining"] for doc in docs) == [Decimal("9"), Decimal("50")]

    def test_order_by_money_field_is_numeric(self, temp_store):
        for remaining in ("50", "9", "100"):
            temp_store.insert(DAILY_RECORD, record_fields(remaining=remaining))

        ascending = temp_store.query(DAILY_RECORD, StoreQuery(order_by="remaining"))
        descending = temp_store.query(DAILY_RECORD, StoreQuery(order_by="remaining", descending=True))

        assert [doc["remaining"] for doc in ascending] == [Decimal("9"), Decimal("50"), Decimal("100")]
        assert [doc["remaining"] for doc in descending] == [Decimal("100"), Decimal("50"), Decimal("9")]

    def test_equal_on_money_field_ignores_representation(self, temp_store):
        temp_store.insert(DAILY_RECORD, record_fields(paid=Decimal("700")))
        temp_store.insert(DAILY_RECORD, record_fields(paid=Decimal("650")))

        assert len(temp_store.query(DAILY_RECORD, StoreQuery(equal={"paid": Decimal("700.0")}))) == 1
        assert len(temp_store.query(DAILY_RECORD, StoreQuery(equal={"paid": "700.00"}))) == 1
        assert len(temp_store.query(DAILY_RECORD, StoreQuery(equal={"paid": 700}))) == 1

    def test_money_filters_combine_with_column_filters(self, temp_store):
        temp_store.insert(DAILY_RECORD, record_fields("c1", date(2024, 1, 1), remaining="20"))
        temp_store.insert(DAILY_RECORD, record_fields("c1", date(2024, 1, 2), remaining="200"))
        temp_store.insert(DAILY_RECORD, record_fields("c2", date(2024, 1, 1), remaining="20"))

        docs = temp_store.query(
            DAILY_RECORD,
            StoreQuery(equal={"customer_id": "c1"}, less_than={"remaining": 100}),
        )

        assert [(doc["customer_id"], doc["remaining"]) for doc in docs] == [("c1", Decimal("20"))]

    def test_query_without_filters(self, temp_store):
        temp_store.insert(CUSTOMER, {"name": "A"})
        assert len(temp_store.query(CUSTOMER)) == 1


class TestUpdateAndDelete:
    """Tests for partial updates and deletes."""

    def test_partial_update(self, temp_store):
        created = temp_store.insert(CUSTOMER, {"name": "A", "phone": "010", "address": "Tanta"})

        doc = temp_store.update(CUSTOMER, created["id"], {"phone": "011"})

        assert doc["phone"] == "011"
        assert doc["name"] == "A"
        assert doc["address"] == "Tanta"
        assert doc["created_at"] == created["created_at"]

    def test_update_missing(self, temp_store):
        assert temp_store.update(CUSTOMER, "missing", {"name": "B"}) is None

    def test_delete(self, temp_store):
        created = temp_store.insert(CUSTOMER, {"name": "A"})

        assert temp_store.delete(CUSTOMER, created["id"]) is True
        assert temp_store.get(CUSTOMER, created["id"]) is None
        assert temp_store.delete(CUSTOMER, created["id"]) is False


class TestStorageErrors:
    """Tests for failures surfacing as StorageError."""

    def test_unknown_collection(self, temp_store):
        with pytest.raises(StorageError, match="Unknown collection"):
            temp_store.get("Invoice", "x")

    def test_unknown_field(self, temp_store):
        with pytest.raises(StorageError, match="colour"):
            temp_store.insert(CUSTOMER, {"name": "A", "colour": "red"})

    def test_unknown_query_field(self, temp_store):
        with pytest.raises(StorageError):
            temp_store.query(DAILY_RECORD, StoreQuery(less_than={"weight": 1}))

    def test_constraint_violation_is_wrapped(self, temp_store):
        """Test that a database error is rolled back and re-raised as StorageError."""
        with pytest.raises(StorageError, match="insert"):
            temp_store.insert(CUSTOMER, {"name": None})

        # Session is usable again after the rollback
        created = temp_store.insert(CUSTOMER, {"name": "A"})
        assert temp_store.get(CUSTOMER, created["id"])["name"] == "A"

    def test_backend_failure_on_query(self, temp_store, monkeypatch):
        session = temp_store._get_session()

        def broken_query(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(session, "query", broken_query)

        with pytest.raises(StorageError):
            temp_store.query(CUSTOMER)

    def test_invalid_money_filter(self, temp_store):
        with pytest.raises(StorageError, match="remaining"):
            temp_store.query(DAILY_RECORD, StoreQuery(less_than={"remaining": "lots"}))

    def test_insert_does_not_read_back_after_commit(self, temp_store, monkeypatch):
        """Test that a failing read after the commit cannot turn a saved insert into an error."""
        session = temp_store._get_session()
        real_commit = session.commit

        def broken_execute(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("disk I/O error"))

        def commit_then_break_reads():
            real_commit()
            monkeypatch.setattr(session, "execute", broken_execute)

        monkeypatch.setattr(session, "commit", commit_then_break_reads)

        created = temp_store.insert(CUSTOMER, {"name": "A"})
        monkeypatch.undo()

        assert temp_store.get(CUSTOMER, created["id"])["created_at"] == created["created_at"]

    def test_unopenable_database(self, tmp_path):
        with pytest.raises(StorageError):
            create_sqlite_store(database_path=str(tmp_path / "missing-dir" / "x.db"))


def test_factory_uses_environment_variable(tmp_path, monkeypatch):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("CAGELEDGER_DB_PATH", str(db_path))

    store = create_sqlite_store()

    assert store.database_url == f"sqlite:///{db_path}"
    assert db_path.exists()
