"""Ledger balance domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal
from cageledger.database.base import DAILY_RECORD, Store, StoreQuery
from cageledger.domain.balance import (
    compute_derived_fields,
    sum_remaining,
    to_cages,
    to_decimal,
    to_record_date,
)
from cageledger.domain.customer import CustomerService
from cageledger.domain.documents import transaction_from_document
from cageledger.domain.entities import Transaction, ZERO
from cageledger.domain.errors import (
    NotFoundError,
    StorageError,
    ValidationError,
    transaction_not_found,
)
from cageledger.logging_utils import get_logger

LOGGER = get_logger(__name__)

NEWEST_FIRST = {"order_by": "created_at", "descending": True}


class LedgerService:
    """Service for recording deliveries and carrying balances forward.

    The service is the only writer of derived fields. Balances are computed
    once, when a record is created: deleting a record or inserting one with
    an earlier date does not rewrite the stored ``old_balance`` or
    ``total_balance`` of other records.

    Two concurrent ``create_transaction`` calls for the same customer may both
    read the same prior records; no locking is done.
    """

    def __init__(self, store: Store, customers: Optional[CustomerService] = None):
        """Initialize ledger service.

        Args:
            store: Store instance
            customers: Customer directory used to resolve names. Built on the
                same store when omitted.
        """
        self.store = store
        self.customers = customers if customers is not None else CustomerService(store)

    def create_transaction(
        self,
        date: date | str,
        cages: int,
        customer_id: str,
        gross_weight: Decimal | int | str = ZERO,
        empty_weight: Decimal | int | str = ZERO,
        price_per_kg: Decimal | int | str = ZERO,
        paid: Decimal | int | str = ZERO,
    ) -> Transaction:
        """Record a delivery.

        Args:
            date: Delivery date (date or YYYY-MM-DD)
            cages: Number of cages delivered
            customer_id: Customer ID
            gross_weight: Weight with cages, in kilograms
            empty_weight: Weight of the empty cages, in kilograms
            price_per_kg: Price per kilogram
            paid: Amount paid now

        Returns:
            The persisted Transaction with every derived field filled in

        Raises:
            ValidationError: If a field is missing or malformed
            NotFoundError: If the customer doesn't exist
            StorageError: If the record could not be written
        """
        record_date = to_record_date(date)
        cages = to_cages(cages)
        if not customer_id or not str(customer_id).strip():
            raise ValidationError("Customer is required")
        gross = to_decimal("gross weight", gross_weight)
        empty = to_decimal("empty weight", empty_weight)
        price = to_decimal("price per kg", price_per_kg)
        paid_amount = to_decimal("paid", paid)

        customer = self.customers.require_customer(customer_id)

        if cages <= 0:
            LOGGER.warning("Recording %d cages for customer %s on %s", cages, customer_id, record_date)
        if empty > gross:
            LOGGER.warning(
                "Empty weight %s exceeds gross weight %s for customer %s on %s",
                empty,
                gross,
                customer_id,
                record_date,
            )

        old_balance = self.calculate_old_balance(customer_id, record_date)
        derived = compute_derived_fields(gross, empty, price, paid_amount, old_balance)

        fields = {
            "date": record_date,
            "cages": cages,
            "customer_id": customer.id,
            "customer_name": customer.name,
            "gross_weight": gross,
            "empty_weight": empty,
            "net_weight": derived.net_weight,
            "price_per_kg": price,
            "total": derived.total,
            "paid": paid_amount,
            "remaining": derived.remaining,
            "old_balance": derived.old_balance,
            "total_balance": derived.total_balance,
        }
        created = self.store.insert(DAILY_RECORD, fields)
        LOGGER.debug(
            "Recorded transaction %s for %s on %s (remaining %s, balance %s)",
            created["id"],
            customer.name,
            record_date,
            derived.remaining,
            derived.total_balance,
        )
        return transaction_from_document({**fields, **created})

    def calculate_old_balance(self, customer_id: str, before: date | str) -> Decimal:
        """Sum the customer's remainders on dates strictly before ``before``.

        Falls back to zero when the store query fails, so a flaky lookup does
        not block recording a delivery.

        Args:
            customer_id: Customer ID
            before: Exclusive upper bound on record dates

        Returns:
            Old balance
        """
        before = to_record_date(before)
        try:
            docs = self.store.query(
                DAILY_RECORD,
                StoreQuery(equal={"customer_id": customer_id}, less_than={"date": before}),
            )
        except StorageError as e:
            LOGGER.warning(
                "Old balance lookup for customer %s before %s failed, using 0: %s",
                customer_id,
                before,
                e,
            )
            return ZERO
        return sum_remaining(doc.get("remaining") for doc in docs)

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        doc = self.store.get(DAILY_RECORD, transaction_id)
        if doc is None:
            return None
        return transaction_from_document(doc)

    def list_by_date(self, date: date | str) -> list[Transaction]:
        """List the transactions of one day, newest first."""
        record_date = to_record_date(date)
        docs = self.store.query(DAILY_RECORD, StoreQuery(equal={"date": record_date}, **NEWEST_FIRST))
        return [transaction_from_document(doc) for doc in docs]

    def list_by_customer(self, customer_id: str) -> list[Transaction]:
        """List every transaction of one customer, newest first."""
        docs = self.store.query(
            DAILY_RECORD, StoreQuery(equal={"customer_id": customer_id}, **NEWEST_FIRST)
        )
        return [transaction_from_document(doc) for doc in docs]

    def list_all(self) -> list[Transaction]:
        """List all transactions, newest first."""
        docs = self.store.query(DAILY_RECORD, StoreQuery(**NEWEST_FIRST))
        return [transaction_from_document(doc) for doc in docs]

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Stored balances of other transactions are not recomputed.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        if not self.store.delete(DAILY_RECORD, transaction_id):
            raise NotFoundError(transaction_not_found(transaction_id))
        LOGGER.debug("Deleted transaction %s", transaction_id)

    def outstanding_balance(self, customer_id: str) -> Decimal:
        """Return the customer's current debt across all of their transactions."""
        docs = self.store.query(DAILY_RECORD, StoreQuery(equal={"customer_id": customer_id}))
        return sum_remaining(doc.get("remaining") for doc in docs)
