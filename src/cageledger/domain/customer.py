"""Customer directory domain service."""

from typing import Optional
from cageledger.database.base import CUSTOMER, Store, StoreQuery
from cageledger.domain.documents import customer_from_document
from cageledger.domain.entities import Customer
from cageledger.domain.errors import (
    NotFoundError,
    ValidationError,
    customer_name_required,
    customer_not_found,
)
from cageledger.logging_utils import get_logger

LOGGER = get_logger(__name__)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


class CustomerService:
    """Service for managing customers.

    Every operation makes exactly one round trip to the store.
    """

    def __init__(self, store: Store):
        """Initialize customer service.

        Args:
            store: Store instance
        """
        self.store = store

    def register(self, name: str, phone: Optional[str] = "", address: Optional[str] = "") -> Customer:
        """Register a new customer.

        Args:
            name: Customer name (trimmed, must not be blank)
            phone: Optional phone number
            address: Optional address

        Returns:
            Created Customer entity

        Raises:
            ValidationError: If the name is blank
        """
        name = _clean(name)
        if not name:
            raise ValidationError(customer_name_required())

        fields = {"name": name, "phone": _clean(phone), "address": _clean(address)}
        created = self.store.insert(CUSTOMER, fields)
        LOGGER.debug("Registered customer %s (%s)", created["id"], name)
        return customer_from_document({**fields, **created})

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID.

        Args:
            customer_id: Customer ID

        Returns:
            Customer entity or None if not found
        """
        doc = self.store.get(CUSTOMER, customer_id)
        if doc is None:
            return None
        return customer_from_document(doc)

    def require_customer(self, customer_id: str) -> Customer:
        """Get customer by ID or raise NotFoundError."""
        customer = self.get_customer(customer_id)
        if customer is None:
            raise NotFoundError(customer_not_found(customer_id))
        return customer

    def find_by_name(self, name: str) -> Optional[Customer]:
        """Find a customer by exact (trimmed) name.

        If several customers share the name, the most recently registered one
        is returned.
        """
        docs = self.store.query(
            CUSTOMER,
            StoreQuery(equal={"name": _clean(name)}, order_by="created_at", descending=True),
        )
        if not docs:
            return None
        return customer_from_document(docs[0])

    def list_customers(self) -> list[Customer]:
        """List all customers, newest first."""
        docs = self.store.query(CUSTOMER, StoreQuery(order_by="created_at", descending=True))
        return [customer_from_document(doc) for doc in docs]

    def update(
        self,
        customer_id: str,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Customer:
        """Update customer fields.

        Only the fields that are not None change. Transactions already
        recorded for the customer keep the name they were created with.

        Args:
            customer_id: Customer ID to update
            name: Optional new name (must not be blank)
            phone: Optional new phone number ("" clears it)
            address: Optional new address ("" clears it)

        Returns:
            Updated Customer entity

        Raises:
            ValidationError: If a blank name is given
            NotFoundError: If the customer doesn't exist
        """
        fields = {}
        if name is not None:
            name = _clean(name)
            if not name:
                raise ValidationError(customer_name_required())
            fields["name"] = name
        if phone is not None:
            fields["phone"] = _clean(phone)
        if address is not None:
            fields["address"] = _clean(address)

        doc = self.store.update(CUSTOMER, customer_id, fields)
        if doc is None:
            raise NotFoundError(customer_not_found(customer_id))
        LOGGER.debug("Updated customer %s: %s", customer_id, ", ".join(sorted(fields)) or "no changes")
        return customer_from_document(doc)

    def remove(self, customer_id: str) -> None:
        """Delete a customer.

        The customer's transactions are left in place.

        Raises:
            NotFoundError: If the customer doesn't exist
        """
        if not self.store.delete(CUSTOMER, customer_id):
            raise NotFoundError(customer_not_found(customer_id))
        LOGGER.debug("Removed customer %s", customer_id)
