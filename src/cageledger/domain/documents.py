"""Conversion from store documents to domain entities."""

from cageledger.database.base import Document
from cageledger.domain.entities import Customer, Transaction, ZERO


def customer_from_document(doc: Document) -> Customer:
    """Convert a Customer document to a Customer entity."""
    return Customer(
        id=doc["id"],
        name=doc["name"],
        phone=doc.get("phone") or "",
        address=doc.get("address") or "",
        created_at=doc["created_at"],
    )


def transaction_from_document(doc: Document) -> Transaction:
    """Convert a DailyRecord document to a Transaction entity."""
    return Transaction(
        id=doc["id"],
        date=doc["date"],
        cages=doc["cages"],
        customer_id=doc["customer_id"],
        customer_name=doc["customer_name"],
        gross_weight=doc.get("gross_weight") or ZERO,
        empty_weight=doc.get("empty_weight") or ZERO,
        net_weight=doc.get("net_weight") or ZERO,
        price_per_kg=doc.get("price_per_kg") or ZERO,
        total=doc.get("total") or ZERO,
        paid=doc.get("paid") or ZERO,
        remaining=doc.get("remaining") or ZERO,
        old_balance=doc.get("old_balance") or ZERO,
        total_balance=doc.get("total_balance") or ZERO,
        created_at=doc["created_at"],
    )
