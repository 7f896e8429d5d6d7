"""Domain model entities for cageledger.

These are pure data classes representing business concepts, independent of
the store's schema. Documents coming out of the store are converted into
these by the mappers in ``cageledger.database.mappers``.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class Customer:
    """Trading partner domain entity."""

    id: str
    name: str
    phone: str
    address: str
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Daily delivery record domain entity.

    ``customer_name`` is a snapshot taken when the record was created and is
    not updated when the customer is renamed.
    """

    id: str
    date: date
    cages: int
    customer_id: str
    customer_name: str
    gross_weight: Decimal
    empty_weight: Decimal
    net_weight: Decimal
    price_per_kg: Decimal
    total: Decimal
    paid: Decimal
    remaining: Decimal
    old_balance: Decimal
    total_balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class DailySummary:
    """Aggregated totals over a sequence of transactions."""

    total_cages: int = 0
    total_weight: Decimal = ZERO
    total_amount: Decimal = ZERO
    total_paid: Decimal = ZERO
    total_remaining: Decimal = ZERO
