"""Domain layer for cageledger application."""

from cageledger.domain.customer import CustomerService
from cageledger.domain.ledger import LedgerService
from cageledger.domain.summary import summarize, combine

__all__ = [
    "CustomerService",
    "LedgerService",
    "summarize",
    "combine",
]
