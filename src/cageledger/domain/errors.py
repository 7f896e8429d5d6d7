"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Missing, empty or malformed input."""


class NotFoundError(DomainError):
    """Referenced customer or transaction does not exist."""


class StorageError(Exception):
    """The backing store failed to complete an operation."""


def customer_not_found(customer_id: str) -> str:
    """Return message for missing customer."""
    return f"Customer {customer_id} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def customer_name_required() -> str:
    """Return message for a blank customer name."""
    return "Customer name is required"


def invalid_date(value: object) -> str:
    """Return message for a date that is not YYYY-MM-DD."""
    return f"Invalid date '{value}': expected YYYY-MM-DD"


def invalid_number(field: str, value: object) -> str:
    """Return message for a non-numeric field value."""
    return f"Invalid {field} '{value}': not a number"
