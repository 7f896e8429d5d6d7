"""Utility for resolving customer names to customers."""

from cageledger.domain.customer import CustomerService
from cageledger.domain.entities import Customer
from cageledger.domain.errors import NotFoundError


def resolve_customer(customer_service: CustomerService, customer: str) -> Customer:
    """Resolve a customer ID or name to a Customer.

    IDs are tried first; anything that is not a known ID is looked up by
    exact name.

    Args:
        customer_service: CustomerService instance
        customer: Customer ID or name

    Returns:
        Customer entity

    Raises:
        NotFoundError: If no customer has that ID or name
    """
    reference = customer.strip()
    found = customer_service.get_customer(reference)
    if found is not None:
        return found

    found = customer_service.find_by_name(reference)
    if found is not None:
        return found

    raise NotFoundError(f"Customer '{customer}' not found")
