"""CLI helpers for customer resolution."""

from __future__ import annotations

import click
from cageledger.cli.error_handling import handle_domain_error
from cageledger.domain.customer import CustomerService
from cageledger.domain.entities import Customer
from cageledger.domain.errors import DomainError, StorageError
from cageledger.utils.customer_resolver import resolve_customer


def resolve_customer_or_exit(
    ctx: click.Context, customer_service: CustomerService, customer: str
) -> Customer:
    """Resolve customer name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_customer(customer_service, customer)
    except (DomainError, StorageError) as exc:
        handle_domain_error(ctx, exc)
