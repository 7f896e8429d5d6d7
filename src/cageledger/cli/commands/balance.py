"""Customer balance command."""

import click
from cageledger.cli.customer_resolution import resolve_customer_or_exit
from cageledger.cli.error_handling import handle_domain_error
from cageledger.domain.customer import CustomerService
from cageledger.domain.errors import StorageError
from cageledger.domain.ledger import LedgerService


@click.command("balance")
@click.argument("customer", metavar="CUSTOMER")
@click.pass_context
def customer_balance(ctx, customer: str):
    """Show what a customer still owes across all records.

    CUSTOMER can be a customer name or ID. A negative balance means the
    customer has paid in advance.
    """
    store = ctx.obj["store"]
    customer_service = CustomerService(store)
    ledger = LedgerService(store, customer_service)

    cust = resolve_customer_or_exit(ctx, customer_service, customer)
    try:
        outstanding = ledger.outstanding_balance(cust.id)
    except StorageError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Outstanding balance for {cust.name}: {outstanding:,.2f}")


def register_commands(cli):
    """Register balance command with main CLI."""
    cli.add_command(customer_balance)
