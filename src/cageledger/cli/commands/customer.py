"""Customer management commands."""

import click
from cageledger.cli.customer_resolution import resolve_customer_or_exit
from cageledger.cli.error_handling import handle_domain_error
from cageledger.domain.customer import CustomerService
from cageledger.domain.errors import DomainError, StorageError


@click.group()
def customer_group():
    """Manage customers."""
    pass


@customer_group.command("add")
@click.argument("name", metavar="NAME")
@click.option("--phone", default="", help="Phone number")
@click.option("--address", default="", help="Address")
@click.pass_context
def add_customer(ctx, name: str, phone: str, address: str):
    """Register a new customer.

    Examples:
        cageledger customer add "Abu Ahmed"
        cageledger customer add "Hassan Farm" --phone 0100000000 --address "Tanta"
    """
    service = CustomerService(ctx.obj["store"])

    try:
        created = service.register(name=name, phone=phone, address=address)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created customer '{created.name}' (ID: {created.id})")


@customer_group.command("list")
@click.pass_context
def list_customers(ctx):
    """List all customers, newest first."""
    service = CustomerService(ctx.obj["store"])

    try:
        customers = service.list_customers()
    except StorageError as e:
        handle_domain_error(ctx, e)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"\nCustomers: {len(customers)}")
    click.echo("-" * 100)
    for cust in customers:
        click.echo(
            f"{cust.id} | {cust.name:20s} | Phone: {cust.phone or '-':14s} | "
            f"Registered: {cust.created_at:%Y-%m-%d}"
        )
        if cust.address:
            click.echo(f"{'':32s} | Address: {cust.address}")


@customer_group.command("edit")
@click.argument("customer", metavar="CUSTOMER")
@click.option("--name", help="New name")
@click.option("--phone", help="New phone number (empty string clears it)")
@click.option("--address", help="New address (empty string clears it)")
@click.pass_context
def edit_customer(ctx, customer: str, name: str | None, phone: str | None, address: str | None) -> None:
    """Edit a customer's name, phone or address.

    CUSTOMER can be a customer name or ID. Records already entered keep
    the name they were created with.

    Examples:
        cageledger customer edit "Abu Ahmed" --phone 0111111111
        cageledger customer edit 3f2a... --name "Abu Ahmed Farm"
    """
    service = CustomerService(ctx.obj["store"])
    cust = resolve_customer_or_exit(ctx, service, customer)

    if name is None and phone is None and address is None:
        click.echo("Nothing to change. Use --name, --phone or --address.")
        return

    try:
        updated = service.update(cust.id, name=name, phone=phone, address=address)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated customer '{updated.name}'")


@customer_group.command("delete")
@click.argument("customer", metavar="CUSTOMER")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_customer(ctx, customer: str, yes: bool) -> None:
    """Delete a customer.

    CUSTOMER can be a customer name or ID. The customer's records are
    kept.
    """
    service = CustomerService(ctx.obj["store"])
    cust = resolve_customer_or_exit(ctx, service, customer)

    if not yes and not click.confirm(f"Are you sure you want to delete customer '{cust.name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.remove(cust.id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted customer '{cust.name}'")


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
