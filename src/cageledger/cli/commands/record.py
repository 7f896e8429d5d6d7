"""Daily record commands."""

import click
from cageledger.cli.customer_resolution import resolve_customer_or_exit
from cageledger.cli.error_handling import handle_domain_error
from cageledger.domain.customer import CustomerService
from cageledger.domain.entities import Transaction
from cageledger.domain.errors import DomainError, StorageError
from cageledger.domain.ledger import LedgerService
from cageledger.utils.date_parser import parse_date
from cageledger.utils.number_parser import parse_amount, parse_weight


def format_record_line(txn: Transaction) -> str:
    """Render one transaction as a table row."""
    return (
        f"{txn.id:<32} {str(txn.date):<11} {txn.customer_name[:18]:<18} {txn.cages:>5} "
        f"{txn.net_weight:>10,.2f} {txn.price_per_kg:>8,.2f} {txn.total:>11,.2f} "
        f"{txn.paid:>11,.2f} {txn.remaining:>11,.2f} {txn.total_balance:>11,.2f}"
    )


RECORD_HEADER = (
    f"{'ID':<32} {'Date':<11} {'Customer':<18} {'Cages':>5} {'Net kg':>10} {'Price':>8} "
    f"{'Total':>11} {'Paid':>11} {'Remaining':>11} {'Balance':>11}"
)


@click.group()
def record_group():
    """Record and review daily deliveries."""
    pass


@record_group.command("add")
@click.option("--customer", required=True, help="Customer name or ID")
@click.option("--cages", required=True, type=int, help="Number of cages")
@click.option("--date", default="today", show_default=True, help="Delivery date (YYYY-MM-DD, 'today', 'yesterday', ...)")
@click.option("--gross", default="0", help="Gross weight in kg (with cages)")
@click.option("--empty", default="0", help="Empty cage weight in kg")
@click.option("--price", default="0", help="Price per kg")
@click.option("--paid", default="0", help="Amount paid now")
@click.pass_context
def add_record(ctx, customer: str, cages: int, date: str, gross: str, empty: str, price: str, paid: str):
    """Record a delivery for a customer.

    Net weight, total, remaining amount and the customer's carried-over
    balance are computed automatically.

    Examples:
        cageledger record add --customer "Abu Ahmed" --cages 10 --gross 100 --empty 20 --price 10 --paid 700
        cageledger record add --customer "Abu Ahmed" --cages 4 --date yesterday --gross 52.5 --empty 8
    """
    store = ctx.obj["store"]
    customer_service = CustomerService(store)
    ledger = LedgerService(store, customer_service)

    cust = resolve_customer_or_exit(ctx, customer_service, customer)

    try:
        record_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        gross_weight = parse_weight(gross)
        empty_weight = parse_weight(empty)
    except ValueError as e:
        click.echo(f"Error: Invalid weight: {e}", err=True)
        ctx.exit(1)

    try:
        price_per_kg = parse_amount(price)
        paid_amount = parse_amount(paid)
    except ValueError as e:
        click.echo(f"Error: Invalid amount: {e}", err=True)
        ctx.exit(1)

    try:
        txn = ledger.create_transaction(
            date=record_date,
            cages=cages,
            customer_id=cust.id,
            gross_weight=gross_weight,
            empty_weight=empty_weight,
            price_per_kg=price_per_kg,
            paid=paid_amount,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created record {txn.id}")
    click.echo(f"  Customer: {txn.customer_name}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Cages: {txn.cages}")
    click.echo(f"  Net weight: {txn.net_weight:,.2f} kg")
    click.echo(f"  Total: {txn.total:,.2f}")
    click.echo(f"  Paid: {txn.paid:,.2f}")
    click.echo(f"  Remaining: {txn.remaining:,.2f}")
    click.echo(f"  Old balance: {txn.old_balance:,.2f}")
    click.echo(f"  Total balance: {txn.total_balance:,.2f}")


@record_group.command("list")
@click.option("--date", help="Day to show (defaults to today)")
@click.option("--all", "show_all", is_flag=True, help="Show records of every day")
@click.option("--customer", help="Only records of this customer (name or ID)")
@click.pass_context
def list_records(ctx, date: str | None, show_all: bool, customer: str | None):
    """List records, newest first.

    Without options, shows today's records. --customer alone shows every
    record of that customer.
    """
    store = ctx.obj["store"]
    customer_service = CustomerService(store)
    ledger = LedgerService(store, customer_service)

    if show_all and date:
        click.echo("Error: --all cannot be combined with --date.", err=True)
        ctx.exit(1)

    record_date = None
    if date or not (show_all or customer):
        try:
            record_date = parse_date(date or "today")
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        if customer:
            cust = resolve_customer_or_exit(ctx, customer_service, customer)
            transactions = ledger.list_by_customer(cust.id)
            if record_date is not None:
                transactions = [txn for txn in transactions if txn.date == record_date]
        elif record_date is not None:
            transactions = ledger.list_by_date(record_date)
        else:
            transactions = ledger.list_all()
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No records found.")
        return

    click.echo(f"\nFound {len(transactions)} record(s):")
    click.echo("-" * len(RECORD_HEADER))
    click.echo(RECORD_HEADER)
    click.echo("-" * len(RECORD_HEADER))
    for txn in transactions:
        click.echo(format_record_line(txn))


@record_group.command("delete")
@click.argument("record_id", metavar="RECORD_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_record(ctx, record_id: str, yes: bool) -> None:
    """Delete a record.

    Balances stored on other records are not recalculated.
    """
    ledger = LedgerService(ctx.obj["store"])

    try:
        txn = ledger.get_transaction(record_id)
    except StorageError as e:
        handle_domain_error(ctx, e)
    if txn is None:
        click.echo(f"Error: Record {record_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Delete record of {txn.customer_name} on {txn.date} ({txn.total:,.2f})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        ledger.delete_transaction(record_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted record {record_id}")


def register_commands(cli):
    """Register record commands with main CLI."""
    cli.add_command(record_group, name="record")
