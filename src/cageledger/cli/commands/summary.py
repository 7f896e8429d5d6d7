"""Daily summary command."""

import click
from cageledger.cli.error_handling import handle_domain_error
from cageledger.domain.errors import DomainError, StorageError
from cageledger.domain.ledger import LedgerService
from cageledger.domain.summary import summarize
from cageledger.utils.date_parser import parse_date


@click.command("summary")
@click.option("--date", default="today", show_default=True, help="Day to summarize")
@click.pass_context
def daily_summary(ctx, date: str):
    """Show the totals of one day's records.

    Examples:
        cageledger summary
        cageledger summary --date 2024-01-02
    """
    ledger = LedgerService(ctx.obj["store"])

    try:
        summary_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        transactions = ledger.list_by_date(summary_date)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo(f"No records found for {summary_date}.")
        return

    totals = summarize(transactions)
    click.echo(f"\nDaily Summary for {summary_date} ({len(transactions)} record(s))")
    click.echo("=" * 40)
    click.echo(f"{'Cages':<20} {totals.total_cages:>19,}")
    click.echo(f"{'Net weight (kg)':<20} {totals.total_weight:>19,.2f}")
    click.echo(f"{'Total amount':<20} {totals.total_amount:>19,.2f}")
    click.echo(f"{'Paid':<20} {totals.total_paid:>19,.2f}")
    click.echo(f"{'Remaining':<20} {totals.total_remaining:>19,.2f}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(daily_summary)
