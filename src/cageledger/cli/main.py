"""Main CLI entry point."""

import click
from cageledger.database.factories import create_sqlite_store
from cageledger.domain.errors import StorageError
from cageledger.logging_utils import configure_root_logger

from cageledger.cli.commands import (
    customer,
    record,
    summary,
    balance,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides CAGELEDGER_DB_PATH environment variable)",
    envvar="CAGELEDGER_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar="CAGELEDGER_LOG_LEVEL",
    help="Logging level (default WARNING, or CAGELEDGER_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Cageledger - Delivery ledger for cage trading.

    Record daily deliveries (cages, gross/empty weight, price per kg,
    payment) per customer and carry unpaid balances forward day to day.
    """
    ctx.ensure_object(dict)
    configure_root_logger(log_level)

    # Open the store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            store = create_sqlite_store(database_path=db_path)
        except StorageError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        store.connect()
        store.initialize_schema()
        ctx.obj["store"] = store
        ctx.call_on_close(store.disconnect)


customer.register_commands(cli)
record.register_commands(cli)
summary.register_commands(cli)
balance.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
