"""Mini README: Command line entry point for Budgeter.

This module exposes a Typer CLI that runs a deterministic demo ledger and
prints its balances and period totals, or shows the effective settings.
Rejected ledger operations are reported and turned into a non-zero exit
code rather than a traceback.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import typer

from budgeter.configuration import get_settings
from budgeter.ledger import Budget, FixedTimeSource, LedgerError, UserLedger
from budgeter.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Inspect the Budgeter ledger from the command line.")

DEMO_START = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def build_demo_ledger(bank_amount: float = 1000.0) -> UserLedger:
    """Create a ledger with a few budgets and a month of activity."""

    clock = FixedTimeSource(DEMO_START)
    ledger = UserLedger(bank_amount=bank_amount, clock=clock)
    groceries = ledger.add_budget(Budget(name="Groceries", allocated=300.0))
    transport = ledger.add_budget(Budget(name="Transport", allocated=120.0))
    ledger.add_budget(Budget(name="Leisure", allocated=150.0))

    ledger.carry_transaction(groceries, 62.5, credit=False)
    clock.advance(timedelta(days=3))
    ledger.carry_transaction(transport, 40.0, credit=False)
    clock.advance(timedelta(days=10))
    ledger.carry_transaction(groceries, 250.0, credit=True)
    clock.advance(timedelta(days=1))
    ledger.carry_transaction(groceries, 48.2, credit=False)
    return ledger


@cli.command()
def demo(
    bank: float = typer.Option(1000.0, help="Opening bank balance for the demo ledger."),
    now: Optional[datetime] = typer.Option(
        None, help="Reporting instant; defaults to the demo ledger's clock."
    ),
) -> None:
    """Build the demo ledger and print balances and period totals."""

    configure_root_logger(get_settings().log_level)
    try:
        ledger = build_demo_ledger(bank)
    except LedgerError as error:
        LOGGER.error("Demo ledger could not be built: %s", error)
        typer.echo(f"Error ({error.kind.value}): {error}", err=True)
        raise typer.Exit(code=1) from error

    report_time = now or ledger.clock.now()
    typer.echo(f"Bank amount:      {ledger.bank_amount:10.2f}")
    typer.echo(f"Projected spend:  {ledger.projected_spend:10.2f}")
    typer.echo(f"Available funds:  {ledger.available_funds:10.2f}")
    for budget in ledger.budgets:
        typer.echo(f"  {budget.name:<14}{budget.remaining:10.2f} / {budget.allocated:.2f}")
    typer.echo(f"Day spend:        {ledger.get_day_spend(report_time):10.2f}")
    typer.echo(f"Month spend:      {ledger.get_month_spend(report_time):10.2f}")
    typer.echo(f"Year spend:       {ledger.get_year_spend(report_time):10.2f}")
    typer.echo(f"Year earn:        {ledger.get_year_earn(report_time):10.2f}")
    if ledger.is_bank_low:
        typer.echo("Warning: bank balance is at or below the low balance threshold.")


@cli.command()
def settings() -> None:
    """Print the effective configuration."""

    for key, value in get_settings().model_dump().items():
        typer.echo(f"{key}: {value}")


if __name__ == "__main__":
    cli()
