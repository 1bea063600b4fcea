"""Command‑line interface for the loan schedule calculator.

This module uses the ``click`` library to implement a multi‑command
interface. Users can compute full amortization schedules or view only the
summary figures. Results can be printed to the terminal or exported to
JSON/CSV files.
"""

from __future__ import annotations

import csv
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Optional

import click

from .config import settings
from .data_models import LoanParameters, ScheduleResult
from .engine import calculate
from .errors import InvalidLoanParameters, NonTerminatingSchedule
from .formatter import SCHEDULE_HEADERS, print_schedule, print_summary, result_to_dict, schedule_rows
from .utils import decimal_from_str, parse_date, round_cents


def parse_amount(value: str) -> Decimal:
    """Parse a money amount with optional suffixes.

    Accepts plain numbers ("65000") and shorthand with ``k``/``m`` suffixes
    (e.g., "65k" meaning 65_000). The result is rounded to cents.
    """
    value = value.strip().lower()
    factor = Decimal(1)
    if value.endswith("k"):
        factor = Decimal(1_000)
        value = value[:-1]
    elif value.endswith("m"):
        factor = Decimal(1_000_000)
        value = value[:-1]
    try:
        return round_cents(decimal_from_str(value) * factor)
    except ValueError:
        raise click.BadParameter(f"Invalid amount: {value}")


def parse_rate(value: str) -> Decimal:
    """Parse an annual interest rate given in percent ("20" or "20%")."""
    value = value.strip()
    if value.endswith("%"):
        value = value[:-1]
    try:
        return decimal_from_str(value)
    except ValueError:
        raise click.BadParameter(f"Invalid interest rate: {value}")


def build_params_from_options(
    principal: str,
    rate: str,
    years: int,
    payments_per_year: int,
    start_date: str,
    extra_payment: Optional[str] = None,
) -> LoanParameters:
    principal_value = parse_amount(principal)
    extra_value = parse_amount(extra_payment) if extra_payment else Decimal("0")
    try:
        start_dt = parse_date(start_date)
    except ValueError as exc:
        raise click.BadParameter(str(exc))
    try:
        return LoanParameters(
            principal=principal_value,
            annual_interest_rate=parse_rate(rate),
            term_years=years,
            payments_per_year=payments_per_year,
            start_date=start_dt,
            extra_payment=extra_value,
        )
    except InvalidLoanParameters as exc:
        raise click.BadParameter(str(exc))


def run_calculation(params: LoanParameters, include_payments: bool = True) -> ScheduleResult:
    try:
        return calculate(params, include_payments=include_payments)
    except NonTerminatingSchedule as exc:
        raise click.ClickException(str(exc))


def export_to_json(path: Path, result: ScheduleResult, include_payments: bool = True) -> None:
    """Export the result to a JSON file."""
    with path.open("w", encoding="utf-8") as f:
        json.dump(result_to_dict(result, include_payments), f, indent=2)


def export_to_csv(path: Path, result: ScheduleResult) -> None:
    """Export the payment rows to a CSV file."""
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(SCHEDULE_HEADERS)
        writer.writerows(schedule_rows(result.periods))


def loan_options(func):
    options = [
        click.option("--principal", "-p", "principal", required=True, help="Loan amount, e.g. 65000 or 65k"),
        click.option("--rate", "-r", "rate", required=True, help="Annual interest rate (percent)"),
        click.option("--years", "-y", "years", required=True, type=click.IntRange(min=1), help="Loan period in years"),
        click.option(
            "--payments-per-year",
            "-n",
            "payments_per_year",
            default=12,
            show_default=True,
            type=click.IntRange(min=1),
            help="Number of payments per year",
        ),
        click.option("--start-date", "-s", "start_date", required=True, help="Start date of loan (DD/MM/YYYY or YYYY-MM-DD)"),
        click.option("--extra-payment", "-e", "extra_payment", help="Optional extra payment made every period"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
def cli() -> None:
    """A command‑line calculator for fixed-rate loan schedules."""
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def schedule(
    principal: str,
    rate: str,
    years: int,
    payments_per_year: int,
    start_date: str,
    extra_payment: Optional[str],
    output: Optional[str],
) -> None:
    """Compute and print the full amortization schedule."""
    params = build_params_from_options(principal, rate, years, payments_per_year, start_date, extra_payment)
    result = run_calculation(params)
    if output:
        path = Path(output)
        if path.suffix.lower() == ".json":
            export_to_json(path, result)
        elif path.suffix.lower() == ".csv":
            export_to_csv(path, result)
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv")
        click.echo(f"Schedule exported to {path}")
        return

    print_summary(result)
    # Limit schedule length printed to avoid flooding the terminal
    max_rows = settings.preview_rows
    if len(result.periods) > max_rows:
        click.echo(f"Schedule has {len(result.periods)} rows; showing first {max_rows} rows.")
        print_schedule(result.periods[:max_rows])
    else:
        print_schedule(result.periods)


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(
    principal: str,
    rate: str,
    years: int,
    payments_per_year: int,
    start_date: str,
    extra_payment: Optional[str],
    output: Optional[str],
) -> None:
    """Compute and print only the summary figures for a loan."""
    params = build_params_from_options(principal, rate, years, payments_per_year, start_date, extra_payment)
    result = run_calculation(params, include_payments=False)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension")
        export_to_json(path, result, include_payments=False)
        click.echo(f"Summary exported to {path}")
    else:
        print_summary(result)


if __name__ == "__main__":
    cli()
