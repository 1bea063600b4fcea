"""Output helpers for the loan schedule calculator.

This module turns a ``ScheduleResult`` into the payload shape returned by the
HTTP endpoint and the JSON export, and renders summaries and schedules as
plain text tables for the terminal.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterable, List

from .data_models import PaymentRecord, ScheduleResult
from .utils import CENTS

DATE_FORMAT = "%d/%m/%Y"


def format_amount(value: Decimal) -> str:
    """Format a money amount with two decimals and a thousands separator."""
    return f"{Decimal(value).quantize(CENTS):,.2f}"


def payment_to_dict(record: PaymentRecord) -> Dict[str, Any]:
    return {
        "no": record.sequence_number,
        "payment_date": record.payment_date.strftime(DATE_FORMAT),
        "beginning_balance": format_amount(record.beginning_balance),
        "scheduled_payment": format_amount(record.scheduled_payment),
        "extra_payment": format_amount(record.extra_payment),
        "total_payment": format_amount(record.total_payment),
        "principal": format_amount(record.principal),
        "interest": format_amount(record.interest),
        "ending_balance": format_amount(record.ending_balance),
        "cumulative_interest": format_amount(record.cumulative_interest),
    }


def result_to_dict(result: ScheduleResult, include_payments: bool = True) -> Dict[str, Any]:
    """Serialize a result into JSON-friendly dictionaries.

    Amounts are rendered as formatted strings so that no precision is lost in
    transit. The ``payments`` key is present only when ``include_payments``
    is true, and ``scheduled_number_of_payments`` only when the result
    carries a nominal count.
    """
    data: Dict[str, Any] = {"scheduled_payment": format_amount(result.scheduled_payment)}
    if result.scheduled_number_of_payments is not None:
        data["scheduled_number_of_payments"] = result.scheduled_number_of_payments
    data.update(
        {
            "actual_number_of_payments": result.actual_number_of_payments,
            "total_early_payments": format_amount(result.total_early_payments),
            "total_interest": format_amount(result.total_interest),
        }
    )
    if include_payments:
        data["payments"] = [payment_to_dict(p) for p in result.periods]
    return data


def print_summary(result: ScheduleResult) -> None:
    """Print the loan summary figures in a human‑readable format."""
    print("Summary")
    print("-" * 72)
    print(f"Scheduled payment            : {format_amount(result.scheduled_payment)}")
    print(f"Scheduled number of payments : {result.scheduled_number_of_payments}")
    print(f"Actual number of payments    : {result.actual_number_of_payments}")
    if result.total_early_payments:
        print(f"Total early payments         : {format_amount(result.total_early_payments)}")
    print(f"Total interest               : {format_amount(result.total_interest)}")
    if result.payoff_date is not None:
        print(f"Payoff date                  : {result.payoff_date.strftime(DATE_FORMAT)}")
    print("-" * 72)


SCHEDULE_HEADERS = [
    "No",
    "Date",
    "BegBal",
    "SchedPay",
    "Extra",
    "TotalPay",
    "Principal",
    "Interest",
    "EndBal",
    "CumInterest",
]


def schedule_rows(schedule: Iterable[PaymentRecord]) -> List[List[str]]:
    rows = []
    for entry in schedule:
        rows.append(
            [
                str(entry.sequence_number),
                entry.payment_date.strftime(DATE_FORMAT),
                format_amount(entry.beginning_balance),
                format_amount(entry.scheduled_payment),
                format_amount(entry.extra_payment),
                format_amount(entry.total_payment),
                format_amount(entry.principal),
                format_amount(entry.interest),
                format_amount(entry.ending_balance),
                format_amount(entry.cumulative_interest),
            ]
        )
    return rows


def print_schedule(schedule: Iterable[PaymentRecord]) -> None:
    """Print the amortization schedule as a tab separated table."""
    print("\t".join(SCHEDULE_HEADERS))
    for row in schedule_rows(schedule):
        print("\t".join(row))
