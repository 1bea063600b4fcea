"""Utility functions for the loan schedule calculator.

This module provides the rounding helper shared by the payment formula and
the schedule builder, helpers for parsing user input into Python data types,
and calendar arithmetic for stepping payment dates month by month.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP, InvalidOperation, getcontext
import calendar

getcontext().prec = 28  # increase decimal precision to avoid rounding errors

CENTS = Decimal("0.01")

DATE_FORMATS = ("%d/%m/%Y", "%Y-%m-%d")


def round_up(value: Decimal, places: int = 2) -> Decimal:
    """Round ``value`` up to ``places`` decimal places.

    This is ``ceil(value * 10^places) / 10^places``. It is deliberately not
    half-up rounding: 1.001 becomes 1.01. A negative ``places`` rounds up to
    tens, hundreds and so on.
    """
    value = Decimal(value)
    return value.scaleb(places).to_integral_value(rounding=ROUND_CEILING).scaleb(-places)


def round_cents(value: Decimal) -> Decimal:
    """Round half-up to cents, as the input forms do before calculating."""
    return Decimal(value).quantize(CENTS, ROUND_HALF_UP)


def add_months(dt: date, months: int) -> date:
    """Return a new date a number of months after ``dt``.

    When the day does not exist in the target month the surplus days spill
    over into the next month, so Jan 31 plus one month is Mar 3 (or Mar 2 in
    a leap year). Callers that step one month at a time keep the spilled day.
    """
    year = dt.year + (dt.month - 1 + months) // 12
    month = (dt.month - 1 + months) % 12 + 1
    if dt.day <= calendar.monthrange(year, month)[1]:
        return date(year, month, dt.day)
    return date(year, month, 1) + timedelta(days=dt.day - 1)


def parse_date(value: str) -> date:
    """Parse a ``DD/MM/YYYY`` or ``YYYY-MM-DD`` string into a ``date``.

    Raises
    ------
    ValueError
        If the string matches neither format.
    """
    cleaned = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Invalid date: {value}. Example: 22/01/2019")


def decimal_from_str(value: str) -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    The function strips any commas and handles both integer and float-like
    strings. It raises ``ValueError`` if conversion fails.
    """
    try:
        cleaned = str(value).replace(",", "").strip()
        result = Decimal(cleaned)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"Invalid numeric value: {value}") from exc
    if not result.is_finite():
        raise ValueError(f"Invalid numeric value: {value}")
    return result
