"""Data models for the loan schedule calculator.

This module defines dataclasses representing the entities used by the
calculator: the loan parameters collected from the user, a single row of the
amortization table and the aggregate result of a calculation. All of them are
frozen; a schedule is computed in one pass and never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple

from .errors import InvalidLoanParameters


@dataclass(frozen=True)
class LoanParameters:
    """The six inputs of a fixed-rate loan.

    Attributes
    ----------
    principal: Decimal
        The amount borrowed. Must be positive.
    annual_interest_rate: Decimal
        Nominal annual rate in percent, e.g. ``Decimal("20")`` for 20 %.
    term_years: int
        Loan period in years.
    payments_per_year: int
        Number of payments per year (12 for monthly).
    start_date: date
        Start of the loan. The first payment falls one month later.
    extra_payment: Decimal
        Constant amount paid on top of the scheduled payment every period.
    """

    principal: Decimal
    annual_interest_rate: Decimal
    term_years: int
    payments_per_year: int
    start_date: date
    extra_payment: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if self.principal <= 0:
            raise InvalidLoanParameters("Loan amount can't be 0 or less than 0")
        if self.annual_interest_rate < 0:
            raise InvalidLoanParameters("Annual interest rate can't be negative")
        if self.term_years <= 0:
            raise InvalidLoanParameters("Loan period in years must be positive")
        if self.payments_per_year <= 0:
            raise InvalidLoanParameters("Number of payments per year must be positive")
        if self.extra_payment < 0:
            raise InvalidLoanParameters("Extra payments can't be negative")

    @property
    def periodic_rate(self) -> Decimal:
        return (Decimal(self.annual_interest_rate) / Decimal(self.payments_per_year)) / Decimal(100)

    @property
    def scheduled_periods(self) -> int:
        return self.term_years * self.payments_per_year


@dataclass(frozen=True)
class PaymentRecord:
    """One row of the amortization table."""

    sequence_number: int
    payment_date: date
    beginning_balance: Decimal
    scheduled_payment: Decimal
    extra_payment: Decimal  # extra actually applied this period
    total_payment: Decimal
    principal: Decimal
    interest: Decimal
    ending_balance: Decimal
    cumulative_interest: Decimal


@dataclass(frozen=True)
class ScheduleResult:
    """Summary figures plus the ordered payment rows.

    ``actual_number_of_payments`` is stored rather than derived from
    ``periods`` so that a summary-only result (no rows attached) still reports
    how many payments the loan takes.
    """

    scheduled_payment: Decimal
    actual_number_of_payments: int
    total_early_payments: Decimal
    total_interest: Decimal
    scheduled_number_of_payments: Optional[int] = None
    payoff_date: Optional[date] = None
    total_paid: Decimal = Decimal("0")
    periods: Tuple[PaymentRecord, ...] = field(default_factory=tuple)

    def without_periods(self) -> "ScheduleResult":
        """Return a copy of this result with the payment rows dropped."""
        return replace(self, periods=())
