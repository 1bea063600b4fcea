"""Shared loan fixtures.

Fixture loans:
- the calculator form defaults: $65K, 20% rate, 30yr, monthly, no extra
- $1K interest-free over one year
- $1K at 12% over 10yr with a $500 extra payment every month
"""

from datetime import date
from decimal import Decimal

import pytest

from loan_schedule.data_models import LoanParameters

START = date(2019, 1, 22)


@pytest.fixture
def default_loan() -> LoanParameters:
    return LoanParameters(
        principal=Decimal("65000"),
        annual_interest_rate=Decimal("20"),
        term_years=30,
        payments_per_year=12,
        start_date=START,
        extra_payment=Decimal("0"),
    )


@pytest.fixture
def interest_free_loan() -> LoanParameters:
    return LoanParameters(
        principal=Decimal("1000"),
        annual_interest_rate=Decimal("0"),
        term_years=1,
        payments_per_year=12,
        start_date=START,
    )


@pytest.fixture
def early_payoff_loan() -> LoanParameters:
    return LoanParameters(
        principal=Decimal("1000"),
        annual_interest_rate=Decimal("12"),
        term_years=10,
        payments_per_year=12,
        start_date=START,
        extra_payment=Decimal("500"),
    )
