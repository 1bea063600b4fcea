"""Core calculation engine for the loan schedule calculator.

This module implements the financial logic for fixed-rate, fully amortizing
loans: the scheduled (annuity) payment and the period-by-period schedule that
applies a constant extra payment on top of it. Every monetary figure is
rounded up to cents before it is stored, and each period's rounded ending
balance feeds the next period, so the rounding order matters.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from .config import settings
from .data_models import LoanParameters, PaymentRecord, ScheduleResult
from .errors import InvalidLoanParameters, InvalidScheduleInput, NonTerminatingSchedule
from .utils import add_months, round_up

logger = logging.getLogger(__name__)

PLACES = 2


def compute_scheduled_payment(periodic_rate: Decimal, period_count: int, principal: Decimal) -> Decimal:
    """Return the fixed payment that retires ``principal`` in ``period_count`` periods.

    The formula is:

        payment = i * P * (1 + i)^n / ((1 + i)^n - 1)

    where ``P`` is the principal, ``i`` is the periodic interest rate and
    ``n`` is the number of payments. When the interest rate is zero, or so
    small that ``1 + i`` is indistinguishable from 1 at the working precision,
    the payment simplifies to ``P / n``. The result is rounded up to cents.
    """
    if period_count <= 0:
        raise InvalidLoanParameters("Number of payments must be positive")
    principal = Decimal(principal)
    periodic_rate = Decimal(periodic_rate)
    factor = (1 + periodic_rate) ** period_count
    if factor == 1:
        return round_up(principal / Decimal(period_count), PLACES)
    return round_up(periodic_rate * principal * factor / (factor - 1), PLACES)


def build_schedule(
    principal: Decimal,
    scheduled_payment: Decimal,
    extra_payment: Decimal,
    start_date: date,
    periodic_rate: Decimal,
    *,
    scheduled_number_of_payments: Optional[int] = None,
    max_periods: Optional[int] = None,
) -> ScheduleResult:
    """Build the amortization table until the balance reaches zero.

    Parameters
    ----------
    principal: Decimal
        Opening balance.
    scheduled_payment: Decimal
        The constant payment from :func:`compute_scheduled_payment`.
    extra_payment: Decimal
        Amount paid on top of ``scheduled_payment`` every period.
    start_date: date
        Loan start; the first payment is one month later and every following
        payment one month after the previous one.
    periodic_rate: Decimal
        Interest rate per period as a fraction.
    scheduled_number_of_payments: int, optional
        Nominal number of payments, copied into the result. Left as ``None``
        when omitted; :func:`calculate` always supplies it.
    max_periods: int, optional
        Iteration cap; defaults to ``settings.max_periods``.

    Returns
    -------
    ScheduleResult
        The payment rows and the aggregate totals.

    Raises
    ------
    InvalidScheduleInput
        If the principal is not positive or the rate or extra payment is
        negative.
    NonTerminatingSchedule
        If the payments can never retire the balance.
    """
    principal = Decimal(principal)
    scheduled_payment = Decimal(scheduled_payment)
    extra_payment = Decimal(extra_payment)
    periodic_rate = Decimal(periodic_rate)
    if max_periods is None:
        max_periods = settings.max_periods

    if principal <= 0:
        raise InvalidScheduleInput("Principal must be positive")
    if extra_payment < 0:
        raise InvalidScheduleInput("Extra payment can't be negative")
    if periodic_rate < 0:
        raise InvalidScheduleInput("Interest rate can't be negative")
    if scheduled_payment <= 0:
        raise NonTerminatingSchedule("Scheduled payment must be positive for the loan to be repaid")

    periods: List[PaymentRecord] = []
    balance = principal
    payment_date = start_date
    cumulative_interest = Decimal("0")
    total_early_payments = Decimal("0")
    total_paid = Decimal("0")
    combined_payment = scheduled_payment + extra_payment
    sequence = 1

    while True:
        if sequence > max_periods:
            raise NonTerminatingSchedule(
                f"Schedule did not terminate within {max_periods} payments"
            )
        payment_date = add_months(payment_date, 1)
        interest = round_up(balance * periodic_rate, PLACES)

        if combined_payment < balance:
            total_payment = combined_payment
            applied_extra = extra_payment
            principal_paid = round_up(total_payment - interest, PLACES)
            if principal_paid <= 0:
                raise NonTerminatingSchedule(
                    f"Payment of {total_payment} does not cover interest of {interest} in period {sequence}"
                )
            ending_balance = round_up(balance - principal_paid, PLACES)
        else:
            # Final period: pay off exactly what is left. Principal is not rounded here.
            total_payment = balance
            principal_paid = total_payment - interest
            applied_extra = max(balance - scheduled_payment, Decimal("0"))
            ending_balance = Decimal("0")

        cumulative_interest += interest
        total_early_payments += applied_extra
        total_paid += total_payment

        periods.append(
            PaymentRecord(
                sequence_number=sequence,
                payment_date=payment_date,
                beginning_balance=balance,
                scheduled_payment=scheduled_payment,
                extra_payment=applied_extra,
                total_payment=total_payment,
                principal=principal_paid,
                interest=interest,
                ending_balance=ending_balance,
                cumulative_interest=cumulative_interest,
            )
        )

        if ending_balance == 0:
            break
        balance = ending_balance
        sequence += 1

    if scheduled_number_of_payments is not None and len(periods) < scheduled_number_of_payments:
        logger.debug(
            "Loan repaid after %d of %d scheduled payments", len(periods), scheduled_number_of_payments
        )

    return ScheduleResult(
        scheduled_payment=scheduled_payment,
        actual_number_of_payments=len(periods),
        total_early_payments=total_early_payments,
        total_interest=periods[-1].cumulative_interest,
        scheduled_number_of_payments=scheduled_number_of_payments,
        payoff_date=periods[-1].payment_date,
        total_paid=total_paid,
        periods=tuple(periods),
    )


def calculate(params: LoanParameters, include_payments: bool = True) -> ScheduleResult:
    """Compute the scheduled payment and full schedule for ``params``.

    When ``include_payments`` is false the returned result carries only the
    summary figures; they are still computed from the complete schedule.

    Raises ``NonTerminatingSchedule`` up front when the loan has more scheduled
    payments than ``settings.max_periods``.
    """
    if params.scheduled_periods > settings.max_periods:
        raise NonTerminatingSchedule(
            f"Loan has {params.scheduled_periods} scheduled payments; "
            f"the limit is {settings.max_periods}"
        )
    periodic_rate = params.periodic_rate
    scheduled_payment = compute_scheduled_payment(
        periodic_rate, params.scheduled_periods, params.principal
    )
    result = build_schedule(
        params.principal,
        scheduled_payment,
        params.extra_payment,
        params.start_date,
        periodic_rate,
        scheduled_number_of_payments=params.scheduled_periods,
    )
    logger.info(
        "Calculated schedule for loan amount %s: %d payments of %s",
        params.principal,
        result.actual_number_of_payments,
        scheduled_payment,
    )
    if not include_payments:
        return result.without_periods()
    return result
