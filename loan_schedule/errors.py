"""Exceptions raised by the loan schedule engine."""


class ScheduleError(Exception):
    """Base class for every error the engine signals."""


class InvalidLoanParameters(ScheduleError, ValueError):
    """Loan inputs are outside the range the engine can amortize."""


class InvalidScheduleInput(InvalidLoanParameters):
    """The schedule builder was handed a degenerate principal, rate or extra payment."""


class NonTerminatingSchedule(ScheduleError):
    """The balance would never reach zero with the given payments."""
