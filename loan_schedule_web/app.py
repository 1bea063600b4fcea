import logging

from flask import Flask, jsonify, request

from loan_schedule.config import settings
from loan_schedule.data_models import LoanParameters
from loan_schedule.engine import calculate
from loan_schedule.errors import InvalidLoanParameters, NonTerminatingSchedule
from loan_schedule.formatter import result_to_dict
from loan_schedule.utils import decimal_from_str, parse_date, round_cents

logger = logging.getLogger(__name__)

app = Flask(__name__)

# (name, example) for every required numeric query parameter
NUMERIC_PARAMS = [
    ("loan_amount", "65000"),
    ("annual_interest_rate", "20"),
    ("loan_period_in_years", "30"),
    ("number_of_payments_per_year", "12"),
    ("optional_extra_payments", "100"),
]
INTEGER_PARAMS = {"loan_period_in_years", "number_of_payments_per_year"}


class InvalidQuery(Exception):
    """A query parameter is missing or malformed."""


def _numeric_param(args, name: str, example: str):
    raw = args.get(name, "").strip()
    try:
        value = decimal_from_str(raw)
    except ValueError:
        raise InvalidQuery(f"`{name}` is not set or bad format. Example: {example}")
    if name in INTEGER_PARAMS:
        if value != value.to_integral_value():
            raise InvalidQuery(f"`{name}` must be a whole number. Example: {example}")
        return int(value)
    return value


def _args_to_params(args) -> LoanParameters:
    """Validate the query string and build ``LoanParameters`` from it."""
    values = {name: _numeric_param(args, name, example) for name, example in NUMERIC_PARAMS}
    raw_date = args.get("start_date_of_loan")
    if not raw_date:
        raise InvalidQuery("`start_date_of_loan` is not set.")
    try:
        start_date = parse_date(raw_date)
    except ValueError as exc:
        raise InvalidQuery(str(exc))

    return LoanParameters(
        principal=round_cents(values["loan_amount"]),
        annual_interest_rate=values["annual_interest_rate"],
        term_years=values["loan_period_in_years"],
        payments_per_year=values["number_of_payments_per_year"],
        start_date=start_date,
        extra_payment=round_cents(values["optional_extra_payments"]),
    )


def _include_payments(args) -> bool:
    return args.get("include_payments", "0").strip().lower() in {"1", "true", "yes"}


@app.errorhandler(InvalidQuery)
def handle_bad_request(exc):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(InvalidLoanParameters)
def handle_invalid_parameters(exc):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(NonTerminatingSchedule)
def handle_non_terminating(exc):
    logger.warning("Rejected non-terminating schedule: %s", exc)
    return jsonify({"error": str(exc)}), 422


@app.get("/api/loan_summary")
def loan_summary():
    params = _args_to_params(request.args)
    include_payments = _include_payments(request.args)
    result = calculate(params, include_payments=include_payments)
    response = jsonify(result_to_dict(result, include_payments=include_payments))
    # Every query produces a fresh calculation.
    response.headers["Cache-Control"] = "no-store"
    return response


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    print("Starting Loan Schedule API...")
    app.run(host="0.0.0.0", port=8710, debug=True)
