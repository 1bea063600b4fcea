from datetime import date
from decimal import Decimal

from loan_schedule.engine import build_schedule, calculate
from loan_schedule.formatter import format_amount, print_schedule, print_summary, result_to_dict


class TestFormatAmount:
    def test_thousands_separator(self):
        assert format_amount(Decimal("1234567.5")) == "1,234,567.50"

    def test_small_amount(self):
        assert format_amount(Decimal("0")) == "0.00"
        assert format_amount(Decimal("14.35")) == "14.35"


class TestResultToDict:
    def test_summary_keys(self, early_payoff_loan):
        data = result_to_dict(calculate(early_payoff_loan))
        assert data["scheduled_payment"] == "14.35"
        assert data["scheduled_number_of_payments"] == 120
        assert data["actual_number_of_payments"] == 2
        assert data["total_early_payments"] == "981.30"
        assert data["total_interest"] == "14.96"

    def test_payment_rows(self, early_payoff_loan):
        data = result_to_dict(calculate(early_payoff_loan))
        assert len(data["payments"]) == 2
        last = data["payments"][-1]
        assert last == {
            "no": 2,
            "payment_date": "22/03/2019",
            "beginning_balance": "495.65",
            "scheduled_payment": "14.35",
            "extra_payment": "481.30",
            "total_payment": "495.65",
            "principal": "490.69",
            "interest": "4.96",
            "ending_balance": "0.00",
            "cumulative_interest": "14.96",
        }

    def test_without_payments(self, early_payoff_loan):
        data = result_to_dict(calculate(early_payoff_loan), include_payments=False)
        assert "payments" not in data

    def test_omits_unknown_scheduled_count(self):
        result = build_schedule(Decimal("1000"), Decimal("83.34"), Decimal("0"), date(2019, 1, 22), Decimal("0"))
        data = result_to_dict(result, include_payments=False)
        assert "scheduled_number_of_payments" not in data
        assert data["actual_number_of_payments"] == 12


class TestPrinting:
    def test_print_summary(self, early_payoff_loan, capsys):
        print_summary(calculate(early_payoff_loan))
        out = capsys.readouterr().out
        assert "Scheduled payment            : 14.35" in out
        assert "Total early payments         : 981.30" in out
        assert "Payoff date                  : 22/03/2019" in out

    def test_print_summary_hides_zero_early_payments(self, interest_free_loan, capsys):
        print_summary(calculate(interest_free_loan))
        assert "Total early payments" not in capsys.readouterr().out

    def test_print_schedule(self, interest_free_loan, capsys):
        print_schedule(calculate(interest_free_loan).periods)
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0].split("\t")[0] == "No"
        assert len(lines) == 13
        assert lines[-1].split("\t")[:2] == ["12", "22/01/2020"]
