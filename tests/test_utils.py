from datetime import date
from decimal import Decimal

import pytest

from loan_schedule.utils import add_months, decimal_from_str, parse_date, round_cents, round_up


class TestRoundUp:
    def test_rounds_up_not_half_up(self):
        assert round_up(Decimal("1.001"), 2) == Decimal("1.01")
        assert round_up(Decimal("4.9565"), 2) == Decimal("4.96")

    def test_exact_value_unchanged(self):
        assert round_up(Decimal("83.34"), 2) == Decimal("83.34")
        assert round_up(Decimal("0"), 2) == Decimal("0")

    def test_repeating_fraction(self):
        assert round_up(Decimal("1000") / Decimal("12"), 2) == Decimal("83.34")

    def test_zero_places(self):
        assert round_up(Decimal("2.1"), 0) == Decimal("3")

    def test_negative_places(self):
        assert round_up(Decimal("123.4"), -1) == Decimal("130")
        assert round_up(Decimal("101"), -2) == Decimal("200")

    def test_negative_value_goes_to_ceiling(self):
        assert round_up(Decimal("-1.005"), 2) == Decimal("-1.00")


class TestRoundCents:
    def test_half_up(self):
        assert round_cents(Decimal("100.005")) == Decimal("100.01")
        assert round_cents(Decimal("100.004")) == Decimal("100.00")


class TestAddMonths:
    def test_simple(self):
        assert add_months(date(2019, 1, 22), 1) == date(2019, 2, 22)

    def test_year_boundary(self):
        assert add_months(date(2019, 12, 15), 1) == date(2020, 1, 15)
        assert add_months(date(2019, 3, 15), 12) == date(2020, 3, 15)

    def test_day_overflow_rolls_into_next_month(self):
        assert add_months(date(2019, 1, 31), 1) == date(2019, 3, 3)

    def test_day_overflow_leap_year(self):
        assert add_months(date(2020, 1, 31), 1) == date(2020, 3, 2)
        assert add_months(date(2019, 11, 30), 3) == date(2020, 3, 1)


class TestParsing:
    def test_parse_day_first(self):
        assert parse_date("22/01/2019") == date(2019, 1, 22)

    def test_parse_iso(self):
        assert parse_date("2019-01-22") == date(2019, 1, 22)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_date("01-22-2019")

    def test_decimal_strips_commas(self):
        assert decimal_from_str("65,000.50") == Decimal("65000.50")

    @pytest.mark.parametrize("value", ["", "abc", "NaN", "Infinity"])
    def test_decimal_invalid(self, value):
        with pytest.raises(ValueError):
            decimal_from_str(value)
