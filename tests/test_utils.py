import math

import pytest

from mortgage_calc.data_models import LoanInput
from mortgage_calc.utils import has_all_inputs, parse_loan_input, parse_number


class TestParseNumber:
    def test_plain_values(self):
        assert parse_number("6.5") == 6.5
        assert parse_number(" 250000 ") == 250_000.0
        assert parse_number(20) == 20.0

    def test_thousands_separators(self):
        assert parse_number("10,00,000") == 1_000_000.0

    @pytest.mark.parametrize("raw", ["", "   ", None, "abc", "12..5"])
    def test_unparseable_is_nan_not_zero(self, raw):
        assert math.isnan(parse_number(raw))


class TestParseLoanInput:
    def test_valid(self):
        assert parse_loan_input("1000000", "8", "20") == LoanInput(1_000_000.0, 8.0, 20.0)

    def test_zero_rate_allowed(self):
        assert parse_loan_input("500000", "0", "10").annual_rate_percent == 0.0

    @pytest.mark.parametrize(
        "principal, rate, term",
        [("", "8", "20"), ("1000", "", "20"), ("1000", "8", ""), ("abc", "8", "20"), ("0", "8", "20"), ("1000", "-1", "20")],
    )
    def test_invalid_returns_none(self, principal, rate, term):
        assert parse_loan_input(principal, rate, term) is None

    def test_has_all_inputs(self):
        assert has_all_inputs("1", "0", "1")
        assert not has_all_inputs("1", " ", "1")
        assert not has_all_inputs(None, "0", "1")
