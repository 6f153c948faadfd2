"""Tests for gross income input parsing and display formatting."""

import pytest

from payecalc.sdk import (
    InvalidIncomeError,
    compare,
    compare_income,
    format_currency,
    format_percent,
    parse_gross_income,
)


class TestParseGrossIncome:

    def test_monthly(self):
        assert parse_gross_income("500000") == 500_000

    def test_annual_divided_by_twelve(self):
        assert parse_gross_income("6000000", "annual") == 500_000

    def test_thousands_separators_and_whitespace(self):
        assert parse_gross_income(" 6,000,000 ", "annual") == 500_000

    def test_numbers_accepted(self):
        assert parse_gross_income(250_000.5) == 250_000.5

    def test_zero_allowed(self):
        assert parse_gross_income("0") == 0

    @pytest.mark.parametrize("value", ["", "   ", "abc", "12abc", "-1", "nan", "inf", -500, float("nan"), True])
    def test_invalid_rejected(self, value):
        with pytest.raises(InvalidIncomeError):
            parse_gross_income(value)

    def test_invalid_income_is_value_error(self):
        with pytest.raises(ValueError):
            parse_gross_income("-100")

    def test_unknown_input_type(self):
        with pytest.raises(ValueError, match="Invalid input type"):
            parse_gross_income("500000", "weekly")

    def test_compare_income(self):
        results = compare_income("6000000", "annual", {"pension": "20000"})
        assert results.monthly_gross == 500_000
        assert results == compare(500_000, {"pension": "20000"})


class TestFormatCurrency:

    @pytest.mark.parametrize("amount,expected", [
        (500_000, "₦500,000"),
        (74_666.67, "₦74,667"),
        (-5_166.67, "-₦5,167"),
        (0, "₦0"),
        (0.5, "₦1"),
        (-0.5, "-₦1"),
        (-0.4, "₦0"),
        (1_234_567_890, "₦1,234,567,890"),
    ])
    def test_whole_naira(self, amount, expected):
        assert format_currency(amount) == expected

    def test_two_decimals(self):
        assert format_currency(74_666.67, decimals=2) == "₦74,666.67"
        assert format_currency(1_234.5, decimals=2) == "₦1,234.50"


class TestFormatPercent:

    def test_two_decimals(self):
        assert format_percent(6.919642857) == "6.92%"

    def test_zero(self):
        assert format_percent(0) == "0.00%"

    def test_negative(self):
        assert format_percent(-22.56) == "-22.56%"
