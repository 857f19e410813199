"""Tests for money, percentage and numeric range validators."""

import math
from decimal import Decimal

import pytest

from src.shared.validators.money import (
    format_currency,
    parse_currency,
    parse_number,
    validate_max_value,
    validate_min_value,
    validate_money,
    validate_percentage,
)


class TestParseNumber:
    """Test strict number parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("12.34", 12.34), (" 7 ", 7.0), ("-3", -3.0), (".5", 0.5), ("1e3", 1000.0), (5, 5.0), (Decimal("2.5"), 2.5)],
    )
    def test_numbers(self, raw, expected):
        """Test numeric strings and numbers parse."""
        assert parse_number(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["abc", "12abc", "1_000", "", "nan", "inf", "١٢", "１２", True, None, [1], math.nan, math.inf, Decimal("sNaN")],
    )
    def test_non_numbers(self, raw):
        """Test anything else parses to None."""
        assert parse_number(raw) is None

    @pytest.mark.parametrize("raw", [10**400, -(10**400), "1" + "0" * 400])
    def test_out_of_float_range(self, raw):
        """Test numbers too large for a float are rejected, not raised."""
        assert parse_number(raw) is None


class TestMoneyValidation:
    """Test currency amount validation."""

    def test_valid_amount_returns_value(self):
        """Test a valid amount carries the parsed number."""
        result = validate_money("12.34", 0, 100)
        assert result.valid is True
        assert result.value == 12.34

    def test_numeric_input_is_accepted(self):
        """Test ints and floats are accepted as-is."""
        assert validate_money(50).value == 50.0
        assert validate_money(0.1).value == 0.1

    @pytest.mark.parametrize("amount", ["", None])
    def test_missing_amount_is_required(self, amount):
        """Test empty and None amounts are required."""
        result = validate_money(amount)
        assert result.error == "Amount is required"
        assert result.value is None

    def test_zero_is_present(self):
        """Test zero is a value, not a missing amount."""
        assert validate_money(0).valid

    def test_non_numeric(self):
        """Test non-numeric input is rejected."""
        assert validate_money("twelve").error == "Amount must be a valid number"

    def test_non_ascii_digits_are_not_numbers(self):
        """Test digits outside 0-9 are rejected."""
        assert validate_money("١٢").error == "Amount must be a valid number"
        assert validate_percentage("١٢").error == "Percentage must be a valid number"

    def test_huge_integer_is_not_a_valid_number(self):
        """Test integers beyond the float range are rejected."""
        assert validate_money(10**400).error == "Amount must be a valid number"

    def test_below_minimum_includes_bound(self):
        """Test the minimum bound appears in the message."""
        assert validate_money("-1").error == "Amount must be at least 0"
        assert validate_money("5", min_amount=10).error == "Amount must be at least 10"

    def test_above_maximum_includes_bound(self):
        """Test the maximum bound appears in the message."""
        assert validate_money("150", 0, 100).error == "Amount must not exceed 100"
        assert validate_money("2", 0, 1.5).error == "Amount must not exceed 1.5"

    def test_too_many_decimals(self):
        """Test more than two decimal places is rejected even when in range."""
        result = validate_money("12.345")
        assert result.valid is False
        assert result.error == "Amount must have at most 2 decimal places"

    def test_trailing_zeros_do_not_count_as_decimals(self):
        """Test 12.340 is the same amount as 12.34."""
        assert validate_money("12.340").value == 12.34

    def test_negative_amount_allowed_when_minimum_allows(self):
        """Test negative amounts pass with a negative minimum."""
        assert validate_money("-12.5", min_amount=-100).value == -12.5

    def test_range_checked_before_decimals(self):
        """Test an out-of-range amount reports the range error first."""
        assert validate_money("150.999", 0, 100).error == "Amount must not exceed 100"

    def test_unbounded_by_default(self):
        """Test the default maximum is unbounded."""
        assert validate_money("999999999999.99").valid


class TestPercentageValidation:
    """Test percentage validation."""

    @pytest.mark.parametrize(("raw", "expected"), [("0", 0.0), ("100", 100.0), ("33.333", 33.333), (50, 50.0)])
    def test_in_range(self, raw, expected):
        """Test values between 0 and 100 pass and carry the number."""
        assert validate_percentage(raw).value == expected

    @pytest.mark.parametrize("raw", ["-0.1", "100.01", 250])
    def test_out_of_range(self, raw):
        """Test values outside 0-100 fail."""
        assert validate_percentage(raw).error == "Percentage must be between 0 and 100"

    @pytest.mark.parametrize("raw", ["", None, "ten"])
    def test_non_numeric(self, raw):
        """Test missing and non-numeric values report a number error."""
        assert validate_percentage(raw).error == "Percentage must be a valid number"

    def test_huge_integer_is_not_a_valid_number(self):
        """Test integers beyond the float range are rejected."""
        assert validate_percentage(10**400).error == "Percentage must be a valid number"


class TestValueBounds:
    """Test min/max value validation."""

    def test_min_value(self):
        """Test values below the minimum fail."""
        assert validate_min_value("4", 5).error == "Must be at least 5"
        assert validate_min_value("5", 5).valid

    def test_max_value(self):
        """Test values above the maximum fail."""
        assert validate_max_value("6", 5).error == "Must not exceed 5"
        assert validate_max_value("5", 5).valid

    def test_empty_values_pass(self):
        """Test empty values are left to the required rule."""
        assert validate_min_value("", 5).valid
        assert validate_max_value(None, 5).valid

    def test_non_numeric_fails(self):
        """Test non-numeric values fail."""
        assert validate_min_value("abc", 5).error == "Must be a valid number"
        assert validate_max_value(10**400, 5).error == "Must be a valid number"


class TestCurrencyFormatting:
    """Test currency display helpers."""

    def test_format_currency(self):
        """Test thousands separators and two decimals."""
        assert format_currency(1234.5) == "1,234.50"
        assert format_currency("1000000") == "1,000,000.00"
        assert format_currency(0) == "0.00"

    @pytest.mark.parametrize("value", [None, "", "abc", 10**400])
    def test_format_currency_empty(self, value):
        """Test empty or non-numeric values format as an empty string."""
        assert format_currency(value) == ""

    def test_parse_currency(self):
        """Test dollar signs and separators are stripped."""
        assert parse_currency("$1,234.50") == 1234.5
        assert parse_currency("") == 0.0

    def test_parse_currency_invalid(self):
        """Test unparseable values raise ValueError."""
        with pytest.raises(ValueError, match="Invalid currency value"):
            parse_currency("$abc")
