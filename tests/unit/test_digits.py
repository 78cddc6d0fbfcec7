"""Tests for limit-free decimal digit conversions."""

from decimal import Decimal

import pytest

from bn_matchers.digits import decimal_to_int, format_decimal, parse_decimal


class TestParseDecimal:
    """Tests for parse_decimal."""

    @pytest.mark.parametrize("s,expected", [("0", 0), ("-0", 0), ("007", 7), ("-42", -42)])
    def test_small(self, s, expected):
        assert parse_decimal(s) == expected

    def test_long_digit_string(self):
        """Strings past the direct-conversion size are split and rejoined exactly."""
        s = "1" + "0" * 12_345
        assert parse_decimal(s) == 10**12_345
        assert parse_decimal("-" + s) == -(10**12_345)

    def test_leading_zeros_on_long_string(self):
        assert parse_decimal("0" * 3000 + "5") == 5


class TestFormatDecimal:
    """Tests for format_decimal."""

    @pytest.mark.parametrize("n,expected", [(0, "0"), (7, "7"), (-42, "-42")])
    def test_small(self, n, expected):
        assert format_decimal(n) == expected

    def test_power_of_ten(self):
        rendered = format_decimal(10**20_000)
        assert rendered == "1" + "0" * 20_000

    def test_all_nines(self):
        assert format_decimal(10**9_000 - 1) == "9" * 9_000
        assert format_decimal(1 - 10**9_000) == "-" + "9" * 9_000

    def test_mixed_digits_survive_parse(self):
        s = "1234567890" * 1_500
        assert format_decimal(parse_decimal(s)) == s


class TestDecimalToInt:
    """Tests for decimal_to_int."""

    def test_positive_exponent(self):
        assert decimal_to_int(Decimal("4.5E+3")) == 4500
        assert decimal_to_int(Decimal("1E+50000")) == 10**50_000

    def test_zero_fraction_dropped(self):
        assert decimal_to_int(Decimal("-100.000")) == -100
        assert decimal_to_int(Decimal("0.000")) == 0

    def test_negative_zero(self):
        assert decimal_to_int(Decimal("-0")) == 0
