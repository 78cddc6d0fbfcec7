"""Tests for the BigNumber operand type."""

import pytest

from bn_matchers.bignumber import (
    UINT256_MAX,
    BigNumber,
    BigNumberError,
    DivisionByZero,
    Uint256Overflow,
)


class TestBigNumberConstruction:
    """Tests for BigNumber construction."""

    def test_from_int(self):
        """BigNumber can be constructed from int."""
        assert BigNumber(42).value == 42

    def test_from_bignumber(self):
        """BigNumber can be constructed from another BigNumber."""
        assert BigNumber(BigNumber(42)).value == 42

    def test_from_negative(self):
        """BigNumber is signed."""
        assert BigNumber(-10).value == -10

    def test_from_large(self):
        """BigNumber holds values beyond 256 bits."""
        assert BigNumber(10**100).value == 10**100

    def test_from_invalid_type_raises(self):
        """BigNumber rejects non-integers, including bool."""
        with pytest.raises(TypeError):
            BigNumber("42")  # type: ignore
        with pytest.raises(TypeError):
            BigNumber(3.0)  # type: ignore
        with pytest.raises(TypeError):
            BigNumber(True)

    def test_zero_constructor(self):
        assert BigNumber.zero().value == 0

    def test_from_value_decimal_string(self):
        """from_value parses decimal strings."""
        assert BigNumber.from_value("12345").value == 12345
        assert BigNumber.from_value("-7").value == -7

    def test_from_value_hex_string(self):
        """from_value parses 0x hex strings."""
        assert BigNumber.from_value("0x0de0b6b3a7640000").value == 10**18
        assert BigNumber.from_value("-0xff").value == -255

    def test_from_value_int_and_bignumber(self):
        assert BigNumber.from_value(5).value == 5
        assert BigNumber.from_value(BigNumber(5)).value == 5

    def test_from_value_invalid_string_raises(self):
        """from_value rejects anything that is not decimal or hex."""
        for bad in ["", "1.5", "0x", "12a", " 1", "1e3"]:
            with pytest.raises(ValueError):
                BigNumber.from_value(bad)

    def test_from_hex_requires_prefix(self):
        with pytest.raises(ValueError):
            BigNumber.from_hex("ff")


class TestBigNumberRendering:
    """Tests for string, hex and fixed-width renderings."""

    def test_to_string(self):
        assert BigNumber(-1234).to_string() == "-1234"
        assert str(BigNumber(10)) == "10"

    def test_to_hex(self):
        assert BigNumber(255).to_hex() == "0xff"
        assert BigNumber(0).to_hex() == "0x0"
        assert BigNumber(-255).to_hex() == "-0xff"

    def test_repr_uses_hex(self):
        assert repr(BigNumber(16)) == "BigNumber(0x10)"

    def test_decimal_round_trip_beyond_digit_limit(self):
        """Decimal strings longer than the int/str digit limit round trip."""
        digits = "9" * 5000
        n = BigNumber.from_value(digits)
        assert n == 10**5000 - 1
        assert n.to_string() == digits
        assert str(-n) == "-" + digits
        assert BigNumber.from_value("-" + digits) == -n

    def test_hex_round_trip(self):
        n = BigNumber(123456789012345678901234567890)
        assert BigNumber.from_hex(n.to_hex()) == n

    def test_to_twos_negative(self):
        """Negative values encode as two's complement patterns."""
        assert BigNumber(-1).to_twos(8) == 0xFF
        assert BigNumber(-128).to_twos(8) == 0x80
        assert BigNumber(-1).to_twos(256) == UINT256_MAX

    def test_to_twos_positive(self):
        assert BigNumber(127).to_twos(8) == 127

    def test_to_twos_overflow_raises(self):
        with pytest.raises(OverflowError):
            BigNumber(128).to_twos(8)
        with pytest.raises(OverflowError):
            BigNumber(-129).to_twos(8)

    def test_from_twos(self):
        assert BigNumber.from_twos(0xFF, 8).value == -1
        assert BigNumber.from_twos(0x7F, 8).value == 127
        assert BigNumber.from_twos(UINT256_MAX, 256).value == -1

    def test_invalid_width_raises(self):
        with pytest.raises(ValueError):
            BigNumber(1).to_twos(0)
        with pytest.raises(ValueError):
            BigNumber.from_twos(1, 0)


class TestBigNumberArithmetic:
    """Tests for BigNumber arithmetic operations."""

    def test_add(self):
        assert (BigNumber(10) + BigNumber(5)).value == 15
        assert (BigNumber(10) + 5).value == 15
        assert (5 + BigNumber(10)).value == 15

    def test_sub_can_go_negative(self):
        """Subtraction is signed and never raises."""
        assert (BigNumber(5) - BigNumber(10)).value == -5
        assert (5 - BigNumber(10)).value == -5

    def test_mul_large(self):
        big = 10**40
        assert (BigNumber(big) * big).value == big * big

    def test_floordiv(self):
        assert (BigNumber(10) // 3).value == 3

    def test_floordiv_by_zero_raises(self):
        with pytest.raises(DivisionByZero) as exc_info:
            BigNumber(10) // 0
        assert "10 // 0" in str(exc_info.value)

    def test_mod_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            BigNumber(10) % BigNumber(0)

    def test_errors_are_arithmetic_errors(self):
        assert issubclass(DivisionByZero, BigNumberError)
        assert issubclass(BigNumberError, ArithmeticError)

    def test_neg_and_abs(self):
        assert (-BigNumber(3)).value == -3
        assert abs(BigNumber(-3)).value == 3


class TestBigNumberComparison:
    """Tests for comparisons against BigNumber and int."""

    def test_eq(self):
        assert BigNumber(10) == BigNumber(10)
        assert BigNumber(10) == 10
        assert BigNumber(10) != 11
        assert BigNumber(10) != "10"

    def test_ordering(self):
        assert BigNumber(1) < BigNumber(2)
        assert BigNumber(2) <= 2
        assert BigNumber(3) > 2
        assert BigNumber(3) >= BigNumber(3)

    def test_hash_matches_int(self):
        assert hash(BigNumber(7)) == hash(7)
        assert len({BigNumber(7), BigNumber(7)}) == 1

    def test_bool_and_predicates(self):
        assert not BigNumber(0)
        assert BigNumber(0).is_zero()
        assert BigNumber(-1).is_negative()

    def test_index(self):
        assert [0, 1, 2][BigNumber(1)] == 1


class TestBigNumberUint256:
    """Tests for uint256 narrowing."""

    def test_to_uint256_valid(self):
        assert BigNumber(UINT256_MAX).to_uint256() == UINT256_MAX

    def test_to_uint256_negative_raises(self):
        with pytest.raises(Uint256Overflow) as exc_info:
            BigNumber(-1).to_uint256()
        assert "Negative" in str(exc_info.value)

    def test_to_uint256_overflow_raises(self):
        with pytest.raises(Uint256Overflow):
            BigNumber(UINT256_MAX + 1).to_uint256()

    def test_is_uint256(self):
        assert BigNumber(0).is_uint256()
        assert not BigNumber(-1).is_uint256()
        assert not BigNumber(UINT256_MAX + 1).is_uint256()
