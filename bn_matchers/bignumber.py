"""Binary big-integer object used as an assertion operand.

BigNumber mirrors the big-number objects returned by Ethereum client
libraries: an immutable, signed, arbitrary-precision integer that is usually
exchanged as hex and narrowed to a fixed bit width (uint256, int256) at the
contract boundary.

Usage pattern:
    from bn_matchers.bignumber import BigNumber

    balance = BigNumber.from_value("0x0de0b6b3a7640000")  # 1e18
    fee = BigNumber(21_000) * 30_000_000_000

    expect(balance - fee).to.be.above(0)
"""

from __future__ import annotations

import re

from bn_matchers.digits import format_decimal, parse_decimal

UINT256_MAX = 2**256 - 1

_DECIMAL_RE = re.compile(r"-?[0-9]+")
_HEX_RE = re.compile(r"-?0[xX][0-9a-fA-F]+")


class BigNumberError(ArithmeticError):
    """Base class for BigNumber arithmetic errors."""

    pass


class DivisionByZero(BigNumberError):
    """Division or modulo by zero."""

    pass


class Uint256Overflow(BigNumberError):
    """Value does not fit in uint256."""

    pass


class BigNumber:
    """Immutable signed big integer.

    Arithmetic is exact and never wraps; narrowing to a fixed width happens
    only through to_twos() or to_uint256().

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | BigNumber) -> None:
        """Create a BigNumber from an integer or another BigNumber.

        Raises:
            TypeError: If value is not an int or BigNumber
        """
        if isinstance(value, BigNumber):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"BigNumber requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"BigNumber({self.to_hex()})"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Construction ---

    @classmethod
    def from_value(cls, value: int | str | BigNumber) -> BigNumber:
        """Build a BigNumber from an int, a decimal string or a 0x hex string.

        Raises:
            ValueError: If a string is neither decimal nor 0x-prefixed hex
            TypeError: If value has an unsupported type
        """
        if isinstance(value, str):
            if _HEX_RE.fullmatch(value):
                return cls.from_hex(value)
            if _DECIMAL_RE.fullmatch(value):
                return cls(parse_decimal(value))
            raise ValueError(f"Invalid BigNumber string: '{value}'")
        return cls(value)

    @classmethod
    def from_hex(cls, s: str) -> BigNumber:
        """Parse a 0x-prefixed hex string (optionally preceded by '-').

        Raises:
            ValueError: If string is not valid hex
        """
        if not _HEX_RE.fullmatch(s):
            raise ValueError(f"Invalid hex string: '{s}'")
        negative = s.startswith("-")
        magnitude = int(s[3:] if negative else s[2:], 16)
        return cls(-magnitude if negative else magnitude)

    @classmethod
    def from_twos(cls, value: int, width: int) -> BigNumber:
        """Interpret an unsigned width-bit pattern as a two's complement value."""
        if width <= 0:
            raise ValueError(f"Width must be positive: {width}")
        mask = (1 << width) - 1
        bits = value & mask
        if bits >> (width - 1):
            return cls(bits - (1 << width))
        return cls(bits)

    @classmethod
    def zero(cls) -> BigNumber:
        """Create a BigNumber with value 0."""
        return cls(0)

    # --- Rendering ---

    def to_string(self) -> str:
        """Decimal rendering, with no limit on the number of digits."""
        return format_decimal(self._value)

    def to_hex(self) -> str:
        """Hex rendering, '0x' prefixed; negative values get a leading '-'."""
        if self._value < 0:
            return f"-0x{-self._value:x}"
        return f"0x{self._value:x}"

    def to_twos(self, width: int) -> int:
        """Encode as an unsigned width-bit two's complement pattern.

        Raises:
            OverflowError: If the value does not fit in a signed width-bit integer
        """
        if width <= 0:
            raise ValueError(f"Width must be positive: {width}")
        bound = 1 << (width - 1)
        if not -bound <= self._value < bound:
            raise OverflowError(f"{self._value} does not fit in int{width}")
        return self._value & ((1 << width) - 1)

    def to_uint256(self) -> int:
        """Convert to int, validating uint256 bounds.

        Raises:
            Uint256Overflow: If value is negative or exceeds 2^256-1
        """
        if self._value < 0:
            raise Uint256Overflow(f"Negative value cannot be uint256: {self._value}")
        if self._value > UINT256_MAX:
            raise Uint256Overflow(f"Value exceeds uint256 max: {self._value}")
        return self._value

    def is_uint256(self) -> bool:
        """Check if value fits in uint256 without raising."""
        return 0 <= self._value <= UINT256_MAX

    # --- Arithmetic operations ---

    def __add__(self, other: BigNumber | int) -> BigNumber:
        return BigNumber(self._value + _extract_value(other))

    def __radd__(self, other: int) -> BigNumber:
        return BigNumber(other + self._value)

    def __sub__(self, other: BigNumber | int) -> BigNumber:
        return BigNumber(self._value - _extract_value(other))

    def __rsub__(self, other: int) -> BigNumber:
        return BigNumber(other - self._value)

    def __mul__(self, other: BigNumber | int) -> BigNumber:
        return BigNumber(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> BigNumber:
        return BigNumber(other * self._value)

    def __floordiv__(self, other: BigNumber | int) -> BigNumber:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return BigNumber(self._value // other_val)

    def __mod__(self, other: BigNumber | int) -> BigNumber:
        """Modulo operation.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Modulo by zero: {self._value} % 0")
        return BigNumber(self._value % other_val)

    def __neg__(self) -> BigNumber:
        return BigNumber(-self._value)

    def __abs__(self) -> BigNumber:
        return BigNumber(abs(self._value))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigNumber):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigNumber | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: BigNumber | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: BigNumber | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: BigNumber | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def is_zero(self) -> bool:
        return self._value == 0

    def is_negative(self) -> bool:
        return self._value < 0


def _extract_value(x: BigNumber | int) -> int:
    """Extract integer value from BigNumber or int."""
    if isinstance(x, BigNumber):
        return x._value
    return x
