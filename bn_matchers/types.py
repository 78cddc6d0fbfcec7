"""Shared type definitions for numeric operands.

A caller value is tagged with its source Encoding (RawNumericValue) and then
reduced to one CanonicalInteger that every predicate compares.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from bn_matchers.bignumber import BigNumber
from bn_matchers.digits import format_decimal

# Any value accepted as an assertion operand
NumericLike = int | float | str | BigNumber | Decimal


class Encoding(str, Enum):
    """Source representation of an operand."""

    NATIVE = "native"
    DECIMAL_STRING = "decimal_string"
    BIG_INTEGER = "big_integer"
    DECIMAL = "decimal"


@dataclass(frozen=True)
class RawNumericValue:
    """An operand as supplied by the caller, tagged with its encoding.

    Attributes:
        encoding: Which supported representation `value` uses
        value: The untouched caller value
    """

    encoding: Encoding
    value: NumericLike


@dataclass(frozen=True, order=True)
class CanonicalInteger:
    """Arbitrary-precision signed integer every operand is reduced to.

    Ordering and equality compare the integer value; subtraction and abs()
    stay in exact integer arithmetic.

    Attributes:
        value: The integer value
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"CanonicalInteger requires int, got {type(self.value).__name__}")

    def __sub__(self, other: CanonicalInteger) -> CanonicalInteger:
        if not isinstance(other, CanonicalInteger):
            return NotImplemented
        return CanonicalInteger(self.value - other.value)

    def __abs__(self) -> CanonicalInteger:
        return CanonicalInteger(abs(self.value))

    def __neg__(self) -> CanonicalInteger:
        return CanonicalInteger(-self.value)

    def __str__(self) -> str:
        return self.to_decimal_string()

    def to_decimal_string(self) -> str:
        """Minimal decimal rendering: '-?[0-9]+', no leading zeros, never '-0'."""
        return format_decimal(self.value)

    @property
    def is_negative(self) -> bool:
        return self.value < 0
