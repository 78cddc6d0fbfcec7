"""Decimal digit conversions for integers of any size.

int(str) and str(int) refuse inputs beyond the interpreter's int/str digit
limit and are quadratic below it. These helpers split the work recursively so
that every conversion rides on fast big-number multiplication:

- parse: halves of the digit string are joined as hi * 10**k + lo
- render: halves of the binary value are joined in Decimal arithmetic at
  maximum precision, where multiplication is sub-quadratic, then printed

Usage:
    from bn_matchers.digits import format_decimal, parse_decimal

    parse_decimal("-" + "9" * 5000)
    format_decimal(10**100_000)
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from functools import lru_cache

# Direct int()/str() is used below these sizes
_DIRECT_DIGITS = 1000
_DIRECT_BITS = 3000

# Exact context: no rounding for any value that fits in memory
_EXACT_CONTEXT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.Inexact, decimal.InvalidOperation],
)


def parse_decimal(s: str) -> int:
    """Parse a validated '-?[0-9]+' string.

    Args:
        s: Optional '-' followed by ASCII digits

    Returns:
        The integer value
    """
    if s.startswith("-"):
        return -_parse_digits(s[1:])
    return _parse_digits(s)


def format_decimal(n: int) -> str:
    """Minimal decimal rendering: '-?[0-9]+', no leading zeros, never '-0'."""
    if n < 0:
        return "-" + format_decimal(-n)
    if n.bit_length() <= _DIRECT_BITS:
        return str(n)
    with decimal.localcontext(_EXACT_CONTEXT):
        # Exponent stays 0, so str() prints plain digits
        return str(_int_to_decimal(n, n.bit_length()))


def decimal_to_int(value: Decimal) -> int:
    """Exact integer part of a finite Decimal, built from its digit tuple.

    Fractional digits are dropped; callers check they are zero.
    """
    sign, digits, exponent = value.as_tuple()
    if exponent < 0:
        digits = digits[:exponent]
        exponent = 0
    coefficient = _parse_digits("".join(map(str, digits)) or "0")
    magnitude = coefficient * 10**exponent
    return -magnitude if sign else magnitude


def _parse_digits(s: str) -> int:
    if len(s) <= _DIRECT_DIGITS:
        return int(s, 10)
    low = len(s) // 2
    split = len(s) - low
    return _parse_digits(s[:split]) * _pow10(low) + _parse_digits(s[split:])


def _int_to_decimal(n: int, width: int) -> Decimal:
    # n < 2**width; must run inside _EXACT_CONTEXT
    if width <= _DIRECT_BITS:
        return Decimal(n)
    low = width >> 1
    hi = n >> low
    lo = n - (hi << low)
    return _int_to_decimal(hi, width - low) * _pow2_decimal(low) + _int_to_decimal(lo, low)


@lru_cache(maxsize=64)
def _pow10(k: int) -> int:
    return 10**k


@lru_cache(maxsize=64)
def _pow2_decimal(k: int) -> Decimal:
    with decimal.localcontext(_EXACT_CONTEXT):
        return Decimal(2) ** k
