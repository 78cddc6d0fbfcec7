"""Operand canonicalization.

Every operand, whatever library produced it, is tagged with its Encoding and
reduced to a CanonicalInteger without passing through a lossy intermediate:

- native int: used as-is; float: accepted only when finite and integral
- decimal string: optional leading '-' followed by ASCII digits
- BigNumber: already exact
- Decimal: accepted only when finite with no non-zero fractional digit

Usage:
    from bn_matchers.canonical import canonicalize

    canonicalize("-42")                 # CanonicalInteger(value=-42)
    canonicalize(Decimal("1.00E+3"))    # CanonicalInteger(value=1000)
    canonicalize(10.5)                  # raises InvalidNumericLiteral
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import NoReturn

import structlog

from bn_matchers.bignumber import BigNumber
from bn_matchers.config import DEFAULT_CANONICALIZER_CONFIG, CanonicalizerConfig
from bn_matchers.digits import decimal_to_int, parse_decimal
from bn_matchers.errors import InvalidNumericLiteral
from bn_matchers.types import CanonicalInteger, Encoding, NumericLike, RawNumericValue

logger = structlog.get_logger()

# [0-9] rather than \d: \d also matches non-ASCII digits
_DECIMAL_STRING_RE = re.compile(r"-?[0-9]+")


def classify(value: NumericLike | RawNumericValue) -> RawNumericValue:
    """Tag a caller value with its source encoding.

    Args:
        value: Operand in any supported encoding, or an already tagged value

    Returns:
        The tagged value

    Raises:
        InvalidNumericLiteral: If the type is not a supported encoding
    """
    if isinstance(value, RawNumericValue):
        return value
    # bool is an int subclass but never a meaningful operand
    if isinstance(value, bool):
        _reject(value, "booleans are not numeric operands")
    if isinstance(value, (int, float)):
        return RawNumericValue(Encoding.NATIVE, value)
    if isinstance(value, str):
        return RawNumericValue(Encoding.DECIMAL_STRING, value)
    if isinstance(value, BigNumber):
        return RawNumericValue(Encoding.BIG_INTEGER, value)
    if isinstance(value, Decimal):
        return RawNumericValue(Encoding.DECIMAL, value)
    _reject(value, f"unsupported operand type {type(value).__name__}")


def canonicalize(
    value: NumericLike | RawNumericValue,
    config: CanonicalizerConfig | None = None,
) -> CanonicalInteger:
    """Convert an operand to its canonical integer.

    Args:
        value: Operand in any supported encoding, tagged or not
        config: Canonicalization flags. Uses DEFAULT_CANONICALIZER_CONFIG if
            not provided.

    Returns:
        CanonicalInteger with the exact integer value

    Raises:
        InvalidNumericLiteral: If the operand does not denote an exact integer
    """
    config = config or DEFAULT_CANONICALIZER_CONFIG
    raw = classify(value)

    if raw.encoding is Encoding.NATIVE:
        return CanonicalInteger(_native_to_int(raw.value, config))
    if raw.encoding is Encoding.DECIMAL_STRING:
        return CanonicalInteger(_decimal_string_to_int(raw.value))
    if raw.encoding is Encoding.BIG_INTEGER:
        return CanonicalInteger(_big_integer_to_int(raw.value))
    if raw.encoding is Encoding.DECIMAL:
        return CanonicalInteger(_decimal_to_int(raw.value))
    _reject(raw.value, f"unknown encoding {raw.encoding!r}")


def _native_to_int(value: int | float, config: CanonicalizerConfig) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, float):
        _reject(value, "native value is neither int nor float")
    if not config.allow_integral_floats:
        _reject(value, "floats are disabled")
    if not math.isfinite(value):
        _reject(value, "not a finite number")
    if not value.is_integer():
        _reject(value, "has a fractional part")
    # Exact: every integral float is an integer of at most 1024 bits
    return int(value)


def _decimal_string_to_int(value: str) -> int:
    if not isinstance(value, str):
        _reject(value, "decimal-string encoding requires str")
    if not _DECIMAL_STRING_RE.fullmatch(value):
        _reject(value, "expected an optional '-' followed by decimal digits")
    return parse_decimal(value)


def _big_integer_to_int(value: BigNumber) -> int:
    if not isinstance(value, BigNumber):
        _reject(value, "big-integer encoding requires BigNumber")
    return value.value


def _decimal_to_int(value: Decimal) -> int:
    if not isinstance(value, Decimal):
        _reject(value, "decimal encoding requires Decimal")
    if not value.is_finite():
        _reject(value, "not a finite number")
    _, digits, exponent = value.as_tuple()
    if exponent < 0 and any(digits[exponent:]):
        _reject(value, "has a non-zero fractional part")
    return decimal_to_int(value)


def _reject(value: object, reason: str) -> NoReturn:
    logger.debug("numeric_literal_rejected", value=repr(value), reason=reason)
    raise InvalidNumericLiteral(f"Invalid numeric literal {value!r}: {reason}")
