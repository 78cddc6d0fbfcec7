"""Predicate evaluation over canonical integers.

The evaluator takes raw operands in any supported encoding, canonicalizes
them, applies one predicate and returns an AssertionOutcome. Negation is an
explicit flag; the host assertion layer decides what to do with a failed
outcome.

Messages are rendered from canonical operands only, so the same comparison
produces the same text whichever encodings were used:

    equal(BigNumber(10), 11).message        # 'Expected "10" to be equal 11'
    within(100, "80", Decimal(90)).message  # 'expected 100 to be within 80..90'
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from enum import Enum

import structlog

from bn_matchers.canonical import canonicalize
from bn_matchers.config import CanonicalizerConfig
from bn_matchers.errors import InvalidBound
from bn_matchers.result import AssertionOutcome
from bn_matchers.types import CanonicalInteger, NumericLike

logger = structlog.get_logger()


class Predicate(str, Enum):
    """Closed set of comparison kinds."""

    EQUAL = "equal"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS_OR_EQUAL = "less_or_equal"
    WITHIN = "within"
    CLOSE_TO = "close_to"

    @property
    def arity(self) -> int:
        """Number of operands including the actual value."""
        if self in (Predicate.WITHIN, Predicate.CLOSE_TO):
            return 3
        return 2


_BINARY_COMPARATORS: dict[Predicate, Callable[[CanonicalInteger, CanonicalInteger], bool]] = {
    Predicate.EQUAL: operator.eq,
    Predicate.GREATER_THAN: operator.gt,
    Predicate.LESS_THAN: operator.lt,
    Predicate.GREATER_OR_EQUAL: operator.ge,
    Predicate.LESS_OR_EQUAL: operator.le,
}

# Wording used in messages when the caller does not pass a label
DEFAULT_LABELS: dict[Predicate, str] = {
    Predicate.EQUAL: "equal",
    Predicate.GREATER_THAN: "above",
    Predicate.LESS_THAN: "below",
    Predicate.GREATER_OR_EQUAL: "at least",
    Predicate.LESS_OR_EQUAL: "at most",
}


def evaluate(
    predicate: Predicate,
    actual: NumericLike,
    *operands: NumericLike,
    negate: bool = False,
    label: str | None = None,
    config: CanonicalizerConfig | None = None,
) -> AssertionOutcome:
    """Evaluate a predicate over raw operands.

    Args:
        predicate: Which comparison to apply
        actual: The value under test
        *operands: One operand for binary predicates, two for WITHIN
            (lower, upper) and CLOSE_TO (center, delta)
        negate: Invert the outcome and switch the message to its negated form
        label: Readable name for ordering predicates (e.g. "greater than");
            defaults to DEFAULT_LABELS. Ignored by EQUAL, WITHIN and CLOSE_TO.
        config: Canonicalization flags

    Returns:
        AssertionOutcome with passed = raw result XOR negate

    Raises:
        TypeError: If the operand count does not match the predicate arity
        InvalidNumericLiteral: If any operand is not an exact integer
        InvalidBound: If WITHIN bounds are reversed or CLOSE_TO delta is negative
    """
    if len(operands) != predicate.arity - 1:
        raise TypeError(
            f"{predicate.value} takes {predicate.arity - 1} operand(s) "
            f"besides the actual value, got {len(operands)}"
        )

    a = canonicalize(actual, config)
    rest = [canonicalize(op, config) for op in operands]

    if predicate is Predicate.WITHIN:
        lower, upper = rest
        raw = _within(a, lower, upper)
        render = _within_message(a, lower, upper, negate)
    elif predicate is Predicate.CLOSE_TO:
        center, delta = rest
        raw = _close_to(a, center, delta)
        render = _close_to_message(a, center, delta, negate)
    else:
        (expected,) = rest
        raw = _BINARY_COMPARATORS[predicate](a, expected)
        if predicate is Predicate.EQUAL or label is None:
            label = DEFAULT_LABELS[predicate]
        render = _comparison_message(a, expected, label, negate)

    return AssertionOutcome(passed=raw != negate, render_message=render)


def _within(a: CanonicalInteger, lower: CanonicalInteger, upper: CanonicalInteger) -> bool:
    if lower > upper:
        logger.debug("invalid_range_bounds", lower=str(lower), upper=str(upper))
        raise InvalidBound(f"Lower bound {lower} is greater than upper bound {upper}")
    return lower <= a <= upper


def _close_to(a: CanonicalInteger, center: CanonicalInteger, delta: CanonicalInteger) -> bool:
    if delta.is_negative:
        logger.debug("invalid_close_to_delta", delta=str(delta))
        raise InvalidBound(f"Delta must not be negative: {delta}")
    return abs(a - center) <= delta


# --- Message rendering (deferred until an outcome's message is read) ---


def _comparison_message(
    a: CanonicalInteger, expected: CanonicalInteger, label: str, negate: bool
) -> Callable[[], str]:
    modifier = "NOT " if negate else ""
    return lambda: f'Expected "{a}" {modifier}to be {label} {expected}'


def _within_message(
    a: CanonicalInteger, lower: CanonicalInteger, upper: CanonicalInteger, negate: bool
) -> Callable[[], str]:
    modifier = "not " if negate else ""
    return lambda: f"expected {a} to {modifier}be within {lower}..{upper}"


def _close_to_message(
    a: CanonicalInteger, center: CanonicalInteger, delta: CanonicalInteger, negate: bool
) -> Callable[[], str]:
    if negate:
        return lambda: f"expected {a} not to be close to {center}"
    return lambda: f"expected {a} to be close to {center} +/- {delta}"


# --- Per-family entry points ---


def equal(actual: NumericLike, expected: NumericLike, *, negate: bool = False) -> AssertionOutcome:
    return evaluate(Predicate.EQUAL, actual, expected, negate=negate)


def greater_than(
    actual: NumericLike, expected: NumericLike, *, negate: bool = False
) -> AssertionOutcome:
    return evaluate(Predicate.GREATER_THAN, actual, expected, negate=negate)


def less_than(actual: NumericLike, expected: NumericLike, *, negate: bool = False) -> AssertionOutcome:
    return evaluate(Predicate.LESS_THAN, actual, expected, negate=negate)


def greater_or_equal(
    actual: NumericLike, expected: NumericLike, *, negate: bool = False
) -> AssertionOutcome:
    return evaluate(Predicate.GREATER_OR_EQUAL, actual, expected, negate=negate)


def less_or_equal(
    actual: NumericLike, expected: NumericLike, *, negate: bool = False
) -> AssertionOutcome:
    return evaluate(Predicate.LESS_OR_EQUAL, actual, expected, negate=negate)


def within(
    actual: NumericLike, lower: NumericLike, upper: NumericLike, *, negate: bool = False
) -> AssertionOutcome:
    """Inclusive range check: lower <= actual <= upper."""
    return evaluate(Predicate.WITHIN, actual, lower, upper, negate=negate)


def close_to(
    actual: NumericLike, center: NumericLike, delta: NumericLike, *, negate: bool = False
) -> AssertionOutcome:
    """Absolute closeness check: |actual - center| <= delta, in exact integers."""
    return evaluate(Predicate.CLOSE_TO, actual, center, delta, negate=negate)
