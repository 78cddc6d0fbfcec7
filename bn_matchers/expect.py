"""Fluent assertions for numeric operands.

A thin host layer over the evaluator that reads like a chai-style sentence
and raises AssertionError subclasses, so pytest reports failures as ordinary
test failures:

    from bn_matchers import expect

    expect(BigNumber(10)).to.equal("10")
    expect(balance).to.be.above(0)
    expect(100).not_.to.be.within(101, 102)
    expect(Decimal(100)).to.be.close_to(101, 10)
"""

from __future__ import annotations

from bn_matchers.config import CanonicalizerConfig
from bn_matchers.evaluator import Predicate, evaluate
from bn_matchers.result import AssertionOutcome
from bn_matchers.types import NumericLike


class NumericAssertionError(AssertionError):
    """A numeric assertion that does not hold.

    Attributes:
        outcome: The failed outcome; str(error) is its message.
    """

    def __init__(self, outcome: AssertionOutcome) -> None:
        super().__init__(outcome.message)
        self.outcome = outcome


class Expectation:
    """An actual value plus the negation flag collected along the chain.

    Chain words (to, be, been, is_, that, at, have) are no-ops kept for
    readability. not_ returns a negated copy; like chai's `not` it sets the
    flag rather than toggling it.
    """

    __slots__ = ("_actual", "_negate", "_config")

    def __init__(
        self,
        actual: NumericLike,
        negate: bool = False,
        config: CanonicalizerConfig | None = None,
    ) -> None:
        self._actual = actual
        self._negate = negate
        self._config = config

    def __repr__(self) -> str:
        prefix = "not " if self._negate else ""
        return f"Expectation({prefix}{self._actual!r})"

    # --- Chain words ---

    @property
    def to(self) -> Expectation:
        return self

    @property
    def be(self) -> Expectation:
        return self

    @property
    def been(self) -> Expectation:
        return self

    @property
    def is_(self) -> Expectation:
        return self

    @property
    def that(self) -> Expectation:
        return self

    @property
    def at(self) -> Expectation:
        return self

    @property
    def have(self) -> Expectation:
        return self

    @property
    def not_(self) -> Expectation:
        return Expectation(self._actual, negate=True, config=self._config)

    @property
    def negated(self) -> bool:
        return self._negate

    # --- Matchers ---

    def equal(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.EQUAL, expected, label="equal")

    eq = equal
    equals = equal

    def above(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.GREATER_THAN, expected, label="above")

    def gt(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.GREATER_THAN, expected, label="greater than")

    def below(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.LESS_THAN, expected, label="below")

    def lt(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.LESS_THAN, expected, label="less than")

    def least(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.GREATER_OR_EQUAL, expected, label="at least")

    def gte(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.GREATER_OR_EQUAL, expected, label="greater than or equal")

    def most(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.LESS_OR_EQUAL, expected, label="at most")

    def lte(self, expected: NumericLike) -> Expectation:
        return self._check(Predicate.LESS_OR_EQUAL, expected, label="less than or equal")

    def within(self, lower: NumericLike, upper: NumericLike) -> Expectation:
        return self._check(Predicate.WITHIN, lower, upper)

    def close_to(self, center: NumericLike, delta: NumericLike) -> Expectation:
        return self._check(Predicate.CLOSE_TO, center, delta)

    def _check(
        self, predicate: Predicate, *operands: NumericLike, label: str | None = None
    ) -> Expectation:
        outcome = evaluate(
            predicate,
            self._actual,
            *operands,
            negate=self._negate,
            label=label,
            config=self._config,
        )
        if outcome.failed:
            raise NumericAssertionError(outcome)
        return self


def expect(actual: NumericLike, config: CanonicalizerConfig | None = None) -> Expectation:
    """Start an assertion chain on `actual`."""
    return Expectation(actual, config=config)
