"""Numeric assertions that ignore operand representation.

Compares native ints, decimal strings, BigNumber objects and Decimals as
exact integers:

    from bn_matchers import BigNumber, expect

    expect(BigNumber(10)).to.equal("10")
    expect(100).to.be.within(Decimal(99), BigNumber(101))
"""

from bn_matchers.bignumber import BigNumber
from bn_matchers.canonical import canonicalize, classify
from bn_matchers.config import DEFAULT_CANONICALIZER_CONFIG, CanonicalizerConfig
from bn_matchers.errors import (
    InvalidBound,
    InvalidNumericLiteral,
    MatcherError,
    MissingApiKey,
    UnsupportedChain,
)
from bn_matchers.evaluator import (
    Predicate,
    close_to,
    equal,
    evaluate,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    within,
)
from bn_matchers.expect import Expectation, NumericAssertionError, expect
from bn_matchers.result import AssertionOutcome
from bn_matchers.types import CanonicalInteger, Encoding, NumericLike, RawNumericValue

__version__ = "0.1.0"
__all__ = [
    # Operands
    "BigNumber",
    "CanonicalInteger",
    "Encoding",
    "NumericLike",
    "RawNumericValue",
    "canonicalize",
    "classify",
    # Config
    "CanonicalizerConfig",
    "DEFAULT_CANONICALIZER_CONFIG",
    # Evaluation
    "AssertionOutcome",
    "Predicate",
    "evaluate",
    "equal",
    "greater_than",
    "less_than",
    "greater_or_equal",
    "less_or_equal",
    "within",
    "close_to",
    # Fluent
    "Expectation",
    "NumericAssertionError",
    "expect",
    # Errors
    "MatcherError",
    "InvalidNumericLiteral",
    "InvalidBound",
    "UnsupportedChain",
    "MissingApiKey",
    "__version__",
]
