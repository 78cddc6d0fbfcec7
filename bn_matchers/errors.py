"""Matcher error classes.

These are caller-contract violations: they are raised immediately and are
never reported as an ordinary assertion failure.
"""


class MatcherError(Exception):
    """Base error for numeric matcher operations."""

    pass


class InvalidNumericLiteral(MatcherError, ValueError):
    """Value cannot be read as an exact integer in any supported encoding."""

    pass


class InvalidBound(MatcherError, ValueError):
    """Range bounds out of order, or a negative closeness delta."""

    pass


class UnsupportedChain(MatcherError, LookupError):
    """Chain name or chain id is not in the explorer configuration."""

    pass


class MissingApiKey(MatcherError, LookupError):
    """No explorer API key configured for the requested chain."""

    pass
