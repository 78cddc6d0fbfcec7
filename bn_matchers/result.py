"""Assertion outcome type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import cached_property


@dataclass(frozen=True)
class AssertionOutcome:
    """Result of evaluating one numeric assertion.

    The failure message is rendered only when first read, so the passing path
    never pays for formatting operands.

    Attributes:
        passed: True if the assertion holds once negation is applied.
        render_message: Zero-argument callable producing the message.

    Examples:
        outcome = equal(10, 11)
        assert not outcome.passed
        assert outcome.message == 'Expected "10" to be equal 11'
    """

    passed: bool
    render_message: Callable[[], str] = field(repr=False, compare=False)

    @cached_property
    def message(self) -> str:
        """The human-readable failure message, computed on first access."""
        return self.render_message()

    @property
    def failed(self) -> bool:
        return not self.passed
