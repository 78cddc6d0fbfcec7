"""Pytest configuration and fixtures."""

from collections.abc import Callable

import pytest

from bn_matchers import NumericLike
from tests.helpers import ENCODERS


@pytest.fixture(params=list(ENCODERS))
def encoder(request: pytest.FixtureRequest) -> Callable[[int], NumericLike]:
    """Each operand encoder in turn."""
    return ENCODERS[request.param]


@pytest.fixture(autouse=True)
def _reset_etherscan_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ETHERSCAN_API_KEY out of the tests."""
    monkeypatch.delenv("ETHERSCAN_API_KEY", raising=False)
