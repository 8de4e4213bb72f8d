"""Shared pytest fixtures."""

import pytest

from numeral_api.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Start every test with a clean rate limit window."""
    limiter.reset()
