"""
Shared test fixtures and pytest configuration.
"""

import pytest

from exact_pricing.option import OptionParameters


@pytest.fixture
def hull_call():
    """Hull's textbook call: S=60, K=65, T=3m, r=8%, vol=30%."""
    return OptionParameters(60.0, 65.0, 0.25, 0.08, 0.30, "call", "stock")


@pytest.fixture
def hull_put(hull_call):
    return hull_call.flipped()


@pytest.fixture
def futures_call():
    """Black-76 call on a futures contract."""
    return OptionParameters(105.0, 100.0, 0.5, 0.10, 0.36, "call", "futures")
