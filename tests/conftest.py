"""Pytest configuration file with shared integrand fixtures."""

import pytest

__all__ = ["counted"]


class CountingFunction:
    """Wraps a real function and counts how often it is evaluated."""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.func(x)


@pytest.fixture
def counted():
    """Return a factory that wraps a function in a call counter."""
    return CountingFunction


@pytest.fixture(params=[0, 1, 2, 3, 4, 5])
def monomial_degree(request):
    """Degrees 0 through 5 for exactness checks."""
    return request.param
