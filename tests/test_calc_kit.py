"""Tests for the CalcKit front end."""

import math

import pytest

from calckit import CalcKit, available_methods, supported_strategies
from calckit.config import AdaptiveConfig
from calckit.exceptions import ConvergenceError, ZeroStepSizeError


def test_differentiate_defaults_to_central_second_order():
    """Tests the default derivative is central O(h^2)."""
    calc = CalcKit(lambda x: x**2)
    assert calc.differentiate(2.0) == pytest.approx(4.0, abs=1e-10)


def test_differentiate_higher_orders():
    """Tests second and third derivatives of exp."""
    calc = CalcKit(math.exp)
    d2 = calc.differentiate(0.0, order=2, stepsize=1e-2, error_order=4)
    d3 = calc.differentiate(0.0, order=3, stepsize=1e-2, error_order=4)
    assert d2 == pytest.approx(1.0, abs=1e-6)
    assert d3 == pytest.approx(1.0, abs=1e-4)


def test_differentiate_with_error_estimate():
    """Tests the (value, error) pair."""
    value, err = CalcKit(math.sin).differentiate(0.3, philosophy="forward", error_order=1, estimate_error=True)
    assert value == pytest.approx(math.cos(0.3), abs=1e-2)
    assert 0 < err < 1e-2


def test_zero_stepsize():
    """Tests h=0 raises ZeroStepSizeError."""
    with pytest.raises(ZeroStepSizeError):
        CalcKit(math.sin).differentiate(0.0, stepsize=0.0)


def test_integrate_fixed_and_adaptive():
    """Tests both integration modes through the front end."""
    calc = CalcKit(math.sin)
    fixed = calc.integrate(0.0, math.pi, method="gauss-legendre", order=5, n=2)
    adaptive = calc.integrate(0.0, math.pi, method="newton-cotes", order=4, tol=1e-12)
    assert fixed == pytest.approx(2.0, abs=1e-8)
    assert adaptive == pytest.approx(2.0, abs=1e-10)


def test_config_reaches_adaptive_controller():
    """Tests the kit passes its config to adaptive integration."""
    calc = CalcKit(math.exp, config=AdaptiveConfig(max_refinements=1))
    with pytest.raises(ConvergenceError) as ei:
        calc.integrate(0.0, 1.0, order=1, tol=0.0)
    assert ei.value.refinements == 1
    assert ei.value.resolution == 2


def test_available_methods():
    """Tests canonical names are listed and sorted."""
    assert available_methods() == {
        "differentiation": ["backward", "central", "forward"],
        "integration": ["gauss-legendre", "newton-cotes"],
    }


def test_supported_strategies():
    """Tests the orders available per name."""
    assert supported_strategies() == {
        "forward": [1, 2, 3],
        "backward": [1, 2, 3],
        "central": [2, 4],
        "newton-cotes": [1, 2, 3, 4],
        "gauss-legendre": [1, 2, 3, 4, 5],
    }


def test_requires_callable():
    """Tests the function must be callable."""
    with pytest.raises(TypeError):
        CalcKit(42)
