"""Tests for the QuadratureIntegral facade."""

import math

import pytest

from calckit.config import AdaptiveConfig
from calckit.exceptions import (
    ConvergenceError,
    InvalidStrategyError,
    InvalidSubintervalCountError,
)
from calckit.integration.adaptive import AdaptiveResult
from calckit.integration.quadrature import QuadratureIntegral, calculate_integral
from calckit.integration.rules import resolve_integration


def test_fixed_resolution_simpson():
    """Tests Simpson 1/3 with n=10 on x^2 over [0, 1]."""
    q = QuadratureIntegral(lambda x: x**2)
    got = q.integrate(0.0, 1.0, method="newton-cotes", order=2, n=10)
    assert got == pytest.approx(1.0 / 3.0, abs=1e-9)


def test_adaptive_mode_is_selected_by_tol():
    """Tests that passing tol runs the adaptive controller."""
    q = QuadratureIntegral(math.exp)
    info = q.integrate(0.0, 1.0, method="nc", order=1, tol=1e-6, return_info=True)
    assert isinstance(info, AdaptiveResult)
    assert info.refinements > 0
    assert info.value == pytest.approx(math.e - 1.0, rel=1e-5)


def test_fixed_mode_info():
    """Tests the record returned in fixed mode."""
    q = QuadratureIntegral(math.exp)
    info = q.integrate(0.0, 1.0, method="gl", order=3, n=4, return_info=True)
    assert info.resolution == 4
    assert info.refinements == 0
    assert info.previous == info.value


def test_default_resolution_is_rule_minimum(counted):
    """Tests that omitting n and tol evaluates once at the minimum resolution."""
    f = counted(math.exp)
    info = QuadratureIntegral(f).integrate(0.0, 1.0, method="newton-cotes", order=4, return_info=True)
    assert info.resolution == 4
    assert f.calls == 5


def test_both_n_and_tol_is_rejected():
    """Tests the two modes are mutually exclusive."""
    q = QuadratureIntegral(math.exp)
    with pytest.raises(ValueError, match="either n"):
        q.integrate(0.0, 1.0, n=4, tol=1e-6)


def test_odd_n_for_simpson_raises():
    """Tests Simpson 1/3 with n=9 raises InvalidSubintervalCountError."""
    q = QuadratureIntegral(math.exp)
    with pytest.raises(InvalidSubintervalCountError):
        q.integrate(0.0, 1.0, method="newton-cotes", order=2, n=9)


def test_unknown_rule_raises():
    """Tests that unsupported pairs fail before any evaluation."""
    q = QuadratureIntegral(math.exp)
    with pytest.raises(InvalidStrategyError):
        q.integrate(0.0, 1.0, method="gauss-legendre", order=7, n=1)


def test_config_is_forwarded():
    """Tests the facade passes its config to the controller."""
    q = QuadratureIntegral(math.exp, config=AdaptiveConfig(max_refinements=2))
    with pytest.raises(ConvergenceError) as ei:
        q.integrate(0.0, 1.0, tol=0.0)
    assert ei.value.refinements == 2


def test_calculate_integral_with_resolved_rule():
    """Tests the module-level helper in both modes."""
    rule = resolve_integration("gauss-legendre", 4)
    fixed = calculate_integral(rule, math.cos, 0.0, 1.0, n=1)
    adaptive = calculate_integral(rule, math.cos, 0.0, 1.0, tol=1e-12)
    assert fixed.value == pytest.approx(math.sin(1.0), abs=1e-7)
    assert adaptive.value == pytest.approx(math.sin(1.0), abs=1e-12)


def test_requires_callable():
    """Tests the integrand must be callable."""
    with pytest.raises(TypeError):
        QuadratureIntegral("x**2")
