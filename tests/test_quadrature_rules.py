"""Tests for calckit.integration.rules."""

import math

import pytest
from scipy.integrate import quad

from calckit.exceptions import InvalidStrategyError, InvalidSubintervalCountError
from calckit.integration.rules import (
    QUADRATURE_TABLE,
    MethodFamily,
    QuadratureRule,
    resolve_integration,
)

ALL_RULES = sorted(QUADRATURE_TABLE, key=lambda k: (k[0].value, k[1]))


def _legal_counts(rule: QuadratureRule) -> list[int]:
    return [rule.multiple_of * k for k in (1, 2, 5)]


def test_table_entries():
    """Tests the table contains four Newton-Cotes and five Gauss-Legendre rules."""
    nc = sorted(o for f, o in QUADRATURE_TABLE if f is MethodFamily.NEWTON_COTES)
    gl = sorted(o for f, o in QUADRATURE_TABLE if f is MethodFamily.GAUSS_LEGENDRE)
    assert nc == [1, 2, 3, 4]
    assert gl == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "method, order, name, minimum, degree",
    [
        ("newton-cotes", 1, "Trapezoidal", 1, 1),
        ("NewtonCotes", 2, "Simpson13", 2, 3),
        ("nc", 3, "Simpson38", 3, 3),
        ("newton_cotes", 4, "Boole", 4, 5),
        ("gauss-legendre", 1, "GaussLegendre1", 1, 1),
        ("GaussLegendre", 2, "GaussLegendre2", 1, 3),
        ("gl", 3, "GaussLegendre3", 1, 5),
        ("gauss", 4, "GaussLegendre4", 1, 7),
        (MethodFamily.GAUSS_LEGENDRE, 5, "GaussLegendre5", 1, 9),
    ],
)
def test_resolve_integration(method, order, name, minimum, degree):
    """Tests resolution of every supported pair by name or alias."""
    rule = resolve_integration(method, order)
    assert rule.name == name
    assert rule.min_resolution == minimum
    assert rule.degree == degree


@pytest.mark.parametrize(
    "method, order",
    [
        ("newton-cotes", 0),
        ("newton-cotes", 5),
        ("gauss-legendre", 0),
        ("gauss-legendre", 6),
        ("gauss-legendre", True),
        ("romberg", 2),
        (None, 2),
    ],
)
def test_resolve_integration_rejects_unknown(method, order):
    """Tests that unsupported pairs raise InvalidStrategyError."""
    with pytest.raises(InvalidStrategyError) as ei:
        resolve_integration(method, order)
    assert ei.value.order == order


@pytest.mark.parametrize("key", ALL_RULES)
def test_exact_for_polynomials_up_to_degree(key, monomial_degree):
    """Tests exactness for x^d whenever d is within the rule's degree."""
    rule = QUADRATURE_TABLE[key]
    if monomial_degree > rule.degree:
        pytest.skip("degree above rule exactness")
    a, b = -0.5, 1.5
    exact = (b ** (monomial_degree + 1) - a ** (monomial_degree + 1)) / (monomial_degree + 1)
    for n in _legal_counts(rule):
        got = rule.integrate(lambda x: x**monomial_degree, a, b, n)
        assert got == pytest.approx(exact, abs=1e-9)


@pytest.mark.parametrize("key", ALL_RULES)
def test_reversed_limits_negate(key):
    """Tests integrate(f, a, b) == -integrate(f, b, a)."""
    rule = QUADRATURE_TABLE[key]
    n = rule.multiple_of * 3
    forward = rule.integrate(math.exp, 0.2, 1.7, n)
    backward = rule.integrate(math.exp, 1.7, 0.2, n)
    assert forward == -backward


@pytest.mark.parametrize("key", ALL_RULES)
@pytest.mark.parametrize("n", [1, 2, 3, 4, 7, 0, -4])
def test_empty_interval_is_zero_without_evaluation(key, n, counted):
    """Tests a == b gives exactly 0 and never calls the function."""
    f = counted(math.exp)
    assert QUADRATURE_TABLE[key].integrate(f, 0.3, 0.3, n) == 0.0
    assert f.calls == 0


@pytest.mark.parametrize(
    "order, bad_n",
    [
        (1, 0),
        (1, -1),
        (2, 9),
        (2, 1),
        (2, 0),
        (3, 4),
        (3, 2),
        (4, 6),
        (4, 2),
    ],
)
def test_newton_cotes_rejects_illegal_counts(order, bad_n):
    """Tests the divisibility and minimum constraints."""
    rule = resolve_integration("newton-cotes", order)
    with pytest.raises(InvalidSubintervalCountError) as ei:
        rule.integrate(math.sin, 0.0, 1.0, bad_n)
    assert ei.value.n == bad_n
    assert ei.value.rule == rule.name
    assert ei.value.multiple_of == rule.multiple_of


@pytest.mark.parametrize("bad_n", [0, -3])
def test_gauss_legendre_rejects_non_positive_panels(bad_n):
    """Tests that Gauss-Legendre needs at least one panel."""
    rule = resolve_integration("gauss-legendre", 2)
    with pytest.raises(InvalidSubintervalCountError):
        rule.integrate(math.sin, 0.0, 1.0, bad_n)


@pytest.mark.parametrize("bad_n", [2.0, "4", None])
def test_non_integer_count_raises_type_error(bad_n):
    """Tests that n must be an integer."""
    rule = resolve_integration("newton-cotes", 2)
    with pytest.raises(TypeError):
        rule.integrate(math.sin, 0.0, 1.0, bad_n)


@pytest.mark.parametrize("a, b", [(math.nan, 1.0), (0.0, math.inf)])
def test_non_finite_limits_raise(a, b):
    """Tests that limits must be finite."""
    rule = resolve_integration("newton-cotes", 1)
    with pytest.raises(ValueError):
        rule.integrate(math.sin, a, b, 4)


@pytest.mark.parametrize("key", ALL_RULES)
def test_smooth_integrand_against_scipy(key):
    """Tests each rule on a smooth integrand against scipy.integrate.quad."""
    rule = QUADRATURE_TABLE[key]
    f = lambda x: math.exp(-x) * math.cos(3.0 * x)  # noqa: E731
    ref, _ = quad(f, 0.0, 2.0)
    n = rule.multiple_of * 64
    assert rule.integrate(f, 0.0, 2.0, n) == pytest.approx(ref, abs=1e-3)


def test_rules_are_reusable_value_objects():
    """Tests that resolving twice yields the same shared rule."""
    assert resolve_integration("nc", 2) is resolve_integration("newton-cotes", 2)
