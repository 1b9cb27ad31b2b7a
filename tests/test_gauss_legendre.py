"""Tests for calckit.integration.gauss_legendre."""

import math

import numpy as np
import pytest
from numpy.polynomial.legendre import leggauss

from calckit.integration.gauss_legendre import (
    GAUSS_LEGENDRE_TABLE,
    composite_gauss_legendre,
)


@pytest.mark.parametrize("points", [1, 2, 3, 4, 5])
def test_table_matches_numpy_leggauss(points):
    """Tests nodes and weights against numpy's Gauss-Legendre routine."""
    nodes, weights = GAUSS_LEGENDRE_TABLE[points]
    ref_nodes, ref_weights = leggauss(points)
    np.testing.assert_allclose(nodes, ref_nodes, atol=1e-14)
    np.testing.assert_allclose(weights, ref_weights, atol=1e-14)


def test_closed_form_constants():
    """Tests a few closed-form entries directly."""
    nodes, weights = GAUSS_LEGENDRE_TABLE[2]
    assert nodes[1] == pytest.approx(1.0 / math.sqrt(3.0))
    nodes, weights = GAUSS_LEGENDRE_TABLE[3]
    assert weights[1] == pytest.approx(8.0 / 9.0)
    nodes, weights = GAUSS_LEGENDRE_TABLE[4]
    assert weights[1] == pytest.approx((18.0 + math.sqrt(30.0)) / 36.0)
    assert weights[0] == pytest.approx((18.0 - math.sqrt(30.0)) / 36.0)


@pytest.mark.parametrize("points", [1, 2, 3, 4, 5])
def test_weights_sum_to_two(points):
    """Tests that the weights integrate 1 over [-1, 1]."""
    assert GAUSS_LEGENDRE_TABLE[points][1].sum() == pytest.approx(2.0, abs=1e-14)


def test_tables_are_read_only():
    """Tests that node arrays cannot be modified in place."""
    nodes, _ = GAUSS_LEGENDRE_TABLE[3]
    with pytest.raises(ValueError):
        nodes[0] = 0.0
    with pytest.raises(TypeError):
        GAUSS_LEGENDRE_TABLE[6] = (nodes, nodes)


def test_two_point_rule_is_exact_for_odd_cubic():
    """Tests 2-point Gauss-Legendre integrates x^3 on [-1, 1] to zero."""
    got = composite_gauss_legendre(lambda x: x**3, -1.0, 1.0, 1, 2)
    assert got == pytest.approx(0.0, abs=1e-12)


def test_one_point_rule_is_midpoint():
    """Tests the 1-point rule is the midpoint rule."""
    got = composite_gauss_legendre(math.exp, 0.0, 2.0, 1, 1)
    assert got == pytest.approx(2.0 * math.exp(1.0))


def test_panels_split_the_interval(counted):
    """Tests n panels of a k-point rule use n*k evaluations."""
    f = counted(math.sin)
    got = composite_gauss_legendre(f, 0.0, math.pi, 8, 3)
    assert f.calls == 24
    assert got == pytest.approx(2.0, abs=1e-7)
