"""Gauss-Legendre node and weight tables.

Nodes and weights on ``[-1, 1]`` are written in closed form for 1 to 5
points. A ``k``-point rule integrates polynomials of degree ``2k - 1``
exactly. The rule is applied on ``n`` equal panels of ``[a, b]``; ``n = 1``
is the plain fixed-point rule.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from types import MappingProxyType

import numpy as np
from numpy.typing import NDArray

from calckit.utils.batch_eval import eval_points

__all__ = [
    "GAUSS_LEGENDRE_TABLE",
    "composite_gauss_legendre",
]


def _frozen(values: list[float]) -> NDArray[np.float64]:
    arr = np.asarray(values, dtype=float)
    arr.setflags(write=False)
    return arr


def _build_table() -> dict[int, tuple[NDArray[np.float64], NDArray[np.float64]]]:
    s3 = 1.0 / math.sqrt(3.0)
    s35 = math.sqrt(3.0 / 5.0)

    r65 = 2.0 * math.sqrt(6.0 / 5.0)
    x4_inner = math.sqrt((3.0 - r65) / 7.0)
    x4_outer = math.sqrt((3.0 + r65) / 7.0)
    w4_inner = (18.0 + math.sqrt(30.0)) / 36.0
    w4_outer = (18.0 - math.sqrt(30.0)) / 36.0

    r107 = 2.0 * math.sqrt(10.0 / 7.0)
    x5_inner = math.sqrt(5.0 - r107) / 3.0
    x5_outer = math.sqrt(5.0 + r107) / 3.0
    w5_inner = (322.0 + 13.0 * math.sqrt(70.0)) / 900.0
    w5_outer = (322.0 - 13.0 * math.sqrt(70.0)) / 900.0

    table = {
        1: ([0.0], [2.0]),
        2: ([-s3, s3], [1.0, 1.0]),
        3: ([-s35, 0.0, s35], [5.0 / 9.0, 8.0 / 9.0, 5.0 / 9.0]),
        4: (
            [-x4_outer, -x4_inner, x4_inner, x4_outer],
            [w4_outer, w4_inner, w4_inner, w4_outer],
        ),
        5: (
            [-x5_outer, -x5_inner, 0.0, x5_inner, x5_outer],
            [w5_outer, w5_inner, 128.0 / 225.0, w5_inner, w5_outer],
        ),
    }
    return {k: (_frozen(x), _frozen(w)) for k, (x, w) in table.items()}


#: Immutable table ``points -> (nodes, weights)`` on ``[-1, 1]``, nodes ascending.
GAUSS_LEGENDRE_TABLE = MappingProxyType(_build_table())


def composite_gauss_legendre(
    function: Callable[[float], float],
    a: float,
    b: float,
    n: int,
    points: int,
) -> float:
    """Integrates ``function`` over ``[a, b]`` with ``n`` Gauss-Legendre panels.

    On each panel ``[a_i, b_i]`` the nodes are mapped by
    ``t = (b_i - a_i)/2 * x + (a_i + b_i)/2`` and the weighted sum is scaled
    by ``(b_i - a_i)/2``. Limits and ``n`` are assumed already validated.

    Args:
        function: Integrand.
        a: Lower limit.
        b: Upper limit.
        n: Number of panels.
        points: Nodes per panel; a key of :data:`GAUSS_LEGENDRE_TABLE`.

    Returns:
        The composite estimate.
    """
    nodes, weights = GAUSS_LEGENDRE_TABLE[points]
    edges = np.linspace(a, b, n + 1)
    half = 0.5 * np.diff(edges)
    mid = 0.5 * (edges[:-1] + edges[1:])

    # shape (n, points): one row of mapped nodes per panel
    ts = mid[:, None] + half[:, None] * nodes[None, :]
    values = eval_points(function, ts.ravel()).reshape(ts.shape)
    return float(np.dot(half, values @ weights))
