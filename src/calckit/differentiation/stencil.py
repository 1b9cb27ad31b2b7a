"""Stencil definitions for forward, backward and central finite differences.

Every formula is stored as data: integer offsets ``k_i``, integer
coefficients ``c_i`` and a denominator ``d``, so that the ``m``-th
derivative is approximated by

.. math::

    f^{(m)}(x) \\approx \\frac{1}{d\\,h^m} \\sum_i c_i f(x + k_i h).

The table is keyed by ``(philosophy, error_order)`` and maps each derivative
order (1, 2, 3) to its stencil. The ``error_order`` names the accuracy of
the first-derivative stencil; higher derivatives of the same entry may be
less accurate (see :func:`truncation_order`).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

import numpy as np

from calckit.utils.batch_eval import eval_points
from calckit.utils.naming import lookup_name, normalize_name

__all__ = [
    "Philosophy",
    "Stencil",
    "STENCIL_TABLE",
    "DERIVATIVE_ORDERS",
    "supported_error_orders",
    "truncation_order",
]


#: Derivative orders every table entry provides.
DERIVATIVE_ORDERS = (1, 2, 3)


class Philosophy(Enum):
    """Which side of the evaluation point a stencil samples."""

    FORWARD = "forward"
    BACKWARD = "backward"
    CENTRAL = "central"

    @classmethod
    def coerce(cls, value: Philosophy | str) -> Philosophy:
        """Returns the member named by ``value``.

        Strings are matched case, spacing and punctuation insensitively,
        and the short aliases ``fwd``, ``bwd`` and ``ctr`` are accepted.

        Raises:
            ValueError: If ``value`` names no philosophy.
        """
        if isinstance(value, cls):
            return value
        return lookup_name(value, _PHILOSOPHY_NAMES, "philosophy")


_PHILOSOPHY_NAMES = {
    **{normalize_name(p.value): p for p in Philosophy},
    "fwd": Philosophy.FORWARD,
    "bwd": Philosophy.BACKWARD,
    "ctr": Philosophy.CENTRAL,
}


@dataclass(frozen=True)
class Stencil:
    """A single finite-difference formula.

    Attributes:
        derivative: The derivative order ``m`` the stencil approximates.
        offsets: Integer multiples of ``h`` at which the function is sampled.
        coeffs: Integer weight of each sample.
        denominator: Common denominator ``d`` of the weights.
    """

    derivative: int
    offsets: tuple[int, ...]
    coeffs: tuple[int, ...]
    denominator: int = 1

    def __post_init__(self):
        if len(self.offsets) != len(self.coeffs):
            raise ValueError("offsets and coeffs must have the same length.")
        if len(set(self.offsets)) != len(self.offsets):
            raise ValueError("offsets must be distinct.")

    def weights(self, stepsize: float) -> np.ndarray:
        """Returns the coefficients scaled by ``1 / (d h^m)``."""
        return np.asarray(self.coeffs, dtype=float) / (
            self.denominator * stepsize**self.derivative
        )

    def nodes(self, x0: float, stepsize: float) -> np.ndarray:
        """Returns the abscissas ``x0 + k_i h``."""
        return x0 + np.asarray(self.offsets, dtype=float) * stepsize

    def apply(self, function: Callable[[float], float], x0: float, stepsize: float) -> float:
        """Evaluates the stencil for ``function`` at ``x0`` with step ``stepsize``."""
        values = eval_points(function, self.nodes(x0, stepsize))
        return float(np.dot(self.weights(stepsize), values))


def _stencil(derivative: int, points: Mapping[int, int], denominator: int = 1) -> Stencil:
    """Builds a :class:`Stencil` from an ``{offset: coeff}`` mapping."""
    offsets = tuple(sorted(points))
    return Stencil(
        derivative=derivative,
        offsets=offsets,
        coeffs=tuple(points[k] for k in offsets),
        denominator=denominator,
    )


def _mirror(stencil: Stencil) -> Stencil:
    """Reflects a one-sided stencil to the other side of ``x0``.

    Substituting ``h -> -h`` flips every offset and multiplies the result
    by ``(-1)^m``.
    """
    sign = (-1) ** stencil.derivative
    return _stencil(
        stencil.derivative,
        {-k: sign * c for k, c in zip(stencil.offsets, stencil.coeffs)},
        stencil.denominator,
    )


_FORWARD = {
    1: {
        1: _stencil(1, {0: -1, 1: 1}),
        2: _stencil(2, {0: 1, 1: -2, 2: 1}),
        3: _stencil(3, {0: -1, 1: 3, 2: -3, 3: 1}),
    },
    2: {
        1: _stencil(1, {0: -3, 1: 4, 2: -1}, 2),
        2: _stencil(2, {0: 1, 1: -2, 2: 1}),
        3: _stencil(3, {0: -1, 1: 3, 2: -3, 3: 1}),
    },
    3: {
        1: _stencil(1, {0: -11, 1: 18, 2: -9, 3: 2}, 6),
        2: _stencil(2, {0: 2, 1: -5, 2: 4, 3: -1}),
        3: _stencil(3, {0: -5, 1: 18, 2: -24, 3: 14, 4: -3}, 2),
    },
}

_BACKWARD = {
    order: {m: _mirror(s) for m, s in stencils.items()}
    for order, stencils in _FORWARD.items()
}

_CENTRAL = {
    2: {
        1: _stencil(1, {-1: -1, 1: 1}, 2),
        2: _stencil(2, {-1: 1, 0: -2, 1: 1}),
        3: _stencil(3, {-2: -1, -1: 2, 1: -2, 2: 1}, 2),
    },
    4: {
        1: _stencil(1, {-2: 1, -1: -8, 1: 8, 2: -1}, 12),
        2: _stencil(2, {-2: -1, -1: 16, 0: -30, 1: 16, 2: -1}, 12),
        3: _stencil(3, {-3: 1, -2: -8, -1: 13, 1: -13, 2: 8, 3: -1}, 8),
    },
}


def _freeze(
    table: dict[Philosophy, dict[int, dict[int, Stencil]]],
) -> Mapping[tuple[Philosophy, int], Mapping[int, Stencil]]:
    """Flattens and freezes the nested stencil table."""
    flat = {
        (philosophy, order): MappingProxyType(dict(stencils))
        for philosophy, by_order in table.items()
        for order, stencils in by_order.items()
    }
    return MappingProxyType(flat)


#: Immutable table ``(philosophy, error_order) -> {derivative_order: Stencil}``.
STENCIL_TABLE = _freeze(
    {
        Philosophy.FORWARD: _FORWARD,
        Philosophy.BACKWARD: _BACKWARD,
        Philosophy.CENTRAL: _CENTRAL,
    }
)


def supported_error_orders(philosophy: Philosophy | str) -> tuple[int, ...]:
    """Returns the accuracy orders available for ``philosophy``."""
    p = Philosophy.coerce(philosophy)
    return tuple(sorted(order for (q, order) in STENCIL_TABLE if q is p))


def truncation_order(stencil: Stencil, max_r: int = 40) -> int:
    """Computes the leading truncation-error power of a stencil.

    Expanding each sample in a Taylor series, the stencil reproduces the
    ``m``-th derivative when the moments ``sum_i c_i k_i^r`` vanish for
    ``r < m`` and equal ``m! d`` for ``r = m``. The first non-vanishing
    moment above ``m`` fixes the error power.

    Args:
        stencil: The stencil to audit.
        max_r: Largest moment to inspect.

    Returns:
        ``p`` such that the stencil error is ``O(h^p)``.

    Raises:
        ValueError: If the stencil does not approximate its derivative.
        RuntimeError: If no non-vanishing moment is found up to ``max_r``.
    """
    k = np.asarray(stencil.offsets, dtype=float)
    c = np.asarray(stencil.coeffs, dtype=float)
    m = stencil.derivative

    for r in range(m):
        if float(np.dot(c, k**r)) != 0.0:
            raise ValueError(f"stencil is inconsistent: moment {r} does not vanish.")
    if float(np.dot(c, k**m)) != math.factorial(m) * stencil.denominator:
        raise ValueError(f"stencil does not reproduce derivative order {m}.")

    for r in range(m + 1, max_r + 1):
        if float(np.dot(c, k**r)) != 0.0:
            return r - m
    raise RuntimeError("Could not detect truncation order.")
