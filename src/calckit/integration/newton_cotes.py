"""Composite closed Newton-Cotes rules.

Each rule is a panel of ``m + 1`` equally spaced samples with integer
weights and a scale factor; the composite rule tiles ``n / m`` panels over
``[a, b]`` and adds the weights where neighbouring panels share an
endpoint. With ``h = (b - a) / n``:

==========  ===  ======================  ===========  ==========
order       m    panel weights           factor       exact for
==========  ===  ======================  ===========  ==========
1 trapez.   1    1, 1                    h / 2        degree 1
2 Simpson   2    1, 4, 1                 h / 3        degree 3
3 3/8       3    1, 3, 3, 1              3h / 8       degree 3
4 Boole     4    7, 32, 12, 32, 7        2h / 45      degree 5
==========  ===  ======================  ===========  ==========
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType

import numpy as np

from calckit.utils.batch_eval import eval_points

__all__ = [
    "NewtonCotesPanel",
    "NEWTON_COTES_PANELS",
    "composite_weights",
    "composite_newton_cotes",
]


@dataclass(frozen=True)
class NewtonCotesPanel:
    """One closed Newton-Cotes panel.

    Attributes:
        name: Human-readable rule name.
        weights: Integer weights of the ``m + 1`` panel samples.
        factor: Multiplier of ``h`` in front of the weighted sum.
        degree: Highest polynomial degree integrated exactly.
    """

    name: str
    weights: tuple[int, ...]
    factor: Fraction
    degree: int

    @property
    def width(self) -> int:
        """Number of subintervals ``m`` spanned by one panel."""
        return len(self.weights) - 1


#: Immutable table ``order -> NewtonCotesPanel``.
NEWTON_COTES_PANELS = MappingProxyType(
    {
        1: NewtonCotesPanel("Trapezoidal", (1, 1), Fraction(1, 2), 1),
        2: NewtonCotesPanel("Simpson13", (1, 4, 1), Fraction(1, 3), 3),
        3: NewtonCotesPanel("Simpson38", (1, 3, 3, 1), Fraction(3, 8), 3),
        4: NewtonCotesPanel("Boole", (7, 32, 12, 32, 7), Fraction(2, 45), 5),
    }
)


def composite_weights(panel: NewtonCotesPanel, n: int) -> np.ndarray:
    """Builds the ``n + 1`` composite weights for ``n`` subintervals.

    ``n`` must be a positive multiple of ``panel.width``; callers validate it.

    Examples:
        >>> composite_weights(NEWTON_COTES_PANELS[2], 4).tolist()
        [1.0, 4.0, 2.0, 4.0, 1.0]
    """
    m = panel.width
    w = np.zeros(n + 1, dtype=float)
    # sample j of each panel lands on indices j, j + m, ..., n - m + j
    for j, c in enumerate(panel.weights):
        w[j : n - m + j + 1 : m] += c
    return w


def composite_newton_cotes(
    function: Callable[[float], float],
    a: float,
    b: float,
    n: int,
    panel: NewtonCotesPanel,
) -> float:
    """Integrates ``function`` over ``[a, b]`` with a composite Newton-Cotes rule.

    Limits and ``n`` are assumed already validated, with ``a < b``.

    Args:
        function: Integrand.
        a: Lower limit.
        b: Upper limit.
        n: Number of subintervals, a positive multiple of ``panel.width``.
        panel: The rule to tile.

    Returns:
        The composite estimate.
    """
    h = (b - a) / n
    xs = np.linspace(a, b, n + 1)
    values = eval_points(function, xs)
    return float(panel.factor) * h * float(np.dot(composite_weights(panel, n), values))
