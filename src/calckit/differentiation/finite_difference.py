"""Provides the FiniteDifferenceDerivative class and the stencil resolver.

The user picks a philosophy (forward, backward or central) and an accuracy
order; :func:`resolve_differentiation` turns that pair into a
:class:`DifferenceScheme`, which evaluates first, second and third
derivatives with fixed stencils.

Examples:
--------
Central O(h^2) first derivative:

>>> from calckit.differentiation.finite_difference import FiniteDifferenceDerivative
>>> f = lambda x: x**2
>>> d = FiniteDifferenceDerivative(function=f, x0=2.0)
>>> round(d.differentiate(order=1, stepsize=0.01), 6)
4.0

Backward O(h^3) second derivative with a crude error estimate:

>>> import numpy as np
>>> d = FiniteDifferenceDerivative(function=np.sin, x0=0.7)
>>> val, err = d.differentiate(
...     order=2,
...     stepsize=1e-2,
...     philosophy="backward",
...     error_order=3,
...     estimate_error=True,
... )
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from calckit.differentiation.stencil import (
    DERIVATIVE_ORDERS,
    STENCIL_TABLE,
    Philosophy,
    Stencil,
)
from calckit.exceptions import (
    InvalidDerivativeOrderError,
    InvalidStrategyError,
    ZeroStepSizeError,
)
from calckit.logger import calckit_logger
from calckit.utils.validate import validate_callable, validate_finite

__all__ = [
    "DifferenceScheme",
    "FiniteDifferenceDerivative",
    "resolve_differentiation",
    "calculate_derivative",
]


@dataclass(frozen=True)
class DifferenceScheme:
    """A stateless finite-difference strategy.

    Instances hold no mutable state and may be shared freely.

    Attributes:
        philosophy: Which side of ``x`` the stencils sample.
        error_order: Accuracy order of the first-derivative stencil.
        stencils: Stencil for each derivative order 1, 2 and 3.
    """

    philosophy: Philosophy
    error_order: int
    stencils: Mapping[int, Stencil]

    def first(self, function: Callable[[float], float], x: float, h: float) -> float:
        """Approximates ``f'(x)``."""
        return self.stencils[1].apply(function, x, h)

    def second(self, function: Callable[[float], float], x: float, h: float) -> float:
        """Approximates ``f''(x)``."""
        return self.stencils[2].apply(function, x, h)

    def third(self, function: Callable[[float], float], x: float, h: float) -> float:
        """Approximates ``f'''(x)``."""
        return self.stencils[3].apply(function, x, h)

    def evaluate_derivative(
        self,
        function: Callable[[float], float],
        x: float,
        h: float,
        order: int,
    ) -> float:
        """Dispatches to the stencil of the requested derivative order.

        Raises:
            InvalidDerivativeOrderError: If ``order`` is not 1, 2 or 3.
        """
        if isinstance(order, bool) or order not in DERIVATIVE_ORDERS:
            raise InvalidDerivativeOrderError(order)
        return self.stencils[order].apply(function, x, h)


def resolve_differentiation(
    philosophy: Philosophy | str,
    error_order: int,
    table: Mapping[tuple[Philosophy, int], Mapping[int, Stencil]] = STENCIL_TABLE,
) -> DifferenceScheme:
    """Resolves a (philosophy, accuracy order) pair to its scheme.

    Args:
        philosophy: A :class:`Philosophy` or its name.
        error_order: Accuracy order. Forward and backward support 1 to 3,
            central supports 2 and 4.
        table: Stencil table to resolve against.

    Returns:
        The matching :class:`DifferenceScheme`.

    Raises:
        InvalidStrategyError: If the pair has no entry in ``table``.
    """
    try:
        p = Philosophy.coerce(philosophy)
    except ValueError as exc:
        raise InvalidStrategyError(philosophy, error_order, f"[FiniteDifference] {exc}") from None

    key = (p, error_order)
    if isinstance(error_order, bool) or key not in table:
        orders = sorted(order for (q, order) in table if q is p)
        raise InvalidStrategyError(
            philosophy,
            error_order,
            f"[FiniteDifference] Unsupported error order {error_order!r} for "
            f"{p.value} differences. Must be one of {orders}.",
        )
    return DifferenceScheme(philosophy=p, error_order=error_order, stencils=table[key])


def calculate_derivative(
    scheme: DifferenceScheme,
    function: Callable[[float], float],
    x: float,
    h: float,
    derivative_order: int,
) -> float:
    """Evaluates a derivative with a resolved scheme after checking ``h``.

    Raises:
        ZeroStepSizeError: If ``h`` is zero.
        InvalidDerivativeOrderError: If ``derivative_order`` is not 1, 2 or 3.
    """
    if h == 0:
        raise ZeroStepSizeError(h)
    value = scheme.evaluate_derivative(function, x, h, derivative_order)
    if not math.isfinite(value):
        calckit_logger.warning(
            "%s O(h^%d) derivative of order %d at x=%r is not finite (%r).",
            scheme.philosophy.value,
            scheme.error_order,
            derivative_order,
            x,
            value,
        )
    return value


class FiniteDifferenceDerivative:
    """Computes derivatives of a real function with fixed finite-difference stencils.

    Supports first, second and third derivatives with forward and backward
    stencils of accuracy order 1 to 3 and central stencils of order 2 and 4.

    Attributes:
        function: The function to differentiate. Must accept a single
            float and return a float.
        x0: The point at which the derivative is evaluated.

    Examples:
    ---------
    >>> d = FiniteDifferenceDerivative(function=lambda x: x**3, x0=2.0)
    >>> round(d.differentiate(order=2, philosophy="central", error_order=4), 6)
    12.0
    """

    def __init__(
        self,
        function: Callable[[float], float],
        x0: float,
    ) -> None:
        """Initialises the class based on function and evaluation point.

        Arguments:
            function: The function to differentiate.
            x0: The point at which the derivative is evaluated.
        """
        self.function = validate_callable(function)
        self.x0 = validate_finite("x0", x0)

    def differentiate(
        self,
        order: int = 1,
        stepsize: float = 0.01,
        philosophy: Philosophy | str = Philosophy.CENTRAL,
        error_order: int = 2,
        estimate_error: bool = False,
    ) -> float | tuple[float, float]:
        """Computes the derivative with the chosen stencil.

        Args:
            order: The derivative order, 1, 2 or 3. Default is 1.
            stepsize: Step size ``h``. Must be non-zero. Default is 0.01.
            philosophy: ``"forward"``, ``"backward"`` or ``"central"``.
                Default is central.
            error_order: Accuracy order of the stencil family. Default is 2.
            estimate_error: If True, also return ``|D(h) - D(h/2)|`` as a
                crude error estimate.

        Returns:
            The estimated derivative, or ``(value, error)`` if
            ``estimate_error`` is True.

        Raises:
            ZeroStepSizeError: If ``stepsize`` is zero.
            InvalidStrategyError: If ``(philosophy, error_order)`` is not supported.
            InvalidDerivativeOrderError: If ``order`` is not 1, 2 or 3.
        """
        h = validate_finite("stepsize", stepsize)
        if h == 0:
            raise ZeroStepSizeError(h)

        scheme = resolve_differentiation(philosophy, error_order)
        value = calculate_derivative(scheme, self.function, self.x0, h, order)

        if not estimate_error:
            return value

        # Second evaluation at h/2 for a crude error estimate
        value_refined = scheme.evaluate_derivative(self.function, self.x0, h / 2.0, order)
        return value, abs(value - value_refined)
