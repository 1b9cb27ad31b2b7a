"""Provides the CalcKit class.

A light wrapper around the differentiation and integration engines that
exposes a simple API for one real function.

Typical usage examples:

>>> import math
>>> from calckit.calc_kit import CalcKit
>>>
>>> calc = CalcKit(math.exp)
>>> slope = calc.differentiate(0.0, order=1, philosophy="central", error_order=4)
>>> area = calc.integrate(0.0, 1.0, method="gauss-legendre", order=4, tol=1e-12)
>>>
>>> available_methods()["integration"]
['gauss-legendre', 'newton-cotes']
"""

from __future__ import annotations

from collections.abc import Callable

from calckit.config import DEFAULT_ADAPTIVE_CONFIG, AdaptiveConfig
from calckit.differentiation.finite_difference import FiniteDifferenceDerivative
from calckit.differentiation.stencil import STENCIL_TABLE, Philosophy
from calckit.integration.adaptive import AdaptiveResult
from calckit.integration.quadrature import QuadratureIntegral
from calckit.integration.rules import QUADRATURE_TABLE, MethodFamily
from calckit.utils.validate import validate_callable

__all__ = ["CalcKit", "available_methods", "supported_strategies"]


class CalcKit:
    """Provides derivatives and definite integrals of a real function."""

    def __init__(
        self,
        function: Callable[[float], float],
        config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG,
    ):
        """Initialise with a function.

        Args:
            function: Maps a float to a float.
            config: Stopping parameters for adaptive integration.
        """
        self.function = validate_callable(function)
        self.config = config

    def differentiate(
        self,
        x0: float,
        *,
        order: int = 1,
        stepsize: float = 0.01,
        philosophy: Philosophy | str = Philosophy.CENTRAL,
        error_order: int = 2,
        estimate_error: bool = False,
    ) -> float | tuple[float, float]:
        """Returns a finite-difference derivative at ``x0``.

        See :meth:`FiniteDifferenceDerivative.differentiate` for the arguments.
        """
        return FiniteDifferenceDerivative(self.function, x0).differentiate(
            order=order,
            stepsize=stepsize,
            philosophy=philosophy,
            error_order=error_order,
            estimate_error=estimate_error,
        )

    def integrate(
        self,
        a: float,
        b: float,
        *,
        method: MethodFamily | str = MethodFamily.NEWTON_COTES,
        order: int = 2,
        n: int | None = None,
        tol: float | None = None,
        return_info: bool = False,
    ) -> float | AdaptiveResult:
        """Returns the integral over ``[a, b]``.

        See :meth:`QuadratureIntegral.integrate` for the arguments.
        """
        return QuadratureIntegral(self.function, self.config).integrate(
            a,
            b,
            method=method,
            order=order,
            n=n,
            tol=tol,
            return_info=return_info,
        )


def available_methods() -> dict[str, list[str]]:
    """List canonical philosophy and method family names.

    Returns:
        ``{"differentiation": [...], "integration": [...]}``, each sorted.
    """
    return {
        "differentiation": sorted(p.value for p in Philosophy),
        "integration": sorted(f.value for f in MethodFamily),
    }


def supported_strategies() -> dict[str, list[int]]:
    """List the accuracy orders or point counts available per name.

    Returns:
        Mapping from canonical philosophy or method family name to its
        sorted orders.
    """
    out: dict[str, list[int]] = {}
    for table in (STENCIL_TABLE, QUADRATURE_TABLE):
        for family, order in table:
            out.setdefault(family.value, []).append(order)
    return {name: sorted(orders) for name, orders in out.items()}
