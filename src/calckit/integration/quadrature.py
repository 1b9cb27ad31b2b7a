"""Provides the QuadratureIntegral class.

One facade covers both ways of asking for an integral: a fixed resolution
``n`` evaluates the rule once, a tolerance ``tol`` hands the rule to
:class:`calckit.integration.adaptive.AdaptiveQuadrature`.

Examples:
--------
>>> from calckit.integration.quadrature import QuadratureIntegral
>>> q = QuadratureIntegral(lambda x: x**2)
>>> round(q.integrate(0.0, 1.0, method="newton-cotes", order=2, n=10), 9)
0.333333333
>>> round(q.integrate(0.0, 1.0, method="gauss-legendre", order=3, tol=1e-10), 9)
0.333333333
"""

from __future__ import annotations

from collections.abc import Callable

from calckit.config import DEFAULT_ADAPTIVE_CONFIG, AdaptiveConfig
from calckit.integration.adaptive import AdaptiveQuadrature, AdaptiveResult
from calckit.integration.rules import MethodFamily, QuadratureRule, resolve_integration
from calckit.utils.validate import validate_callable

__all__ = ["QuadratureIntegral", "calculate_integral"]


def calculate_integral(
    rule: QuadratureRule,
    function: Callable[[float], float],
    a: float,
    b: float,
    n: int | None = None,
    tol: float | None = None,
    config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG,
) -> AdaptiveResult:
    """Integrates with a resolved rule in fixed or adaptive mode.

    Exactly one of ``n`` and ``tol`` selects the mode. If neither is given
    the rule is evaluated once at its minimum resolution.

    Args:
        rule: The resolved quadrature rule.
        function: Integrand.
        a: Lower limit.
        b: Upper limit.
        n: Fixed subinterval (or panel) count.
        tol: Adaptive tolerance.
        config: Stopping parameters for adaptive mode.

    Returns:
        An :class:`AdaptiveResult`. In fixed mode ``previous`` equals
        ``value`` and ``refinements`` is 0.

    Raises:
        ValueError: If both ``n`` and ``tol`` are given.
        InvalidSubintervalCountError: If ``n`` violates the rule's constraint.
        ConvergenceError: If adaptive refinement is exhausted.
    """
    if n is not None and tol is not None:
        raise ValueError("Pass either n (fixed resolution) or tol (adaptive), not both.")

    if tol is not None:
        return AdaptiveQuadrature(rule, config).run(function, a, b, tol)

    if n is None:
        n = rule.min_resolution
    value = rule.integrate(function, a, b, n)
    return AdaptiveResult(value=value, previous=value, resolution=n, refinements=0)


class QuadratureIntegral:
    """Computes definite integrals of a real function.

    Attributes:
        function: The integrand. Must accept a single float and return a float.
        config: Stopping parameters used in adaptive mode.
    """

    def __init__(
        self,
        function: Callable[[float], float],
        config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG,
    ) -> None:
        """Initialises the class with an integrand.

        Args:
            function: The integrand.
            config: Stopping parameters for adaptive mode.
        """
        self.function = validate_callable(function)
        self.config = config

    def integrate(
        self,
        a: float,
        b: float,
        method: MethodFamily | str = MethodFamily.NEWTON_COTES,
        order: int = 2,
        n: int | None = None,
        tol: float | None = None,
        return_info: bool = False,
    ) -> float | AdaptiveResult:
        """Computes the integral over ``[a, b]``.

        Args:
            a: Lower limit.
            b: Upper limit.
            method: ``"newton-cotes"`` or ``"gauss-legendre"`` (or an alias).
                Default is Newton-Cotes.
            order: Newton-Cotes rule (1 trapezoidal, 2 Simpson 1/3,
                3 Simpson 3/8, 4 Boole) or Gauss-Legendre point count
                (1 to 5). Default is 2.
            n: Fixed number of subintervals (Newton-Cotes) or panels
                (Gauss-Legendre).
            tol: Tolerance for adaptive refinement. Mutually exclusive with ``n``.
            return_info: If True, return the full :class:`AdaptiveResult`
                instead of only the value.

        Returns:
            The integral estimate, or an :class:`AdaptiveResult`.

        Raises:
            InvalidStrategyError: If ``(method, order)`` is not supported.
            InvalidSubintervalCountError: If ``n`` violates the rule's constraint.
            ConvergenceError: If adaptive refinement is exhausted.
            ValueError: If both ``n`` and ``tol`` are given, or ``tol`` is
                negative.
        """
        rule = resolve_integration(method, order)
        result = calculate_integral(
            rule, self.function, a, b, n=n, tol=tol, config=self.config
        )
        return result if return_info else result.value
