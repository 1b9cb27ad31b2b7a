"""The two entry points callers use to drive the engines.

Typical usage example:

>>> import math
>>> from calckit.calculus_api import differentiate, integrate
>>> round(differentiate(math.sin, "central", 4, 1, x=0.0, h=1e-2), 8)
1.0
>>> round(integrate(lambda x: x**3, "newton-cotes", 4, a=1.0, b=2.0, n=4), 9)
3.75

Both functions raise the structured errors of :mod:`calckit.exceptions`
and return a plain float on success.
"""

from __future__ import annotations

from collections.abc import Callable

from calckit.config import DEFAULT_ADAPTIVE_CONFIG, AdaptiveConfig
from calckit.differentiation.finite_difference import (
    calculate_derivative,
    resolve_differentiation,
)
from calckit.differentiation.stencil import Philosophy
from calckit.exceptions import ZeroStepSizeError
from calckit.integration.quadrature import calculate_integral
from calckit.integration.rules import MethodFamily, resolve_integration
from calckit.utils.validate import validate_callable, validate_finite

__all__ = ["differentiate", "integrate"]


def differentiate(
    function: Callable[[float], float],
    philosophy: Philosophy | str,
    error_order: int,
    derivative_order: int,
    x: float,
    h: float,
) -> float:
    """Approximates a derivative of ``function`` at ``x``.

    Args:
        function: The function to differentiate.
        philosophy: ``"forward"``, ``"backward"`` or ``"central"``.
        error_order: Accuracy order: 1 to 3 for one-sided stencils, 2 or 4
            for central ones.
        derivative_order: 1, 2 or 3.
        x: Evaluation point.
        h: Step size, non-zero.

    Returns:
        The derivative estimate. A non-finite function value propagates
        into a non-finite result.

    Raises:
        ZeroStepSizeError: If ``h`` is zero.
        InvalidStrategyError: If ``(philosophy, error_order)`` is not supported.
        InvalidDerivativeOrderError: If ``derivative_order`` is not 1, 2 or 3.
    """
    validate_callable(function)
    x = validate_finite("x", x)
    h = validate_finite("h", h)
    if h == 0:
        raise ZeroStepSizeError(h)
    scheme = resolve_differentiation(philosophy, error_order)
    return calculate_derivative(scheme, function, x, h, derivative_order)


def integrate(
    function: Callable[[float], float],
    method: MethodFamily | str,
    order: int,
    a: float,
    b: float,
    n: int | None = None,
    tol: float | None = None,
    *,
    config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG,
) -> float:
    """Approximates the integral of ``function`` over ``[a, b]``.

    With ``n`` the rule is evaluated once at that resolution; with ``tol``
    the resolution is doubled until successive estimates agree.

    Args:
        function: The integrand.
        method: ``"newton-cotes"`` or ``"gauss-legendre"`` (or an alias).
        order: Newton-Cotes rule 1 to 4, or Gauss-Legendre point count 1 to 5.
        a: Lower limit.
        b: Upper limit.
        n: Fixed subinterval (or panel) count.
        tol: Adaptive tolerance; mutually exclusive with ``n``.
        config: Stopping parameters for adaptive mode.

    Returns:
        The integral estimate.

    Raises:
        InvalidStrategyError: If ``(method, order)`` is not supported.
        InvalidSubintervalCountError: If ``n`` violates the rule's constraint.
        ConvergenceError: If adaptive refinement is exhausted.
    """
    validate_callable(function)
    rule = resolve_integration(method, order)
    return calculate_integral(rule, function, a, b, n=n, tol=tol, config=config).value
