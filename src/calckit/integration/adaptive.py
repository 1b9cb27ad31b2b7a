"""Adaptive refinement of a quadrature rule to a target tolerance.

The controller starts at the smallest resolution the rule allows, then
doubles it (rounding up to the next legal count) until two successive
estimates agree within ``tol``. Agreement is relative to the previous
estimate unless that estimate is near zero, in which case it is absolute.
After ``max_refinements`` doublings without agreement the controller raises
:class:`calckit.exceptions.ConvergenceError` carrying the last two
estimates.

Gauss-Legendre rules refine by doubling the number of panels, never the
number of nodes per panel.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from calckit.config import DEFAULT_ADAPTIVE_CONFIG, AdaptiveConfig
from calckit.exceptions import ConvergenceError
from calckit.integration.rules import QuadratureRule
from calckit.logger import calckit_logger
from calckit.utils.numerics import (
    has_converged,
    next_legal_resolution,
    successive_change,
)
from calckit.utils.validate import validate_finite, validate_tolerance

__all__ = ["AdaptiveResult", "AdaptiveQuadrature"]


@dataclass(frozen=True)
class AdaptiveResult:
    """Outcome of a converged adaptive run.

    Attributes:
        value: The accepted estimate.
        previous: The estimate it was compared against (equal to ``value``
            when the interval is empty).
        resolution: Subinterval (or panel) count of ``value``.
        refinements: Number of doubling rounds performed.
    """

    value: float
    previous: float
    resolution: int
    refinements: int


class AdaptiveQuadrature:
    """Drives a :class:`QuadratureRule` until successive estimates agree.

    Attributes:
        rule: The wrapped quadrature rule.
        config: Stopping parameters.
    """

    def __init__(self, rule: QuadratureRule, config: AdaptiveConfig = DEFAULT_ADAPTIVE_CONFIG):
        """Initialises the controller.

        Args:
            rule: The rule to refine.
            config: Stopping parameters. Defaults to
                :data:`calckit.config.DEFAULT_ADAPTIVE_CONFIG`.
        """
        self.rule = rule
        self.config = config

    def initial_resolution(self) -> int:
        """Smallest legal resolution of the wrapped rule."""
        return next_legal_resolution(
            self.rule.min_resolution, self.rule.multiple_of, self.rule.min_resolution
        )

    def refine(self, n: int) -> int:
        """Doubles ``n`` and rounds up to the next legal resolution."""
        return next_legal_resolution(2 * n, self.rule.multiple_of, self.rule.min_resolution)

    def run(
        self,
        function: Callable[[float], float],
        a: float,
        b: float,
        tol: float,
    ) -> AdaptiveResult:
        """Integrates ``function`` over ``[a, b]`` to tolerance ``tol``.

        Args:
            function: Integrand.
            a: Lower limit.
            b: Upper limit.
            tol: Convergence tolerance. Zero is accepted and never met.

        Returns:
            An :class:`AdaptiveResult` for the first estimate that agreed
            with its predecessor.

        Raises:
            ValueError: If ``tol`` is negative or NaN.
            ConvergenceError: If the refinement budget is exhausted.
        """
        a = validate_finite("a", a)
        b = validate_finite("b", b)
        tol = validate_tolerance(tol)
        if a == b:
            return AdaptiveResult(value=0.0, previous=0.0, resolution=0, refinements=0)

        cfg = self.config
        n = self.initial_resolution()
        current = self.rule.integrate(function, a, b, n)
        previous = float("nan")
        calckit_logger.debug("%s: n=%d estimate=%r", self.rule.name, n, current)

        refinements = 0
        while refinements < cfg.max_refinements:
            next_n = self.refine(n)
            if next_n > cfg.max_resolution:
                calckit_logger.debug(
                    "%s: next resolution %d exceeds max_resolution=%d",
                    self.rule.name,
                    next_n,
                    cfg.max_resolution,
                )
                break

            previous, n = current, next_n
            current = self.rule.integrate(function, a, b, n)
            refinements += 1
            calckit_logger.debug(
                "%s: n=%d estimate=%r change=%g",
                self.rule.name,
                n,
                current,
                successive_change(current, previous, cfg.near_zero),
            )

            if has_converged(current, previous, tol, cfg.near_zero):
                calckit_logger.info(
                    "%s converged to tol=%g at n=%d after %d refinements.",
                    self.rule.name,
                    tol,
                    n,
                    refinements,
                )
                return AdaptiveResult(
                    value=current,
                    previous=previous,
                    resolution=n,
                    refinements=refinements,
                )

        calckit_logger.warning(
            "%s did not converge to tol=%g: n=%d, last=%r, previous=%r.",
            self.rule.name,
            tol,
            n,
            current,
            previous,
        )
        raise ConvergenceError(
            estimate=current,
            previous=previous,
            resolution=n,
            refinements=refinements,
            tol=tol,
            rule=self.rule.name,
        )
