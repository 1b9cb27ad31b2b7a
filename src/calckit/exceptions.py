"""Error kinds raised by the CalcKit engines.

Every error is local to the call that raised it and carries the structured
fields a caller needs to decide what to do next. Messages are diagnostics
only; presenting them to a user is left to the calling application.
"""

from __future__ import annotations

__all__ = [
    "CalcKitError",
    "InvalidStrategyError",
    "InvalidDerivativeOrderError",
    "ZeroStepSizeError",
    "InvalidSubintervalCountError",
    "ConvergenceError",
]


class CalcKitError(Exception):
    """Base class for all errors raised by CalcKit."""


class InvalidStrategyError(CalcKitError, ValueError):
    """No formula is defined for the requested (family, order) combination.

    Attributes:
        family: The requested philosophy or method family, as given.
        order: The requested accuracy order or point count, as given.
    """

    def __init__(self, family, order, message: str | None = None):
        self.family = family
        self.order = order
        if message is None:
            message = f"No strategy defined for family={family!r}, order={order!r}."
        super().__init__(message)


class InvalidDerivativeOrderError(CalcKitError, ValueError):
    """The requested derivative order is not 1, 2 or 3."""

    def __init__(self, order):
        self.order = order
        super().__init__(
            f"[FiniteDifference] Unsupported derivative order: {order!r}. "
            "Must be one of [1, 2, 3]."
        )


class ZeroStepSizeError(CalcKitError, ValueError):
    """A finite-difference step size of zero was requested."""

    def __init__(self, stepsize: float = 0.0):
        self.stepsize = stepsize
        super().__init__("[FiniteDifference] stepsize must be non-zero.")


class InvalidSubintervalCountError(CalcKitError, ValueError):
    """The subinterval (or panel) count violates the rule's constraints.

    Attributes:
        rule: Name of the quadrature rule.
        n: The rejected subinterval count.
        multiple_of: The divisibility the rule requires.
    """

    def __init__(self, rule: str, n, multiple_of: int):
        self.rule = rule
        self.n = n
        self.multiple_of = multiple_of
        if multiple_of == 1:
            requirement = "a positive integer"
        else:
            requirement = f"a positive integer multiple of {multiple_of}"
        super().__init__(f"[{rule}] number of subintervals must be {requirement}, got {n!r}.")


class ConvergenceError(CalcKitError, ArithmeticError):
    """Adaptive refinement exhausted its budget without meeting the tolerance.

    The caller may accept ``estimate`` as an approximate value or retry
    with a looser tolerance.

    Attributes:
        estimate: The last estimate computed.
        previous: The estimate from the round before.
        resolution: The subinterval (or panel) count of the last estimate.
        refinements: Number of refinement rounds performed.
        tol: The tolerance that was not met.
    """

    def __init__(
        self,
        estimate: float,
        previous: float,
        resolution: int,
        refinements: int,
        tol: float,
        rule: str = "AdaptiveQuadrature",
    ):
        self.estimate = estimate
        self.previous = previous
        self.resolution = resolution
        self.refinements = refinements
        self.tol = tol
        self.rule = rule
        super().__init__(
            f"[{rule}] failed to converge within {refinements} refinements for "
            f"tolerance {tol:g} (last estimate: {estimate!r}, previous: {previous!r}, "
            f"resolution: {resolution})."
        )
