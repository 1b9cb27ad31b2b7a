"""Quadrature rule registry.

A :class:`QuadratureRule` is a stateless value object pairing one formula
with the resolution constraints it imposes. Rules are resolved from an
immutable table keyed by ``(MethodFamily, order)``; for Newton-Cotes the
order selects the rule (1 trapezoidal to 4 Boole), for Gauss-Legendre it is
the number of nodes per panel.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import partial
from types import MappingProxyType

from calckit.exceptions import InvalidStrategyError, InvalidSubintervalCountError
from calckit.integration.gauss_legendre import (
    GAUSS_LEGENDRE_TABLE,
    composite_gauss_legendre,
)
from calckit.integration.newton_cotes import (
    NEWTON_COTES_PANELS,
    composite_newton_cotes,
)
from calckit.utils.naming import lookup_name
from calckit.utils.validate import validate_finite, validate_integer

__all__ = [
    "MethodFamily",
    "QuadratureRule",
    "QUADRATURE_TABLE",
    "resolve_integration",
]


class MethodFamily(Enum):
    """Family of quadrature formulas."""

    NEWTON_COTES = "newton-cotes"
    GAUSS_LEGENDRE = "gauss-legendre"

    @classmethod
    def coerce(cls, value: MethodFamily | str) -> MethodFamily:
        """Returns the member named by ``value``.

        Raises:
            ValueError: If ``value`` names no method family.
        """
        if isinstance(value, cls):
            return value
        return lookup_name(value, _FAMILY_NAMES, "method family")


_FAMILY_NAMES = {
    "newtoncotes": MethodFamily.NEWTON_COTES,
    "nc": MethodFamily.NEWTON_COTES,
    "gausslegendre": MethodFamily.GAUSS_LEGENDRE,
    "gauss": MethodFamily.GAUSS_LEGENDRE,
    "gl": MethodFamily.GAUSS_LEGENDRE,
}


@dataclass(frozen=True)
class QuadratureRule:
    """A stateless quadrature strategy.

    Attributes:
        family: The method family.
        order: Rule order (Newton-Cotes) or point count (Gauss-Legendre).
        name: Short rule name used in messages.
        min_resolution: Smallest legal subinterval (or panel) count.
        multiple_of: The resolution must be a multiple of this.
        degree: Highest polynomial degree integrated exactly.
        evaluator: ``evaluator(function, a, b, n)`` for validated ``a < b`` and ``n``.
    """

    family: MethodFamily
    order: int
    name: str
    min_resolution: int
    multiple_of: int
    degree: int
    evaluator: Callable[[Callable[[float], float], float, float, int], float]

    def check_resolution(self, n) -> int:
        """Validates a subinterval (or panel) count.

        Raises:
            TypeError: If ``n`` is not an integer.
            InvalidSubintervalCountError: If ``n`` is below the minimum or
                not a multiple of :attr:`multiple_of`.
        """
        n = validate_integer("n", n)
        if n < self.min_resolution or n % self.multiple_of != 0:
            raise InvalidSubintervalCountError(self.name, n, self.multiple_of)
        return n

    def integrate(
        self,
        function: Callable[[float], float],
        a: float,
        b: float,
        n: int,
    ) -> float:
        """Approximates the integral of ``function`` over ``[a, b]``.

        If ``a == b`` the result is exactly 0 and ``function`` is not
        called. If ``a > b`` the integral over ``[b, a]`` is negated.

        Args:
            function: Integrand.
            a: Lower limit.
            b: Upper limit.
            n: Subinterval count (Newton-Cotes) or panel count (Gauss-Legendre).

        Returns:
            The estimate.

        Raises:
            InvalidSubintervalCountError: If ``n`` violates the rule's constraint.
        """
        a = validate_finite("a", a)
        b = validate_finite("b", b)
        n = validate_integer("n", n)
        if a == b:
            return 0.0
        n = self.check_resolution(n)
        if a > b:
            return -self.evaluator(function, b, a, n)
        return self.evaluator(function, a, b, n)


def _build_table() -> Mapping[tuple[MethodFamily, int], QuadratureRule]:
    table: dict[tuple[MethodFamily, int], QuadratureRule] = {}
    for order, panel in NEWTON_COTES_PANELS.items():
        table[(MethodFamily.NEWTON_COTES, order)] = QuadratureRule(
            family=MethodFamily.NEWTON_COTES,
            order=order,
            name=panel.name,
            min_resolution=panel.width,
            multiple_of=panel.width,
            degree=panel.degree,
            evaluator=partial(_newton_cotes, panel=panel),
        )
    for points in GAUSS_LEGENDRE_TABLE:
        table[(MethodFamily.GAUSS_LEGENDRE, points)] = QuadratureRule(
            family=MethodFamily.GAUSS_LEGENDRE,
            order=points,
            name=f"GaussLegendre{points}",
            min_resolution=1,
            multiple_of=1,
            degree=2 * points - 1,
            evaluator=partial(_gauss_legendre, points=points),
        )
    return MappingProxyType(table)


def _newton_cotes(function, a, b, n, *, panel):
    return composite_newton_cotes(function, a, b, n, panel)


def _gauss_legendre(function, a, b, n, *, points):
    return composite_gauss_legendre(function, a, b, n, points)


#: Immutable table ``(family, order) -> QuadratureRule``.
QUADRATURE_TABLE = _build_table()


def resolve_integration(
    method: MethodFamily | str,
    order: int,
    table: Mapping[tuple[MethodFamily, int], QuadratureRule] = QUADRATURE_TABLE,
) -> QuadratureRule:
    """Resolves a (method family, order) pair to its rule.

    Args:
        method: A :class:`MethodFamily` or its name
            (``"newton-cotes"``, ``"nc"``, ``"gauss-legendre"``, ``"gl"``...).
        order: Newton-Cotes rule order 1 to 4, or Gauss-Legendre point
            count 1 to 5.
        table: Rule table to resolve against.

    Returns:
        The matching :class:`QuadratureRule`.

    Raises:
        InvalidStrategyError: If the pair has no entry in ``table``.
    """
    try:
        family = MethodFamily.coerce(method)
    except ValueError as exc:
        raise InvalidStrategyError(method, order, f"[Quadrature] {exc}") from None

    key = (family, order)
    if isinstance(order, bool) or key not in table:
        orders = sorted(o for (f, o) in table if f is family)
        raise InvalidStrategyError(
            method,
            order,
            f"[Quadrature] Unsupported order {order!r} for {family.value}. "
            f"Must be one of {orders}.",
        )
    return table[key]

