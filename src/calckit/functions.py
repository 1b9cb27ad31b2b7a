"""Catalog of predefined real functions.

Front ends offer these as ready-made integrands and differentiands. Each
entry also carries its analytic first derivative so results can be checked
against a known value.

>>> from calckit.functions import get_function
>>> get_function("polynomial")(1.0)
6.0
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

__all__ = [
    "FunctionDefinition",
    "PREDEFINED_FUNCTIONS",
    "available_functions",
    "get_function",
    "get_definition",
    "function_name",
]


@dataclass(frozen=True)
class FunctionDefinition:
    """A named real function.

    Attributes:
        id: Lookup key.
        name: Display formula.
        func: The function itself.
        derivative: Its analytic first derivative.
    """

    id: str
    name: str
    func: Callable[[float], float]
    derivative: Callable[[float], float]


def _polynomial(x: float) -> float:
    return 2.0 * x * x + 3.0 * x + 1.0


def _polynomial_prime(x: float) -> float:
    return 4.0 * x + 3.0


def _exponential(x: float) -> float:
    return math.exp(math.pi * x) + 1.0


def _exponential_prime(x: float) -> float:
    return math.pi * math.exp(math.pi * x)


def _trigonometric(x: float) -> float:
    return math.sin(x) + math.cos(x)


def _trigonometric_prime(x: float) -> float:
    return math.cos(x) - math.sin(x)


def _hyperbolic(x: float) -> float:
    return math.sinh(x) + math.cosh(x)


def _hyperbolic_prime(x: float) -> float:
    return math.cosh(x) + math.sinh(x)


def _logarithmic(x: float) -> float:
    if x <= 0:
        raise ValueError(f"logarithmic function is undefined for x <= 0; got {x!r}.")
    return math.log(x) + math.log10(x)


def _logarithmic_prime(x: float) -> float:
    if x <= 0:
        raise ValueError(f"logarithmic function is undefined for x <= 0; got {x!r}.")
    return (1.0 + 1.0 / math.log(10.0)) / x


def _compound(x: float) -> float:
    return _polynomial(x) + _exponential(x) + _trigonometric(x) + _hyperbolic(x)


def _compound_prime(x: float) -> float:
    return (
        _polynomial_prime(x)
        + _exponential_prime(x)
        + _trigonometric_prime(x)
        + _hyperbolic_prime(x)
    )


#: The catalog, in display order.
PREDEFINED_FUNCTIONS: tuple[FunctionDefinition, ...] = (
    FunctionDefinition("polynomial", "P(x) = 2x^2 + 3x + 1", _polynomial, _polynomial_prime),
    FunctionDefinition("exponential", "E(x) = e^(pi x) + 1", _exponential, _exponential_prime),
    FunctionDefinition("trigonometric", "T(x) = sin(x) + cos(x)", _trigonometric, _trigonometric_prime),
    FunctionDefinition("hyperbolic", "H(x) = sinh(x) + cosh(x)", _hyperbolic, _hyperbolic_prime),
    FunctionDefinition("logarithmic", "L(x) = ln(x) + log10(x)", _logarithmic, _logarithmic_prime),
    FunctionDefinition("compound", "C(x) = P(x) + E(x) + T(x) + H(x)", _compound, _compound_prime),
)

_BY_ID = {d.id: d for d in PREDEFINED_FUNCTIONS}


def available_functions() -> list[str]:
    """List the catalog ids in display order."""
    return [d.id for d in PREDEFINED_FUNCTIONS]


def get_definition(function_id: str) -> FunctionDefinition:
    """Returns the catalog entry for ``function_id``.

    Raises:
        ValueError: If ``function_id`` is not in the catalog.
    """
    try:
        return _BY_ID[function_id]
    except KeyError:
        opts = ", ".join(available_functions())
        raise ValueError(f"Unknown function '{function_id}'. Choose one of {{{opts}}}.") from None


def get_function(function_id: str) -> Callable[[float], float]:
    """Returns the callable for ``function_id``."""
    return get_definition(function_id).func


def function_name(function_id: str | None) -> str:
    """Returns the display formula for ``function_id``.

    A blank id gives ``"None"`` and an id outside the catalog gives
    ``"Custom function"``.
    """
    if function_id is None or not function_id.strip():
        return "None"
    definition = _BY_ID.get(function_id)
    return definition.name if definition is not None else "Custom function"
