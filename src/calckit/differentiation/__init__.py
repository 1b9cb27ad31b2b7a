"""Finite-difference differentiation engine."""

from calckit.differentiation.finite_difference import (
    DifferenceScheme,
    FiniteDifferenceDerivative,
    calculate_derivative,
    resolve_differentiation,
)
from calckit.differentiation.stencil import (
    STENCIL_TABLE,
    Philosophy,
    Stencil,
    supported_error_orders,
    truncation_order,
)

__all__ = [
    "DifferenceScheme",
    "FiniteDifferenceDerivative",
    "Philosophy",
    "STENCIL_TABLE",
    "Stencil",
    "calculate_derivative",
    "resolve_differentiation",
    "supported_error_orders",
    "truncation_order",
]
