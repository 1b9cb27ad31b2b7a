"""Quadrature engine: Newton-Cotes and Gauss-Legendre rules with adaptive refinement."""

from calckit.integration.adaptive import AdaptiveQuadrature, AdaptiveResult
from calckit.integration.quadrature import QuadratureIntegral, calculate_integral
from calckit.integration.rules import (
    QUADRATURE_TABLE,
    MethodFamily,
    QuadratureRule,
    resolve_integration,
)

__all__ = [
    "AdaptiveQuadrature",
    "AdaptiveResult",
    "MethodFamily",
    "QUADRATURE_TABLE",
    "QuadratureIntegral",
    "QuadratureRule",
    "calculate_integral",
    "resolve_integration",
]
