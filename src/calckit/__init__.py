"""Provides all calckit methods."""

from importlib.metadata import PackageNotFoundError, version

from calckit.calc_kit import CalcKit, available_methods, supported_strategies
from calckit.calculus_api import differentiate, integrate
from calckit.config import DEFAULT_ADAPTIVE_CONFIG, AdaptiveConfig
from calckit.differentiation.finite_difference import (
    DifferenceScheme,
    FiniteDifferenceDerivative,
    resolve_differentiation,
)
from calckit.differentiation.stencil import Philosophy
from calckit.exceptions import (
    CalcKitError,
    ConvergenceError,
    InvalidDerivativeOrderError,
    InvalidStrategyError,
    InvalidSubintervalCountError,
    ZeroStepSizeError,
)
from calckit.integration.adaptive import AdaptiveQuadrature, AdaptiveResult
from calckit.integration.quadrature import QuadratureIntegral
from calckit.integration.rules import MethodFamily, QuadratureRule, resolve_integration

try:
    __version__ = version("calckit")
except PackageNotFoundError:
    pass

__all__ = [
    "AdaptiveConfig",
    "AdaptiveQuadrature",
    "AdaptiveResult",
    "CalcKit",
    "CalcKitError",
    "ConvergenceError",
    "DEFAULT_ADAPTIVE_CONFIG",
    "DifferenceScheme",
    "FiniteDifferenceDerivative",
    "InvalidDerivativeOrderError",
    "InvalidStrategyError",
    "InvalidSubintervalCountError",
    "MethodFamily",
    "Philosophy",
    "QuadratureIntegral",
    "QuadratureRule",
    "ZeroStepSizeError",
    "available_methods",
    "differentiate",
    "integrate",
    "resolve_differentiation",
    "resolve_integration",
    "supported_strategies",
]
