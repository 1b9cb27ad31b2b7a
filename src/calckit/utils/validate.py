"""Validation utilities for CalcKit."""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable
from typing import Any

__all__ = [
    "validate_callable",
    "validate_finite",
    "validate_tolerance",
    "validate_integer",
]


def validate_callable(function: Any) -> Callable[[float], float]:
    """Checks that ``function`` can be called.

    Raises:
        TypeError: If ``function`` is not callable.
    """
    if not callable(function):
        raise TypeError(f"function must be callable; got {type(function).__name__}.")
    return function


def validate_finite(name: str, value: Any) -> float:
    """Converts ``value`` to float and checks that it is finite.

    Args:
        name: Argument name used in the error message.
        value: The value to check.

    Returns:
        ``value`` as a Python float.

    Raises:
        TypeError: If ``value`` is not a real number.
        ValueError: If ``value`` is NaN or infinite.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number; got {type(value).__name__}.")
    out = float(value)
    if not math.isfinite(out):
        raise ValueError(f"{name} must be finite; got {out!r}.")
    return out


def validate_tolerance(tol: Any) -> float:
    """Checks an adaptive tolerance.

    Zero is accepted: it can never be met, so adaptive refinement runs to
    exhaustion.

    Raises:
        ValueError: If ``tol`` is negative or NaN.
    """
    if isinstance(tol, bool) or not isinstance(tol, numbers.Real):
        raise TypeError(f"tol must be a real number; got {type(tol).__name__}.")
    out = float(tol)
    if math.isnan(out) or out < 0:
        raise ValueError(f"tol must be non-negative; got {out!r}.")
    return out


def validate_integer(name: str, value: Any) -> int:
    """Checks that ``value`` is an integer (not a bool).

    The sign is not checked here; rule-specific callers decide how to
    report a non-positive count.

    Raises:
        TypeError: If ``value`` is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer; got {type(value).__name__}.")
    return int(value)
