"""Numerical utilities."""

from __future__ import annotations

import math

__all__ = [
    "successive_change",
    "has_converged",
    "next_legal_resolution",
]


def successive_change(current: float, previous: float, near_zero: float = 1e-9) -> float:
    """Computes the change between two successive estimates.

    The change is relative to ``previous`` unless ``|previous|`` is below
    ``near_zero``, in which case the absolute change is returned.

    Args:
        current: The latest estimate.
        previous: The estimate before it.
        near_zero: Threshold below which ``previous`` counts as zero.

    Returns:
        The (relative or absolute) change as a non-negative float, or NaN
        if either estimate is NaN.
    """
    diff = abs(current - previous)
    if abs(previous) < near_zero:
        return diff
    return diff / abs(previous)


def has_converged(
    current: float,
    previous: float,
    tol: float,
    near_zero: float = 1e-9,
) -> bool:
    """Returns True if two successive estimates agree within ``tol``.

    The comparison is strict, so ``tol=0`` never converges. A NaN change
    never converges either.
    """
    change = successive_change(current, previous, near_zero)
    return not math.isnan(change) and change < tol


def next_legal_resolution(n: int, multiple_of: int, minimum: int = 1) -> int:
    """Rounds ``n`` up to the next value that satisfies a divisibility rule.

    Args:
        n: Candidate resolution.
        multiple_of: The resolution must be a multiple of this.
        minimum: Smallest acceptable resolution.

    Returns:
        The smallest integer ``m >= max(n, minimum)`` with ``m % multiple_of == 0``.

    Examples:
        >>> next_legal_resolution(6, 4)
        8
        >>> next_legal_resolution(6, 3)
        6
    """
    if multiple_of < 1:
        raise ValueError("multiple_of must be a positive integer.")
    n = max(int(n), int(minimum))
    return -(-n // multiple_of) * multiple_of
