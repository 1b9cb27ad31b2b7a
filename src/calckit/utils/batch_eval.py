"""Batch evaluation of a real function over a grid of abscissas."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

__all__ = ["eval_points"]


def eval_points(
    func: Callable[[float], float],
    xs: Sequence[float] | NDArray[np.floating],
) -> NDArray[np.float64]:
    """Evaluates ``func`` at each point of a 1D grid.

    The function is called once per point with a Python float, so plain
    ``math``-based callables work as well as NumPy ufuncs. Non-finite
    values are returned as they are.

    Args:
        func: Callable taking a single float and returning a real scalar.
        xs: 1D sequence of points at which to evaluate ``func``.

    Returns:
        A float array of function values, one per point.

    Raises:
        ValueError: If ``xs`` is not 1D.
    """
    xs_arr = np.asarray(xs, dtype=float)
    if xs_arr.ndim != 1:
        raise ValueError(f"xs must be 1D; got ndim={xs_arr.ndim}.")
    return np.fromiter(
        (func(x) for x in xs_arr.tolist()),
        dtype=float,
        count=xs_arr.size,
    )
