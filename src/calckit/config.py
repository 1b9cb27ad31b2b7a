"""Configuration for the adaptive quadrature controller.

The config is immutable and built once; facades receive it by reference
and never modify it.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["AdaptiveConfig", "DEFAULT_ADAPTIVE_CONFIG"]


@dataclass(frozen=True)
class AdaptiveConfig:
    """Stopping parameters for :class:`calckit.integration.adaptive.AdaptiveQuadrature`.

    Attributes:
        max_refinements:
            Maximum number of doubling rounds after the initial estimate.
            Reaching it without meeting the tolerance raises
            :class:`calckit.exceptions.ConvergenceError`.
        near_zero:
            If the magnitude of the previous estimate is below this value,
            convergence is judged on the absolute change instead of the
            relative change.
        max_resolution:
            Hard ceiling on the subinterval (or panel) count. Refinement stops
            as exhausted before a resolution above this would be evaluated.
    """

    max_refinements: int = 20
    near_zero: float = 1e-9
    max_resolution: int = 10_000_000

    def __post_init__(self):
        if int(self.max_refinements) != self.max_refinements or self.max_refinements < 1:
            raise ValueError("max_refinements must be a positive integer.")
        if not self.near_zero >= 0:
            raise ValueError("near_zero must be non-negative.")
        if int(self.max_resolution) != self.max_resolution or self.max_resolution < 1:
            raise ValueError("max_resolution must be a positive integer.")


#: Config used when a caller does not supply one.
DEFAULT_ADAPTIVE_CONFIG = AdaptiveConfig()
