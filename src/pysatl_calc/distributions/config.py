"""
Numerical settings shared by the generic fallbacks.

All constants of the summation and bisection fallbacks and the safety caps of
rejection samplers are collected in :class:`NumericalSettings`, so a caller can
trade precision for speed without touching distribution code.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class NumericalSettings:
    """
    Constants of the generic numerical fallbacks.

    Parameters
    ----------
    discrete_lower_sentinel : int
        First point summed by discrete fallbacks for laws without a known
        support minimum.
    bisection_limit : float
        The continuous bisection sampler searches ``[-limit, limit]``.
    bisection_tolerance : float
        Bisection stops once the bracket is narrower than this width.
    max_summation_terms : int
        Upper bound on the number of mass terms a discrete fallback adds.
    summation_tolerance : float
        Discrete summation stops once the accumulated mass reaches
        ``1 - summation_tolerance``.
    max_rejection_iterations : int
        Upper bound on the candidates a rejection sampler draws before it
        gives up with :class:`~pysatl_calc.errors.SamplingError`.
    """

    discrete_lower_sentinel: int = -10
    bisection_limit: float = 10_000_000.0
    bisection_tolerance: float = 0.001
    max_summation_terms: int = 1_000_000
    summation_tolerance: float = 1e-12
    max_rejection_iterations: int = 10_000

    def __post_init__(self) -> None:
        if self.bisection_limit <= 0:
            raise ValueError("bisection_limit must be positive.")
        if self.bisection_tolerance <= 0:
            raise ValueError("bisection_tolerance must be positive.")
        if self.max_summation_terms < 1:
            raise ValueError("max_summation_terms must be at least 1.")
        if not 0 <= self.summation_tolerance < 1:
            raise ValueError("summation_tolerance must lie in [0, 1).")
        if self.max_rejection_iterations < 1:
            raise ValueError("max_rejection_iterations must be at least 1.")


DEFAULT_SETTINGS = NumericalSettings()


__all__ = [
    "NumericalSettings",
    "DEFAULT_SETTINGS",
]
