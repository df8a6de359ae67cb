"""
Generic Fallback Strategies
===========================

Numerical fallbacks a distribution opts into when it has no closed form:

- :func:`discrete_cdf_by_summation`: discrete CDF as a running sum of the mass
  function.
- :class:`SamplingStrategy`: protocol of a single-draw sampler.
- :class:`AnalyticalSamplingStrategy`: wraps a closed-form sampler.
- :class:`CumulativeMassSamplingStrategy`: discrete sampler accumulating mass
  until it exceeds a uniform variate.
- :class:`BisectionSamplingStrategy`: continuous sampler inverting the CDF by
  bisection.

Notes
-----
- Strategies are stateless; randomness comes from the :class:`RandomSource`
  passed to :meth:`SamplingStrategy.sample`.
- Summation loops stop once the mass reaches ``1 - summation_tolerance`` and
  are capped by ``NumericalSettings.max_summation_terms``. The CDF summation
  warns when the cap truncates the result; the sampler raises
  :class:`~pysatl_calc.errors.SamplingError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING, Protocol

from pysatl_calc.distributions.config import DEFAULT_SETTINGS, NumericalSettings
from pysatl_calc.errors import SamplingError

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_calc.distributions.distribution import ProbabilityDistribution
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues
    from pysatl_calc.distributions.support import IntegerSupport
    from pysatl_calc.types import Number


def _truncation_warning(name: str, terms: int) -> None:
    warnings.warn(
        f"{name}: summation stopped after {terms} terms; the result is truncated",
        UserWarning,
        stacklevel=4,
    )


def discrete_cdf_by_summation(
    pmf: Callable[[int], float],
    support: IntegerSupport,
    x: Number,
    settings: NumericalSettings = DEFAULT_SETTINGS,
    name: str = "distribution",
) -> float:
    """
    Cumulative probability ``P(X <= x)`` as the sum of the mass function.

    Parameters
    ----------
    pmf : Callable[[int], float]
        Mass function with parameters already bound.
    support : IntegerSupport
        Support of the law; summation starts at its minimum, or at
        ``settings.discrete_lower_sentinel`` for left-unbounded supports.
    x : Number
        Upper summation limit (floored).
    settings : NumericalSettings, optional
        Sentinel and summation cap.
    name : str, optional
        Name used in the truncation warning.

    Returns
    -------
    float
        The accumulated mass.
    """
    total = 0.0
    terms = 0
    for k in support.iter_leq(x, settings.discrete_lower_sentinel):
        if terms >= settings.max_summation_terms:
            _truncation_warning(name, terms)
            break
        total += pmf(k)
        terms += 1
        if total >= 1.0 - settings.summation_tolerance:
            break
    return total


class SamplingStrategy(Protocol):
    """Protocol for samplers producing one variate per call."""

    def sample(
        self,
        distribution: ProbabilityDistribution,
        values: ParameterValues,
        source: RandomSource,
    ) -> float: ...


class AnalyticalSamplingStrategy(SamplingStrategy):
    """
    Sampler backed by a closed-form inversion or an exact transform.

    Parameters
    ----------
    func : Callable[[ParameterValues, RandomSource], float]
        Function drawing one variate for validated parameters.
    """

    __slots__ = ("func",)

    def __init__(self, func: Callable[[ParameterValues, RandomSource], float]) -> None:
        self.func = func

    def sample(
        self,
        distribution: ProbabilityDistribution,
        values: ParameterValues,
        source: RandomSource,
    ) -> float:
        return self.func(values, source)


class CumulativeMassSamplingStrategy(SamplingStrategy):
    """
    Discrete inverse-transform sampler.

    Draws ``U`` and walks the support upwards, accumulating mass until the sum
    exceeds ``U``. A bounded support whose accumulated mass stays below ``U``
    because of rounding yields its last point.

    Raises
    ------
    SamplingError
        If ``max_summation_terms`` points were summed and the mass is still
        below ``U``.
    """

    __slots__ = ("settings",)

    def __init__(self, settings: NumericalSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def sample(
        self,
        distribution: ProbabilityDistribution,
        values: ParameterValues,
        source: RandomSource,
    ) -> float:
        settings = self.settings
        support = distribution.support_for(values)
        u = source.uniform()

        total = 0.0
        k = support.start(settings.discrete_lower_sentinel)
        terms = 0
        for k in support.iter_points(settings.discrete_lower_sentinel):
            if terms >= settings.max_summation_terms:
                raise SamplingError(
                    f"{distribution.name}: cumulative mass {total:.6g} stayed below"
                    f" {u:.6g} after {terms} terms"
                )
            total += distribution.density_at(values, k)
            terms += 1
            if total > u or total >= 1.0 - settings.summation_tolerance:
                break
        return k


class BisectionSamplingStrategy(SamplingStrategy):
    """
    Continuous inverse-transform sampler solving ``CDF(x) = U`` by bisection.

    The search starts on ``[-bisection_limit, bisection_limit]`` and stops once
    the bracket is narrower than ``bisection_tolerance``; the midpoint of the
    final bracket is returned. If ``U`` lies outside the CDF range on the
    initial bracket, the corresponding bound is returned.
    """

    __slots__ = ("settings",)

    def __init__(self, settings: NumericalSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def sample(
        self,
        distribution: ProbabilityDistribution,
        values: ParameterValues,
        source: RandomSource,
    ) -> float:
        limit = float(self.settings.bisection_limit)
        a, b = -limit, limit
        u = source.uniform()

        if distribution.cumulative_at(values, a) > u:
            return a
        if distribution.cumulative_at(values, b) < u:
            return b

        # about log2(2 * limit / tolerance) halvings
        while b - a > self.settings.bisection_tolerance:
            m = 0.5 * (a + b)
            if distribution.cumulative_at(values, m) > u:
                b = m
            else:
                a = m
        return 0.5 * (a + b)


__all__ = [
    "discrete_cdf_by_summation",
    "SamplingStrategy",
    "AnalyticalSamplingStrategy",
    "CumulativeMassSamplingStrategy",
    "BisectionSamplingStrategy",
]
