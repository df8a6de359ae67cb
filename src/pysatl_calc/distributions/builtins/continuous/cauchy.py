"""
Cauchy distribution, its variants and the Wigner semicircle distribution.

The Cauchy family has arctangent cdfs with closed-form tangent quantiles.
The Wigner semicircle cdf has no elementary inverse, so it is sampled by
numerical inversion.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_cauchy_distribution() -> None:
    """
    Configure and register the Cauchy distribution.
    """

    if DistributionRegister.contains(DistributionName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy distribution with location ``t`` and scale ``s``.

    Probability density function:
        f(x) = s / (pi (s^2 + (x - t)^2))

    Cumulative distribution function:
        F(x) = 1/2 + atan((x - t)/s) / pi

    Neither the mean nor the variance exist.
    """

    def pdf(values: ParameterValues, x: float) -> float:
        s = values.s
        return float(s / (math.pi * (s**2 + (x - values.t) ** 2)))

    def cdf(values: ParameterValues, x: float) -> float:
        return float(0.5 + np.arctan((x - values.t) / values.s) / math.pi)

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        u = source.uniform()
        if u == 0:
            return -math.inf
        return float(values.t + values.s * np.tan(math.pi * (u - 0.5)))

    Cauchy = ProbabilityDistribution(
        name=DistributionName.CAUCHY,
        display_name="Cauchy distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("t"), continuous_parameter("s", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )
    Cauchy.__doc__ = CAUCHY_DOC

    DistributionRegister.register(Cauchy)


def configure_half_cauchy_distribution() -> None:
    """
    Configure and register the half-Cauchy distribution on ``[mu, inf)``.

        F(x) = 2/pi atan((x - mu)/sigma)
    """

    if DistributionRegister.contains(DistributionName.HALF_CAUCHY):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        mu, sigma = values.mu, values.sigma
        if x < mu:
            return 0.0
        return float(2 / (math.pi * sigma) / (1 + ((x - mu) / sigma) ** 2))

    def cdf(values: ParameterValues, x: float) -> float:
        mu, sigma = values.mu, values.sigma
        if x < mu:
            return 0.0
        return float(2 / math.pi * np.arctan((x - mu) / sigma))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return float(values.mu + values.sigma * np.tan(math.pi * source.uniform() / 2))

    HalfCauchy = ProbabilityDistribution(
        name=DistributionName.HALF_CAUCHY,
        display_name="Half-Cauchy distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("mu"), continuous_parameter("sigma", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(HalfCauchy)


def configure_log_cauchy_distribution() -> None:
    """
    Configure and register the log-Cauchy distribution.

    ``log(X)`` is Cauchy distributed with location ``mu`` and scale ``sigma``.
    """

    if DistributionRegister.contains(DistributionName.LOG_CAUCHY):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        mu, sigma = values.mu, values.sigma
        if x <= 0:
            return 0.0
        return float(sigma / (math.pi * x * ((np.log(x) - mu) ** 2 + sigma**2)))

    def cdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(0.5 + np.arctan((np.log(x) - values.mu) / values.sigma) / math.pi)

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        # p = 1/2 + atan((log(x) - mu)/sigma)/pi  <=>  x = exp(mu + sigma tan(pi (p - 1/2)))
        z = np.tan(math.pi * (source.uniform() - 0.5))
        return float(np.exp(values.mu + values.sigma * z))

    LogCauchy = ProbabilityDistribution(
        name=DistributionName.LOG_CAUCHY,
        display_name="Log-Cauchy distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("mu"), continuous_parameter("sigma", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(LogCauchy)


def configure_wigner_semicircle_distribution() -> None:
    """
    Configure and register the Wigner semicircle distribution with center ``m`` and radius ``R``.

        f(x) = 2/(pi R^2) sqrt(R^2 - (x - m)^2),  |x - m| < R

    Random numbers are obtained by inverting the cdf numerically.
    """

    if DistributionRegister.contains(DistributionName.WIGNER_SEMICIRCLE):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        radius = values.R
        y = x - values.m
        if y <= -radius or y >= radius:
            return 0.0
        return float(2 / (math.pi * radius**2) * np.sqrt(radius**2 - y**2))

    def cdf(values: ParameterValues, x: float) -> float:
        radius = values.R
        y = x - values.m
        if y <= -radius:
            return 0.0
        if y >= radius:
            return 1.0
        return float(
            0.5
            + y * np.sqrt(radius**2 - y**2) / (math.pi * radius**2)
            + np.arcsin(y / radius) / math.pi
        )

    WignerSemicircle = ProbabilityDistribution(
        name=DistributionName.WIGNER_SEMICIRCLE,
        display_name="Wigner semicircle distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("m"), continuous_parameter("R", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
        },
    )

    DistributionRegister.register(WignerSemicircle)
