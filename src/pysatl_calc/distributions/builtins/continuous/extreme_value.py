"""
Extreme value and heavy-tailed power-law distributions.

Contains the Gumbel, Frechet, Weibull and Pareto distributions. All of them
have closed-form quantile functions used for sampling.
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


def configure_gumbel_distribution() -> None:
    """
    Configure and register the Gumbel distribution parametrized by ``mean`` and ``std``.

    Location and scale are recovered as

        beta = std sqrt(6)/pi,  mu = mean - beta * gamma_E

    where ``gamma_E`` is the Euler-Mascheroni constant.
    """

    if DistributionRegister.contains(DistributionName.GUMBEL):
        return

    def _location_scale(values: ParameterValues) -> tuple[float, float]:
        beta = values.std * math.sqrt(6) / math.pi
        return values.mean - beta * np.euler_gamma, beta

    def pdf(values: ParameterValues, x: float) -> float:
        mu, beta = _location_scale(values)
        z = (x - mu) / beta
        return float(np.exp(-z - np.exp(-z)) / beta)

    def cdf(values: ParameterValues, x: float) -> float:
        mu, beta = _location_scale(values)
        return float(np.exp(-np.exp(-(x - mu) / beta)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        mu, beta = _location_scale(values)
        # p = exp(-exp(-z))  <=>  z = -log(-log(p))
        z = -np.log(-np.log(source.uniform()))
        return float(mu + beta * z)

    Gumbel = ProbabilityDistribution(
        name=DistributionName.GUMBEL,
        display_name="Gumbel distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("mean"), continuous_parameter("std", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Gumbel)


def configure_frechet_distribution() -> None:
    """
    Configure and register the Frechet distribution.

        F(x) = exp(-((x - delta)/beta)^(-alpha)),  x > delta
    """

    if DistributionRegister.contains(DistributionName.FRECHET):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        delta, beta, alpha = values.delta, values.beta, values.alpha
        if x <= delta:
            return 0.0
        z = (x - delta) / beta
        return float(alpha * np.exp(-np.power(z, -alpha)) / (beta * np.power(z, alpha + 1)))

    def cdf(values: ParameterValues, x: float) -> float:
        delta, beta, alpha = values.delta, values.beta, values.alpha
        if x <= delta:
            return 0.0
        return float(np.exp(-np.power((x - delta) / beta, -alpha)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        u = source.uniform()
        return float(values.delta + values.beta * np.power(-np.log(u), -1 / values.alpha))

    Frechet = ProbabilityDistribution(
        name=DistributionName.FRECHET,
        display_name="Frechet distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("delta"),
            continuous_parameter("beta", 0),
            continuous_parameter("alpha", 0),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Frechet)


def configure_weibull_distribution() -> None:
    """
    Configure and register the Weibull distribution with shape ``beta`` and rate ``lambda``.

        F(x) = 1 - exp(-(lambda x)^beta),  x >= 0
    """

    if DistributionRegister.contains(DistributionName.WEIBULL):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        beta, lam = values.beta, values["lambda"]
        if x < 0:
            return 0.0
        scaled = lam * x
        return float(lam * beta * np.power(scaled, beta - 1) * np.exp(-np.power(scaled, beta)))

    def cdf(values: ParameterValues, x: float) -> float:
        if x < 0:
            return 0.0
        return float(-np.expm1(-np.power(values["lambda"] * x, values.beta)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        u = source.uniform()
        return float(np.power(-np.log1p(-u), 1 / values.beta) / values["lambda"])

    Weibull = ProbabilityDistribution(
        name=DistributionName.WEIBULL,
        display_name="Weibull distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("beta", 0), continuous_parameter("lambda", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Weibull)


def configure_pareto_distribution() -> None:
    """
    Configure and register the Pareto distribution.

        f(x) = alpha xm^alpha / x^(alpha + 1),  x >= xm
    """

    if DistributionRegister.contains(DistributionName.PARETO):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        xm, alpha = values.xm, values.alpha
        if x < xm:
            return 0.0
        return float(alpha / xm * np.power(xm / x, alpha + 1))

    def cdf(values: ParameterValues, x: float) -> float:
        xm, alpha = values.xm, values.alpha
        if x < xm:
            return 0.0
        return float(-np.expm1(alpha * np.log(xm / x)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        # y = 1 - (xm/x)^alpha  <=>  x = xm / (1 - y)^(1/alpha)
        u = source.uniform()
        return float(values.xm / np.power(1 - u, 1 / values.alpha))

    Pareto = ProbabilityDistribution(
        name=DistributionName.PARETO,
        display_name="Pareto distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("xm", 0), continuous_parameter("alpha", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Pareto)
