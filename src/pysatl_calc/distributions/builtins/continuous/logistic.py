"""
Logistic and Laplace type distributions.

Contains the logistic, log-logistic, hyperbolic secant, Laplace and
log-Laplace distributions.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import expit, logit

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_logistic_distribution() -> None:
    """
    Configure and register the logistic distribution.

        F(x) = 1 / (1 + exp(-(x - mu)/s))
    """

    if DistributionRegister.contains(DistributionName.LOGISTIC):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        s = values.s
        # symmetric in z, exp(-|z|) never overflows
        part = np.exp(-abs((x - values.mu) / s))
        return float(part / (s * (1 + part) ** 2))

    def cdf(values: ParameterValues, x: float) -> float:
        return float(expit((x - values.mu) / values.s))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return float(values.mu + values.s * logit(source.uniform()))

    Logistic = ProbabilityDistribution(
        name=DistributionName.LOGISTIC,
        display_name="Logistic distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("mu"), continuous_parameter("s", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Logistic)


def configure_log_logistic_distribution() -> None:
    """
    Configure and register the log-logistic distribution with scale ``alpha`` and shape ``beta``.

        F(x) = 1 / (1 + (x/alpha)^(-beta)),  x >= 0
    """

    if DistributionRegister.contains(DistributionName.LOG_LOGISTIC):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        alpha, beta = values.alpha, values.beta
        if x < 0:
            return 0.0
        ratio = x / alpha
        return float(beta / alpha * np.power(ratio, beta - 1) / (1 + np.power(ratio, beta)) ** 2)

    def cdf(values: ParameterValues, x: float) -> float:
        alpha, beta = values.alpha, values.beta
        if x < 0:
            return 0.0
        return float(1 / (1 + np.power(x / alpha, -beta)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        u = source.uniform()
        return float(values.alpha * np.power(u / (1 - u), 1 / values.beta))

    LogLogistic = ProbabilityDistribution(
        name=DistributionName.LOG_LOGISTIC,
        display_name="Log-logistic distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("alpha", 0), continuous_parameter("beta", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(LogLogistic)


def configure_hyperbolic_secant_distribution() -> None:
    """
    Configure and register the hyperbolic secant distribution.

        f(x) = 1 / (2 sigma cosh(pi z/2)),  z = (x - mu)/sigma
    """

    if DistributionRegister.contains(DistributionName.HYPERBOLIC_SECANT):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        z = (x - values.mu) / values.sigma
        return float(1 / (2 * values.sigma * np.cosh(math.pi * z / 2)))

    def cdf(values: ParameterValues, x: float) -> float:
        z = (x - values.mu) / values.sigma
        return float(2 / math.pi * np.arctan(np.exp(math.pi * z / 2)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        # u = 2/pi atan(exp(pi z/2))  <=>  z = 2/pi log(tan(pi u/2))
        z = 2 / math.pi * np.log(np.tan(math.pi * source.uniform() / 2))
        return float(values.mu + values.sigma * z)

    HyperbolicSecant = ProbabilityDistribution(
        name=DistributionName.HYPERBOLIC_SECANT,
        display_name="Hyperbolic secant distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("mu"), continuous_parameter("sigma", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(HyperbolicSecant)


def configure_laplace_distribution() -> None:
    """
    Configure and register the Laplace distribution.

        f(x) = exp(-|x - mu|/sigma) / (2 sigma)
    """

    if DistributionRegister.contains(DistributionName.LAPLACE):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        sigma = values.sigma
        return float(np.exp(-abs(x - values.mu) / sigma) / (2 * sigma))

    def cdf(values: ParameterValues, x: float) -> float:
        shift = x - values.mu
        return float(0.5 - 0.5 * np.sign(shift) * np.expm1(-abs(shift) / values.sigma))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        centered = source.uniform() - 0.5
        return float(
            values.mu - values.sigma * np.sign(centered) * np.log1p(-2 * abs(centered))
        )

    Laplace = ProbabilityDistribution(
        name=DistributionName.LAPLACE,
        display_name="Laplace distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("mu"), continuous_parameter("sigma", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Laplace)


def configure_log_laplace_distribution() -> None:
    """
    Configure and register the log-Laplace distribution with shape ``c``, shifted by ``s``.

    With ``y = x - s``:

        f(x) = c/2 y^(c - 1)   for 0 < y < 1
        f(x) = c/2 y^(-c - 1)  for y >= 1
    """

    if DistributionRegister.contains(DistributionName.LOG_LAPLACE):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        c = values.c
        y = x - values.s
        if y <= 0:
            return 0.0
        if y < 1:
            return float(c / 2 * np.power(y, c - 1))
        return float(c / 2 * np.power(y, -c - 1))

    def cdf(values: ParameterValues, x: float) -> float:
        c = values.c
        y = x - values.s
        if y <= 0:
            return 0.0
        if y < 1:
            return float(0.5 * np.power(y, c))
        return float(1 - 0.5 * np.power(y, -c))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        c, s = values.c, values.s
        u = source.uniform()
        if u < 0.5:
            return float(s + np.power(2 * u, 1 / c))
        return float(s + np.power(2 * (1 - u), -1 / c))

    LogLaplace = ProbabilityDistribution(
        name=DistributionName.LOG_LAPLACE,
        display_name="Log-Laplace distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("c", 0), continuous_parameter("s")],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(LogLaplace)
