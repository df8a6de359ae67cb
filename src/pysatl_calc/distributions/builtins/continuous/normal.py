"""
Normal distribution and the laws derived from it.

Contains the normal, log-normal, half-normal, Johnson SU, fatigue life
(Birnbaum-Saunders), inverse Gaussian and Levy distributions.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import erf, erfc, erfinv, log_ndtr, ndtr, ndtri

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.special import std_normal_pdf
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_normal_distribution() -> None:
    """
    Configure and register the Normal distribution.
    """

    if DistributionRegister.contains(DistributionName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    Parameters ``mu`` (mean) and ``sigma`` (standard deviation, ``sigma >= 0``).
    With ``sigma = 0`` the law degenerates to a point mass at ``mu``.

    Probability density function:
        f(x) = 1/(sigma * sqrt(2 pi)) * exp(-(x - mu)^2 / (2 sigma^2))
    """

    def pdf(values: ParameterValues, x: float) -> float:
        """
        Probability density function for normal distribution.
            - For sigma == 0: returns inf at mu, 0 elsewhere
        """
        mu, sigma = values.mu, values.sigma
        if sigma == 0:
            return math.inf if x == mu else 0.0
        return std_normal_pdf((x - mu) / sigma) / sigma

    def cdf(values: ParameterValues, x: float) -> float:
        mu, sigma = values.mu, values.sigma
        if sigma == 0:
            return 0.0 if x < mu else 1.0
        return float(ndtr((x - mu) / sigma))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return source.gaussian(values.mu, values.sigma)

    Normal = ProbabilityDistribution(
        name=DistributionName.NORMAL,
        display_name="Normal distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("mu"),
            continuous_parameter("sigma", 0, True),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )
    Normal.__doc__ = NORMAL_DOC

    DistributionRegister.register(Normal)


def configure_log_normal_distribution() -> None:
    """
    Configure and register the log-normal distribution.

    Parametrized by the ``mean`` and standard deviation ``std`` of the
    distribution itself. The parameters of the underlying normal law are

        sigma^2 = log(1 + (std/mean)^2),  mu = log(mean) - sigma^2/2
    """

    if DistributionRegister.contains(DistributionName.LOG_NORMAL):
        return

    def _underlying(values: ParameterValues) -> tuple[float, float]:
        sigma2 = np.log1p((values.std / values.mean) ** 2)
        return np.log(values.mean) - sigma2 / 2, np.sqrt(sigma2)

    def pdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        if values.std == 0:
            return math.inf if x == values.mean else 0.0
        mu, sigma = _underlying(values)
        return std_normal_pdf((np.log(x) - mu) / sigma) / (sigma * x)

    def cdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        if values.std == 0:
            return 0.0 if x < values.mean else 1.0
        mu, sigma = _underlying(values)
        return float(ndtr((np.log(x) - mu) / sigma))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        if values.std == 0:
            return float(values.mean)
        mu, sigma = _underlying(values)
        return float(np.exp(source.gaussian(mu, sigma)))

    LogNormal = ProbabilityDistribution(
        name=DistributionName.LOG_NORMAL,
        display_name="Log-normal distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("mean", 0),
            continuous_parameter("std", 0, True),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(LogNormal)


def configure_half_normal_distribution() -> None:
    """
    Configure and register the half-normal distribution.

    Shifted to start at ``s``; ``mu`` is the mean of ``X - s``. With
    ``theta = 1/mu``:

        f(x) = 2 theta/pi exp(-(x - s)^2 theta^2 / pi),  x >= s
    """

    if DistributionRegister.contains(DistributionName.HALF_NORMAL):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        if x < values.s:
            return 0.0
        theta = 1 / values.mu
        return float(2 * theta / math.pi * np.exp(-((x - values.s) ** 2) * theta**2 / math.pi))

    def cdf(values: ParameterValues, x: float) -> float:
        if x < values.s:
            return 0.0
        theta = 1 / values.mu
        return float(erf((x - values.s) * theta / math.sqrt(math.pi)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        sigma = values.mu * math.sqrt(math.pi / 2)
        return values.s + sigma * math.sqrt(2) * float(erfinv(source.uniform()))

    HalfNormal = ProbabilityDistribution(
        name=DistributionName.HALF_NORMAL,
        display_name="Half-normal distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("s"), continuous_parameter("mu", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(HalfNormal)


def configure_johnson_su_distribution() -> None:
    """
    Configure and register the Johnson SU distribution.

    ``gamma + delta asinh((X - xi)/lambda)`` is standard normal.
    """

    if DistributionRegister.contains(DistributionName.JOHNSON_SU):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        lam, delta = values["lambda"], values.delta
        frac = (x - values.xi) / lam
        z = values.gamma + delta * np.arcsinh(frac)
        return delta / (lam * np.sqrt(1 + frac**2)) * std_normal_pdf(z)

    def cdf(values: ParameterValues, x: float) -> float:
        z = values.gamma + values.delta * np.arcsinh((x - values.xi) / values["lambda"])
        return float(ndtr(z))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        z = source.gaussian()
        return float(values["lambda"] * np.sinh((z - values.gamma) / values.delta) + values.xi)

    JohnsonSU = ProbabilityDistribution(
        name=DistributionName.JOHNSON_SU,
        display_name="Johnson SU distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("gamma", 0),
            continuous_parameter("xi", 0),
            continuous_parameter("delta", 0),
            continuous_parameter("lambda", 0),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(JohnsonSU)


def configure_fatigue_life_distribution() -> None:
    """
    Configure and register the fatigue life (Birnbaum-Saunders) distribution.

    With ``t = (x - mu)/beta``:

        F(x) = Phi((sqrt(t) - sqrt(1/t)) / gamma),  x > mu
    """

    if DistributionRegister.contains(DistributionName.FATIGUE_LIFE):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        mu, beta, gamma = values.mu, values.beta, values.gamma
        if x <= mu:
            return 0.0
        t = (x - mu) / beta
        root, inverse_root = np.sqrt(t), np.sqrt(1 / t)
        return (root + inverse_root) / (2 * gamma * (x - mu)) * std_normal_pdf(
            (root - inverse_root) / gamma
        )

    def cdf(values: ParameterValues, x: float) -> float:
        mu, beta, gamma = values.mu, values.beta, values.gamma
        if x <= mu:
            return 0.0
        t = (x - mu) / beta
        return float(ndtr((np.sqrt(t) - np.sqrt(1 / t)) / gamma))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        half_z = values.gamma * float(ndtri(source.uniform())) / 2
        return float(values.mu + values.beta * (half_z + np.sqrt(half_z**2 + 1)) ** 2)

    FatigueLife = ProbabilityDistribution(
        name=DistributionName.FATIGUE_LIFE,
        display_name="Fatigue life distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("mu"),
            continuous_parameter("beta", 0),
            continuous_parameter("gamma", 0),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(FatigueLife)


def configure_inverse_gaussian_distribution() -> None:
    """
    Configure and register the inverse Gaussian distribution.

        f(x) = sqrt(lambda/(2 pi x^3)) exp(-lambda (x - mu)^2 / (2 mu^2 x)),  x > 0

    Random numbers are obtained by inverting the cdf numerically.
    """

    if DistributionRegister.contains(DistributionName.INVERSE_GAUSSIAN):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        lam, mu = values["lambda"], values.mu
        if x <= 0:
            return 0.0
        return float(
            np.sqrt(lam / (2 * math.pi * x**3)) * np.exp(-lam * (x - mu) ** 2 / (2 * mu**2 * x))
        )

    def cdf(values: ParameterValues, x: float) -> float:
        lam, mu = values["lambda"], values.mu
        if x <= 0:
            return 0.0
        root = np.sqrt(lam / x)
        # exp(2 lambda/mu) Phi(.) overflows for large lambda/mu, so it is summed in log space
        tail = np.exp(2 * lam / mu + log_ndtr(-root * (x / mu + 1)))
        return float(ndtr(root * (x / mu - 1)) + tail)

    InverseGaussian = ProbabilityDistribution(
        name=DistributionName.INVERSE_GAUSSIAN,
        display_name="Inverse Gaussian distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("lambda", 0), continuous_parameter("mu", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
        },
    )

    DistributionRegister.register(InverseGaussian)


def configure_levy_distribution() -> None:
    """
    Configure and register the Levy distribution.

        f(x) = sqrt(gamma/(2 pi)) exp(-gamma/(2(x - mu))) / (x - mu)^(3/2),  x > mu
        F(x) = erfc(sqrt(gamma/(2(x - mu))))
    """

    if DistributionRegister.contains(DistributionName.LEVY):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        mu, gamma = values.mu, values.gamma
        if x <= mu:
            return 0.0
        shift = x - mu
        return float(
            np.sqrt(gamma / (2 * math.pi)) * np.exp(-gamma / (2 * shift)) / np.power(shift, 1.5)
        )

    def cdf(values: ParameterValues, x: float) -> float:
        mu, gamma = values.mu, values.gamma
        if x <= mu:
            return 0.0
        return float(erfc(np.sqrt(gamma / (2 * (x - mu)))))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        z = float(ndtri(1 - source.uniform() / 2))
        return values.mu + values.gamma / z**2

    Levy = ProbabilityDistribution(
        name=DistributionName.LEVY,
        display_name="Levy distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("mu"), continuous_parameter("gamma", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Levy)
