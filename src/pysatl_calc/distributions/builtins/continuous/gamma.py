"""
Gamma distribution and related laws on the positive half-line.

Contains the exponential, gamma, Erlang, chi, chi-squared, inverse gamma,
log-gamma, Maxwell-Boltzmann and Rayleigh distributions. Densities are
evaluated in log space so that large shapes do not overflow; random numbers
are drawn through the inverse regularized incomplete gamma function.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import erf, gammainc, gammaincc, gammainccinv, gammaincinv, gammaln, xlogy

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter, discrete_parameter
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def _gamma_pdf(shape: float, scale: float, x: float) -> float:
    """Gamma density with the given shape and scale for ``x > 0``."""
    log_density = (
        xlogy(shape - 1, x) - x / scale - shape * np.log(scale) - gammaln(shape)
    )
    return float(np.exp(log_density))


def configure_exponential_distribution() -> None:
    """
    Configure and register the Exponential distribution.
    """

    if DistributionRegister.contains(DistributionName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    Waiting time between events of a Poisson process with rate ``lambda``.

    Probability density function:
        f(x) = lambda * exp(-lambda x) for x >= 0, 0 otherwise

    Cumulative distribution function:
        F(x) = 1 - exp(-lambda x) for x >= 0, 0 otherwise
    """

    def pdf(values: ParameterValues, x: float) -> float:
        lam = values["lambda"]
        if x < 0:
            return 0.0
        return float(lam * np.exp(-lam * x))

    def cdf(values: ParameterValues, x: float) -> float:
        if x < 0:
            return 0.0
        return float(-np.expm1(-values["lambda"] * x))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        # F = 1 - exp(-lambda x)  <=>  x = -log(1 - F)/lambda
        return float(-np.log1p(-source.uniform()) / values["lambda"])

    Exponential = ProbabilityDistribution(
        name=DistributionName.EXPONENTIAL,
        display_name="Exponential distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("lambda", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    DistributionRegister.register(Exponential)


def configure_gamma_distribution() -> None:
    """
    Configure and register the gamma distribution with shape ``alpha`` and scale ``beta``.

        f(x) = x^(alpha - 1) exp(-x/beta) / (beta^alpha Gamma(alpha)),  x > 0
    """

    if DistributionRegister.contains(DistributionName.GAMMA):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return _gamma_pdf(values.alpha, values.beta, x)

    def cdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(gammainc(values.alpha, x / values.beta))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return values.beta * float(gammaincinv(values.alpha, source.uniform()))

    Gamma = ProbabilityDistribution(
        name=DistributionName.GAMMA,
        display_name="Gamma distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("alpha", 0), continuous_parameter("beta", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Gamma)


def configure_erlang_distribution() -> None:
    """
    Configure and register the Erlang distribution.

    Gamma distribution with integer shape ``n``; ``lambda`` is the scale.
    """

    if DistributionRegister.contains(DistributionName.ERLANG):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return _gamma_pdf(values.n, values["lambda"], x)

    def cdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(gammainc(values.n, x / values["lambda"]))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return values["lambda"] * float(gammaincinv(values.n, source.uniform()))

    Erlang = ProbabilityDistribution(
        name=DistributionName.ERLANG,
        display_name="Erlang distribution",
        kind=Kind.CONTINUOUS,
        parameters=[discrete_parameter("n", 1), continuous_parameter("lambda", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Erlang)


def configure_chi_distribution() -> None:
    """
    Configure and register the chi distribution with ``k`` degrees of freedom.

        f(x) = x^(k - 1) exp(-x^2/2) / (2^(k/2 - 1) Gamma(k/2)),  x > 0
    """

    if DistributionRegister.contains(DistributionName.CHI):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        k = values.k
        if x <= 0:
            return 0.0
        log_density = xlogy(k - 1, x) - x**2 / 2 - (k / 2 - 1) * math.log(2) - gammaln(k / 2)
        return float(np.exp(log_density))

    def cdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(gammainc(values.k / 2, x**2 / 2))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return float(np.sqrt(2 * gammaincinv(values.k / 2, source.uniform())))

    Chi = ProbabilityDistribution(
        name=DistributionName.CHI,
        display_name="Chi distribution",
        kind=Kind.CONTINUOUS,
        parameters=[discrete_parameter("k", 1)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Chi)


def configure_chi_squared_distribution() -> None:
    """
    Configure and register the chi-squared distribution with ``k`` degrees of freedom.
    """

    if DistributionRegister.contains(DistributionName.CHI_SQUARED):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return _gamma_pdf(values.k / 2, 2.0, x)

    def cdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(gammainc(values.k / 2, x / 2))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return 2 * float(gammaincinv(values.k / 2, source.uniform()))

    ChiSquared = ProbabilityDistribution(
        name=DistributionName.CHI_SQUARED,
        display_name="Chi-squared distribution",
        kind=Kind.CONTINUOUS,
        parameters=[discrete_parameter("k", 1)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(ChiSquared)


def configure_inverse_gamma_distribution() -> None:
    """
    Configure and register the inverse gamma distribution.

        f(x) = beta^alpha / Gamma(alpha) x^(-alpha - 1) exp(-beta/x),  x > 0
    """

    if DistributionRegister.contains(DistributionName.INVERSE_GAMMA):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        alpha, beta = values.alpha, values.beta
        if x <= 0:
            return 0.0
        log_density = (
            alpha * np.log(beta) - gammaln(alpha) - (alpha + 1) * np.log(x) - beta / x
        )
        return float(np.exp(log_density))

    def cdf(values: ParameterValues, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(gammaincc(values.alpha, values.beta / x))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return values.beta / float(gammainccinv(values.alpha, source.uniform()))

    InverseGamma = ProbabilityDistribution(
        name=DistributionName.INVERSE_GAMMA,
        display_name="Inverse gamma distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("alpha", 0), continuous_parameter("beta", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(InverseGamma)


def configure_log_gamma_distribution() -> None:
    """
    Configure and register the log-gamma distribution.

    ``b log(X)`` is gamma distributed with shape ``a``:

        f(x) = b^a / Gamma(a) x^(-(b + 1)) log(x)^(a - 1),  x >= 1
    """

    if DistributionRegister.contains(DistributionName.LOG_GAMMA):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if x < 1:
            return 0.0
        log_x = np.log(x)
        log_density = a * np.log(b) - gammaln(a) - (b + 1) * log_x + xlogy(a - 1, log_x)
        return float(np.exp(log_density))

    def cdf(values: ParameterValues, x: float) -> float:
        if x < 1:
            return 0.0
        return float(gammainc(values.a, values.b * np.log(x)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return float(np.exp(gammaincinv(values.a, source.uniform()) / values.b))

    LogGamma = ProbabilityDistribution(
        name=DistributionName.LOG_GAMMA,
        display_name="Log-gamma distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("a", 0), continuous_parameter("b", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(LogGamma)


def configure_maxwell_boltzmann_distribution() -> None:
    """
    Configure and register the Maxwell-Boltzmann distribution.

        f(x) = sqrt(2/pi) x^2 exp(-x^2/(2 a^2)) / a^3,  x >= 0
    """

    if DistributionRegister.contains(DistributionName.MAXWELL_BOLTZMANN):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a = values.a
        if x < 0:
            return 0.0
        return float(math.sqrt(2 / math.pi) * x**2 * np.exp(-(x**2) / (2 * a**2)) / a**3)

    def cdf(values: ParameterValues, x: float) -> float:
        a = values.a
        if x < 0:
            return 0.0
        return float(
            erf(x / (math.sqrt(2) * a))
            - math.sqrt(2 / math.pi) * x * np.exp(-(x**2) / (2 * a**2)) / a
        )

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        # X^2 / (2 a^2) is gamma distributed with shape 3/2
        return values.a * float(np.sqrt(2 * gammaincinv(1.5, source.uniform())))

    MaxwellBoltzmann = ProbabilityDistribution(
        name=DistributionName.MAXWELL_BOLTZMANN,
        display_name="Maxwell-Boltzmann distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("a", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(MaxwellBoltzmann)


def configure_rayleigh_distribution() -> None:
    """
    Configure and register the Rayleigh distribution parametrized by its mean ``m``.

    The scale is ``sigma = sqrt(2/pi) m``:

        f(x) = x/sigma^2 exp(-x^2/(2 sigma^2)),  x >= 0
    """

    if DistributionRegister.contains(DistributionName.RAYLEIGH):
        return

    def _sigma(values: ParameterValues) -> float:
        return math.sqrt(2 / math.pi) * values.m

    def pdf(values: ParameterValues, x: float) -> float:
        if x < 0:
            return 0.0
        sigma2 = _sigma(values) ** 2
        return float(x / sigma2 * np.exp(-(x**2) / (2 * sigma2)))

    def cdf(values: ParameterValues, x: float) -> float:
        if x < 0:
            return 0.0
        sigma2 = _sigma(values) ** 2
        return float(-np.expm1(-(x**2) / (2 * sigma2)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return _sigma(values) * float(np.sqrt(-2 * np.log1p(-source.uniform())))

    Rayleigh = ProbabilityDistribution(
        name=DistributionName.RAYLEIGH,
        display_name="Rayleigh distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("m", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Rayleigh)
