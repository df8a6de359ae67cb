"""
Beta distribution and the laws built on the regularized incomplete beta function.

Contains the beta, PERT, Kumaraswamy, F and Student t distributions.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import betainc, betaincinv, betaln, gammaln, stdtr, stdtrit, xlog1py, xlogy

from pysatl_calc.distributions.distribution import ParameterCache, ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter, ordered_parameters
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def _beta_pdf(alpha: float, beta: float, log_beta_fn: float, z: float) -> float:
    """Standard beta density on ``[0, 1]`` with ``log B(alpha, beta)`` precomputed."""
    return float(np.exp(xlogy(alpha - 1, z) + xlog1py(beta - 1, -z) - log_beta_fn))


def configure_beta_distribution() -> None:
    """
    Configure and register the beta distribution, scaled to ``[a, b]``.
    """

    if DistributionRegister.contains(DistributionName.BETA):
        return

    BETA_DOC = """
    Beta distribution on ``[a, b]`` with shapes ``alpha`` and ``beta``.

    Probability density function, with z = (x - a)/(b - a):
        f(x) = z^(alpha - 1) (1 - z)^(beta - 1) / (B(alpha, beta) (b - a))

    With ``a == b`` the law degenerates to a point mass at ``a``.
    """

    log_beta_fn = ParameterCache(lambda alpha, beta: float(betaln(alpha, beta)))

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if x < a or x > b:
            return 0.0
        if a == b:
            return math.inf if x == a else 0.0
        alpha, beta = values.alpha, values.beta
        z = (x - a) / (b - a)
        return _beta_pdf(alpha, beta, log_beta_fn(alpha, beta), z) / (b - a)

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        if a == b:
            return 1.0
        return float(betainc(values.alpha, values.beta, (x - a) / (b - a)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, b = values.a, values.b
        z = float(betaincinv(values.alpha, values.beta, source.uniform()))
        return a + (b - a) * z

    Beta = ProbabilityDistribution(
        name=DistributionName.BETA,
        display_name="Beta distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("alpha", 0),
            continuous_parameter("beta", 0),
            continuous_parameter("a"),
            continuous_parameter("b"),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b", "a has to be <=b")],
    )
    Beta.__doc__ = BETA_DOC

    DistributionRegister.register(Beta)


def configure_pert_distribution() -> None:
    """
    Configure and register the PERT distribution.

    Beta law on ``[a, c]`` with mode ``b`` and shapes

        alpha = 1 + 4 (b - a)/(c - a),  beta = 1 + 4 (c - b)/(c - a)
    """

    if DistributionRegister.contains(DistributionName.PERT):
        return

    def _shapes(values: ParameterValues) -> tuple[float, float]:
        a, b, c = values.a, values.b, values.c
        return 1 + 4 * (b - a) / (c - a), 1 + 4 * (c - b) / (c - a)

    def pdf(values: ParameterValues, x: float) -> float:
        a, c = values.a, values.c
        if x < a or x > c:
            return 0.0
        if a == c:
            return math.inf if x == a else 0.0
        alpha, beta = _shapes(values)
        z = (x - a) / (c - a)
        return _beta_pdf(alpha, beta, float(betaln(alpha, beta)), z) / (c - a)

    def cdf(values: ParameterValues, x: float) -> float:
        a, c = values.a, values.c
        if x < a:
            return 0.0
        if x > c:
            return 1.0
        if a == c:
            return 1.0
        alpha, beta = _shapes(values)
        return float(betainc(alpha, beta, (x - a) / (c - a)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, c = values.a, values.c
        u = source.uniform()
        if a == c:
            return float(a)
        alpha, beta = _shapes(values)
        return a + (c - a) * float(betaincinv(alpha, beta, u))

    Pert = ProbabilityDistribution(
        name=DistributionName.PERT,
        display_name="PERT distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("a"),
            continuous_parameter("b"),
            continuous_parameter("c"),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b"), ordered_parameters("b", "c")],
    )

    DistributionRegister.register(Pert)


def configure_kumaraswamy_distribution() -> None:
    """
    Configure and register the Kumaraswamy distribution on ``(0, 1)``.

        f(x) = a b x^(a - 1) (1 - x^a)^(b - 1)
        F(x) = 1 - (1 - x^a)^b
    """

    if DistributionRegister.contains(DistributionName.KUMARASWAMY):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if x <= 0 or x >= 1:
            return 0.0
        return float(a * b * np.power(x, a - 1) * np.power(1 - np.power(x, a), b - 1))

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if x <= 0:
            return 0.0
        if x >= 1:
            return 1.0
        return float(-np.expm1(b * np.log1p(-np.power(x, a))))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, b = values.a, values.b
        u = source.uniform()
        return float(np.power(-np.expm1(np.log1p(-u) / b), 1 / a))

    Kumaraswamy = ProbabilityDistribution(
        name=DistributionName.KUMARASWAMY,
        display_name="Kumaraswamy distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("a", 0), continuous_parameter("b", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(Kumaraswamy)


def configure_f_distribution() -> None:
    """
    Configure and register the F distribution with ``m`` and ``n`` degrees of freedom.

    ``Z = m X / (m X + n)`` is beta distributed with shapes ``m/2`` and ``n/2``.
    """

    if DistributionRegister.contains(DistributionName.F):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        m, n = values.m, values.n
        if x <= 0:
            return 0.0
        log_density = (
            m / 2 * np.log(m)
            + n / 2 * np.log(n)
            + xlogy(m / 2 - 1, x)
            - (m + n) / 2 * np.log(m * x + n)
            - betaln(m / 2, n / 2)
        )
        return float(np.exp(log_density))

    def cdf(values: ParameterValues, x: float) -> float:
        m, n = values.m, values.n
        if x <= 0:
            return 0.0
        return float(betainc(m / 2, n / 2, m * x / (m * x + n)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        m, n = values.m, values.n
        z = float(betaincinv(m / 2, n / 2, source.uniform()))
        return n * z / (m * (1 - z))

    F = ProbabilityDistribution(
        name=DistributionName.F,
        display_name="F distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("m", 0), continuous_parameter("n", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(F)


def configure_student_t_distribution() -> None:
    """
    Configure and register the Student t distribution with ``nu`` degrees of freedom,
    shifted by ``mu``.
    """

    if DistributionRegister.contains(DistributionName.STUDENT_T):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        nu = values.nu
        t = x - values.mu
        log_density = (
            gammaln((nu + 1) / 2)
            - gammaln(nu / 2)
            - 0.5 * np.log(nu * math.pi)
            - (nu + 1) / 2 * np.log1p(t**2 / nu)
        )
        return float(np.exp(log_density))

    def cdf(values: ParameterValues, x: float) -> float:
        return float(stdtr(values.nu, x - values.mu))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return values.mu + float(stdtrit(values.nu, source.uniform()))

    StudentT = ProbabilityDistribution(
        name=DistributionName.STUDENT_T,
        display_name="Student t distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("nu", 0), continuous_parameter("mu")],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
    )

    DistributionRegister.register(StudentT)
