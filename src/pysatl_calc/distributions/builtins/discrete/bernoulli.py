"""
Distributions built from Bernoulli trials.

Contains the Bernoulli, Rademacher, binomial, geometric and negative binomial
distributions. All of them have closed-form cumulative distribution functions.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import bdtr, nbdtr, xlog1py, xlogy

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter, discrete_parameter
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.distributions.support import IntegerSupport
from pysatl_calc.special import log_binom
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_binomial_distribution() -> None:
    """
    Configure and register the binomial distribution.
    """

    if DistributionRegister.contains(DistributionName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in ``n`` independent trials with success probability ``p``.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1 - p)^(n - k),  k = 0, ..., n
    """

    def pmf(values: ParameterValues, k: float) -> float:
        n, p = values.n, values.p
        if k < 0 or k > n:
            return 0.0
        return float(np.exp(log_binom(n, k) + xlogy(k, p) + xlog1py(n - k, -p)))

    def cdf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        if k >= values.n:
            return 1.0
        return float(bdtr(k, values.n, values.p))

    def _support(values: ParameterValues) -> IntegerSupport:
        return IntegerSupport(0, values.n)

    Binomial = ProbabilityDistribution(
        name=DistributionName.BINOMIAL,
        display_name="Binomial distribution",
        kind=Kind.DISCRETE,
        parameters=[
            discrete_parameter("n", 1),
            continuous_parameter("p", 0, True, 1, True),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parameters=_support,
    )
    Binomial.__doc__ = BINOMIAL_DOC

    DistributionRegister.register(Binomial)


def configure_geometric_distribution() -> None:
    """
    Configure and register the geometric distribution.

    Number of failures before the first success:

        P(X = k) = p (1 - p)^k,  k = 0, 1, ...
    """

    if DistributionRegister.contains(DistributionName.GEOMETRIC):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        p = values.p
        return float(p * np.exp(xlog1py(k, -p)))

    def cdf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        return float(-np.expm1((k + 1) * np.log1p(-values.p)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        p = values.p
        if p == 0:
            return math.inf
        u = source.uniform()
        # smallest k with 1 - (1 - p)^(k + 1) >= u
        k = np.ceil(np.log1p(-u) / np.log1p(-p)) - 1
        return float(max(0.0, k))

    Geometric = ProbabilityDistribution(
        name=DistributionName.GEOMETRIC,
        display_name="Geometric distribution",
        kind=Kind.DISCRETE,
        parameters=[continuous_parameter("p", 0, True, 1, True)],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        support_by_parameters=lambda _: IntegerSupport(0, None),
    )

    DistributionRegister.register(Geometric)


def configure_negative_binomial_distribution() -> None:
    """
    Configure and register the negative binomial distribution.

    Number of failures before the ``r``-th success:

        P(X = k) = C(k + r - 1, k) p^r (1 - p)^k,  k = 0, 1, ...
    """

    if DistributionRegister.contains(DistributionName.NEGATIVE_BINOMIAL):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        r, p = values.r, values.p
        return float(np.exp(log_binom(k + r - 1, k) + xlogy(r, p) + xlog1py(k, -p)))

    def cdf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        return float(nbdtr(k, values.r, values.p))

    NegativeBinomial = ProbabilityDistribution(
        name=DistributionName.NEGATIVE_BINOMIAL,
        display_name="Negative binomial distribution",
        kind=Kind.DISCRETE,
        parameters=[
            discrete_parameter("r", 1),
            continuous_parameter("p", 0, True, 1, True),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parameters=lambda _: IntegerSupport(0, None),
    )

    DistributionRegister.register(NegativeBinomial)


def configure_rademacher_distribution() -> None:
    """
    Configure and register the Rademacher distribution (``-1`` or ``1`` with equal mass).
    """

    if DistributionRegister.contains(DistributionName.RADEMACHER):
        return

    def pmf(_: ParameterValues, k: float) -> float:
        return 0.5 if k in (-1, 1) else 0.0

    def cdf(_: ParameterValues, k: float) -> float:
        if k < -1:
            return 0.0
        if k < 1:
            return 0.5
        return 1.0

    def sampler(_: ParameterValues, source: RandomSource) -> int:
        return 1 if source.uniform() >= 0.5 else -1

    Rademacher = ProbabilityDistribution(
        name=DistributionName.RADEMACHER,
        display_name="Rademacher distribution",
        kind=Kind.DISCRETE,
        parameters=[],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        support_by_parameters=lambda _: IntegerSupport(-1, 1),
    )

    DistributionRegister.register(Rademacher)


def configure_bernoulli_distribution() -> None:
    """
    Configure and register the Bernoulli distribution.
    """

    if DistributionRegister.contains(DistributionName.BERNOULLI):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        if k == 0:
            return 1.0 - values.p
        if k == 1:
            return float(values.p)
        return 0.0

    def cdf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        if k < 1:
            return 1.0 - values.p
        return 1.0

    def sampler(values: ParameterValues, source: RandomSource) -> int:
        return 1 if source.uniform() < values.p else 0

    Bernoulli = ProbabilityDistribution(
        name=DistributionName.BERNOULLI,
        display_name="Bernoulli distribution",
        kind=Kind.DISCRETE,
        parameters=[continuous_parameter("p", 0, False, 1, False)],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        support_by_parameters=lambda _: IntegerSupport(0, 1),
    )

    DistributionRegister.register(Bernoulli)
