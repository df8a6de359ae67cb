"""
Distributions on the positive integers defined by series.

Contains the zeta, Gauss-Kuzmin and logarithmic distributions.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import zeta

from pysatl_calc.distributions.distribution import ParameterCache, ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter, discrete_parameter
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.distributions.support import IntegerSupport
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_zeta_distribution() -> None:
    """
    Configure and register the zeta distribution.

        P(X = k) = k^(-s) / zeta(s),  k = 1, 2, ...

    The normalizing series diverges for ``s = 1``, so ``s`` starts at ``2``.
    """

    if DistributionRegister.contains(DistributionName.ZETA):
        return

    riemann_zeta = ParameterCache(lambda s: float(zeta(s)))

    def pmf(values: ParameterValues, k: float) -> float:
        if k <= 0:
            return 0.0
        s = values.s
        return float(np.power(k, -float(s)) / riemann_zeta(s))

    def cdf(values: ParameterValues, k: float) -> float:
        s = values.s
        if k < 1:
            return 0.0
        # Hurwitz zeta(s, k + 1) is the tail sum over j > k
        return float(1.0 - zeta(s, k + 1) / riemann_zeta(s))

    Zeta = ProbabilityDistribution(
        name=DistributionName.ZETA,
        display_name="Zeta distribution",
        kind=Kind.DISCRETE,
        parameters=[discrete_parameter("s", 2)],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parameters=lambda _: IntegerSupport(1, None),
    )

    DistributionRegister.register(Zeta)


def configure_gauss_kuzmin_distribution() -> None:
    """
    Configure and register the Gauss-Kuzmin distribution.

    Limit law of the continued fraction coefficients of a uniform number:

        P(X = k) = -log2(1 - 1/(k + 1)^2),  k = 1, 2, ...
    """

    if DistributionRegister.contains(DistributionName.GAUSS_KUZMIN):
        return

    def pmf(_: ParameterValues, k: float) -> float:
        if k <= 0:
            return 0.0
        return float(-np.log1p(-1.0 / (k + 1) ** 2) / math.log(2.0))

    def cdf(_: ParameterValues, k: float) -> float:
        if k < 1:
            return 0.0
        return float(1.0 - np.log1p(1.0 / (k + 1)) / math.log(2.0))

    def sampler(_: ParameterValues, source: RandomSource) -> float:
        u = source.uniform()
        # smallest k with log2(1 + 1/(k + 1)) <= 1 - u
        k = np.ceil(1.0 / np.expm1((1.0 - u) * math.log(2.0))) - 1
        return float(max(1.0, k))

    GaussKuzmin = ProbabilityDistribution(
        name=DistributionName.GAUSS_KUZMIN,
        display_name="Gauss-Kuzmin distribution",
        kind=Kind.DISCRETE,
        parameters=[],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        support_by_parameters=lambda _: IntegerSupport(1, None),
    )

    DistributionRegister.register(GaussKuzmin)


def configure_logarithmic_distribution() -> None:
    """
    Configure and register the logarithmic distribution.

        P(X = k) = -p^k / (k log(1 - p)),  k = 1, 2, ...
    """

    if DistributionRegister.contains(DistributionName.LOGARITHMIC):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        if k <= 0:
            return 0.0
        p = values.p
        return float(-np.power(p, k) / (k * np.log1p(-p)))

    Logarithmic = ProbabilityDistribution(
        name=DistributionName.LOGARITHMIC,
        display_name="Logarithmic distribution",
        kind=Kind.DISCRETE,
        parameters=[continuous_parameter("p", 0, False, 1, False)],
        distr_characteristics={CharacteristicName.PDF: pmf},
        support_by_parameters=lambda _: IntegerSupport(1, None),
    )

    DistributionRegister.register(Logarithmic)
