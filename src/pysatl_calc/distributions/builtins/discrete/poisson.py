"""
Poisson-type distributions.

Contains the Poisson, Borel, Planck and Boltzmann distributions.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import gammaln, pdtr, xlogy

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter, discrete_parameter
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.distributions.support import IntegerSupport
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_poisson_distribution() -> None:
    """
    Configure and register the Poisson distribution.
    """

    if DistributionRegister.contains(DistributionName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval when events occur independently at
    the constant average rate ``lambda``.

    Probability mass function:
        P(X = k) = lambda^k e^(-lambda) / k!,  k = 0, 1, ...
    """

    def pmf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        lam = values["lambda"]
        return float(np.exp(xlogy(k, lam) - lam - gammaln(k + 1)))

    def cdf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        return float(pdtr(k, values["lambda"]))

    Poisson = ProbabilityDistribution(
        name=DistributionName.POISSON,
        display_name="Poisson distribution",
        kind=Kind.DISCRETE,
        parameters=[continuous_parameter("lambda", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parameters=lambda _: IntegerSupport(0, None),
    )
    Poisson.__doc__ = POISSON_DOC

    DistributionRegister.register(Poisson)


def configure_borel_distribution() -> None:
    """
    Configure and register the Borel distribution.

    Total progeny of a branching process with Poisson(mu) offspring:

        P(X = k) = e^(-mu k) (mu k)^(k - 1) / k!,  k = 1, 2, ...
    """

    if DistributionRegister.contains(DistributionName.BOREL):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        if k <= 0:
            return 0.0
        mu = values.mu
        return float(np.exp(-mu * k + xlogy(k - 1, mu * k) - gammaln(k + 1)))

    Borel = ProbabilityDistribution(
        name=DistributionName.BOREL,
        display_name="Borel distribution",
        kind=Kind.DISCRETE,
        parameters=[continuous_parameter("mu", 0, False, 1, False)],
        distr_characteristics={CharacteristicName.PDF: pmf},
        support_by_parameters=lambda _: IntegerSupport(1, None),
    )

    DistributionRegister.register(Borel)


def configure_planck_distribution() -> None:
    """
    Configure and register the Planck distribution.

        P(X = k) = (1 - e^(-lambda)) e^(-lambda k),  k = 0, 1, ...
    """

    if DistributionRegister.contains(DistributionName.PLANCK):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        lam = values["lambda"]
        return float(-np.expm1(-lam) * np.exp(-lam * k))

    def cdf(values: ParameterValues, k: float) -> float:
        if k < 0:
            return 0.0
        return float(-np.expm1(-values["lambda"] * (k + 1)))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        u = source.uniform()
        k = np.ceil(-np.log1p(-u) / values["lambda"]) - 1
        return float(max(0.0, k))

    Planck = ProbabilityDistribution(
        name=DistributionName.PLANCK,
        display_name="Planck distribution",
        kind=Kind.DISCRETE,
        parameters=[continuous_parameter("lambda", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        support_by_parameters=lambda _: IntegerSupport(0, None),
    )

    DistributionRegister.register(Planck)


def configure_boltzmann_distribution() -> None:
    """
    Configure and register the Boltzmann distribution.

    Planck distribution truncated to the ``N`` energy levels ``0..N-1``.
    """

    if DistributionRegister.contains(DistributionName.BOLTZMANN):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        lam, N = values["lambda"], values.N
        if k < 0 or k >= N:
            return 0.0
        return float(np.expm1(-lam) / np.expm1(-lam * N) * np.exp(-lam * k))

    def cdf(values: ParameterValues, k: float) -> float:
        lam, N = values["lambda"], values.N
        if k < 0:
            return 0.0
        if k >= N - 1:
            return 1.0
        return float(np.expm1(-lam * (k + 1)) / np.expm1(-lam * N))

    Boltzmann = ProbabilityDistribution(
        name=DistributionName.BOLTZMANN,
        display_name="Boltzmann distribution",
        kind=Kind.DISCRETE,
        parameters=[continuous_parameter("lambda", 0), discrete_parameter("N", 1)],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
        },
        support_by_parameters=lambda values: IntegerSupport(0, values.N - 1),
    )

    DistributionRegister.register(Boltzmann)
