"""
Urn models: hypergeometric and negative hypergeometric distributions.

Both laws describe draws without replacement from an urn of ``N`` balls of
which ``R`` are marked. Their cumulative probabilities and random numbers are
obtained by summing the mass over the finite support.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import discrete_parameter, ordered_parameters
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.distributions.support import IntegerSupport
from pysatl_calc.special import log_binom
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_hypergeometric_distribution() -> None:
    """
    Configure and register the hypergeometric distribution.

    Number of marked balls among ``n`` balls drawn without replacement:

        P(X = k) = C(R, k) C(N - R, n - k) / C(N, n)
    """

    if DistributionRegister.contains(DistributionName.HYPERGEOMETRIC):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        N, R, n = values.N, values.R, values.n
        if k < 0:
            return 0.0
        log_p = log_binom(R, k) + log_binom(N - R, n - k) - log_binom(N, n)
        return float(np.exp(log_p))

    def _support(values: ParameterValues) -> IntegerSupport:
        N, R, n = values.N, values.R, values.n
        return IntegerSupport(max(0, n + R - N), min(n, R))

    Hypergeometric = ProbabilityDistribution(
        name=DistributionName.HYPERGEOMETRIC,
        display_name="Hypergeometric distribution",
        kind=Kind.DISCRETE,
        parameters=[
            discrete_parameter("N", 1),
            discrete_parameter("R", 0),
            discrete_parameter("n", 1),
        ],
        distr_characteristics={CharacteristicName.PDF: pmf},
        constraints=[
            ordered_parameters("R", "N", "R has to be <=N"),
            ordered_parameters("n", "N", "n has to be <=N"),
        ],
        support_by_parameters=_support,
    )

    DistributionRegister.register(Hypergeometric)


def configure_negative_hypergeometric_distribution() -> None:
    """
    Configure and register the negative hypergeometric distribution.

    Number of draws needed to obtain ``n`` of the ``R`` marked balls:

        P(X = k) = C(k - 1, n - 1) C(N - k, R - n) / C(N, R),  n <= k <= N - R + n
    """

    if DistributionRegister.contains(DistributionName.NEGATIVE_HYPERGEOMETRIC):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        N, R, n = values.N, values.R, values.n
        if k < n or k > N:
            return 0.0
        log_p = log_binom(k - 1, n - 1) + log_binom(N - k, R - n) - log_binom(N, R)
        return float(np.exp(log_p))

    def _support(values: ParameterValues) -> IntegerSupport:
        N, R, n = values.N, values.R, values.n
        return IntegerSupport(n, N - R + n)

    NegativeHypergeometric = ProbabilityDistribution(
        name=DistributionName.NEGATIVE_HYPERGEOMETRIC,
        display_name="Negative hypergeometric distribution",
        kind=Kind.DISCRETE,
        parameters=[
            discrete_parameter("N", 1),
            discrete_parameter("R", 1),
            discrete_parameter("n", 1),
        ],
        distr_characteristics={CharacteristicName.PDF: pmf},
        constraints=[
            ordered_parameters("R", "N", "R has to be <=N"),
            ordered_parameters("n", "R", "n has to be <=R"),
        ],
        support_by_parameters=_support,
    )

    DistributionRegister.register(NegativeHypergeometric)
