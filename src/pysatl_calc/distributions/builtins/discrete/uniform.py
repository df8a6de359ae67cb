"""
Discrete uniform distribution.

Equal mass on every integer of ``a..b``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import discrete_parameter, ordered_parameters
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.distributions.support import IntegerSupport
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_discrete_uniform_distribution() -> None:
    """
    Configure and register the discrete uniform distribution.
    """

    if DistributionRegister.contains(DistributionName.DISCRETE_UNIFORM):
        return

    def pmf(values: ParameterValues, k: float) -> float:
        if k < values.a or k > values.b:
            return 0.0
        return 1.0 / (values.b - values.a + 1)

    def cdf(values: ParameterValues, k: float) -> float:
        if k < values.a:
            return 0.0
        if k >= values.b:
            return 1.0
        return (k - values.a + 1) / (values.b - values.a + 1)

    def sampler(values: ParameterValues, source: RandomSource) -> int:
        u = source.uniform()
        return values.a + math.floor(u * (values.b - values.a + 1))

    def _support(values: ParameterValues) -> IntegerSupport:
        return IntegerSupport(values.a, values.b)

    DiscreteUniform = ProbabilityDistribution(
        name=DistributionName.DISCRETE_UNIFORM,
        display_name="Discrete uniform distribution",
        kind=Kind.DISCRETE,
        parameters=[discrete_parameter("a"), discrete_parameter("b")],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b")],
        support_by_parameters=_support,
    )

    DistributionRegister.register(DiscreteUniform)
