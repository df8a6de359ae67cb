"""
Distributions on a bounded interval ``[a, b]``.

Contains the uniform, arcsine, sine, cosine, U-quadratic, reciprocal, power,
continuous Bernoulli and Irwin-Hall distributions. A law with ``a == b`` is
degenerate: infinite density at ``a``, zero elsewhere.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import (
    continuous_parameter,
    discrete_parameter,
    ordered_parameters,
)
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterDescriptor, ParameterValues


def _interval_parameters() -> list[ParameterDescriptor]:
    return [continuous_parameter("a"), continuous_parameter("b")]


def _point_mass_pdf(values: ParameterValues, x: float) -> float:
    return math.inf if x == values.a else 0.0


def _point_mass_cdf(values: ParameterValues, x: float) -> float:
    return 1.0 if x >= values.a else 0.0


def configure_uniform_distribution() -> None:
    """
    Configure and register the Uniform distribution.
    """

    if DistributionRegister.contains(DistributionName.UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    All intervals of the same length inside ``[a, b]`` are equally probable.

    Probability density function:
        f(x) = 1/(b - a) for x in [a, b], 0 otherwise
    """

    def pdf(values: ParameterValues, x: float) -> float:
        """
        Probability density function for uniform distribution.
            - For a == b: returns inf at a, 0 elsewhere
            - Outside [a, b]: returns 0
        """
        a, b = values.a, values.b
        if a == b:
            return _point_mass_pdf(values, x)
        if x < a or x > b:
            return 0.0
        return 1.0 / (b - a)

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_cdf(values, x)
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        return (x - a) / (b - a)

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        return values.a + (values.b - values.a) * source.uniform()

    Uniform = ProbabilityDistribution(
        name=DistributionName.UNIFORM,
        display_name="Uniform distribution",
        kind=Kind.CONTINUOUS,
        parameters=_interval_parameters(),
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b")],
    )
    Uniform.__doc__ = UNIFORM_DOC

    DistributionRegister.register(Uniform)


def configure_arcsine_distribution() -> None:
    """
    Configure and register the arcsine distribution.

        f(x) = 1 / (pi sqrt((x - a)(b - x))),  a < x < b
    """

    if DistributionRegister.contains(DistributionName.ARCSINE):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_pdf(values, x)
        z = (x - a) / (b - a)
        if z <= 0 or z >= 1:
            return 0.0
        return 1.0 / (math.pi * math.sqrt(z * (1 - z))) / (b - a)

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_cdf(values, x)
        z = (x - a) / (b - a)
        if z <= 0:
            return 0.0
        if z >= 1:
            return 1.0
        return 2.0 / math.pi * math.asin(math.sqrt(z))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        # u = 2/pi asin(sqrt(z))  <=>  z = sin(pi u / 2)^2
        z = math.sin(math.pi * source.uniform() / 2) ** 2
        return values.a + (values.b - values.a) * z

    Arcsine = ProbabilityDistribution(
        name=DistributionName.ARCSINE,
        display_name="Arcsine distribution",
        kind=Kind.CONTINUOUS,
        parameters=_interval_parameters(),
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b", "a has to be <=b")],
    )

    DistributionRegister.register(Arcsine)


def configure_sine_distribution() -> None:
    """
    Configure and register the sine distribution.

        f(x) = pi/2 sin(pi z) / (b - a),  z = (x - a)/(b - a) in (0, 1)
    """

    if DistributionRegister.contains(DistributionName.SINE):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_pdf(values, x)
        z = (x - a) / (b - a)
        if z <= 0 or z >= 1:
            return 0.0
        return math.pi / 2 * math.sin(math.pi * z) / (b - a)

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_cdf(values, x)
        z = (x - a) / (b - a)
        if z <= 0:
            return 0.0
        if z >= 1:
            return 1.0
        return 0.5 * (1 - math.cos(math.pi * z))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        z = math.acos(1 - 2 * source.uniform()) / math.pi
        return values.a + (values.b - values.a) * z

    Sine = ProbabilityDistribution(
        name=DistributionName.SINE,
        display_name="Sine distribution",
        kind=Kind.CONTINUOUS,
        parameters=_interval_parameters(),
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b")],
    )

    DistributionRegister.register(Sine)


def configure_cosine_distribution() -> None:
    """
    Configure and register the raised cosine distribution on ``[a, b]``.

    Random numbers are obtained by inverting the cdf numerically.
    """

    if DistributionRegister.contains(DistributionName.COSINE):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_pdf(values, x)
        if x < a or x > b:
            return 0.0
        return (1 + math.cos(2 * math.pi * (x - a) / (b - a) - math.pi)) / (b - a)

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_cdf(values, x)
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        width = b - a
        return (
            2 * math.pi * (x - a) - width * math.sin(2 * math.pi * (x - a) / width)
        ) / (2 * math.pi * width)

    Cosine = ProbabilityDistribution(
        name=DistributionName.COSINE,
        display_name="Cosine distribution",
        kind=Kind.CONTINUOUS,
        parameters=_interval_parameters(),
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
        },
        constraints=[ordered_parameters("a", "b")],
    )

    DistributionRegister.register(Cosine)


def configure_u_quadratic_distribution() -> None:
    """
    Configure and register the U-quadratic distribution.

        f(x) = 12/(b - a)^3 (x - (a + b)/2)^2,  a <= x <= b
    """

    if DistributionRegister.contains(DistributionName.U_QUADRATIC):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_pdf(values, x)
        if x < a or x > b:
            return 0.0
        alpha = 12 / (b - a) ** 3
        beta = (a + b) / 2
        return alpha * (x - beta) ** 2

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_cdf(values, x)
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        alpha = 12 / (b - a) ** 3
        beta = (a + b) / 2
        return alpha / 3 * ((x - beta) ** 3 + (beta - a) ** 3)

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, b = values.a, values.b
        u = source.uniform()
        if a == b:
            return a
        alpha = 12 / (b - a) ** 3
        beta = (a + b) / 2
        return float(np.cbrt(3 / alpha * u - (beta - a) ** 3)) + beta

    UQuadratic = ProbabilityDistribution(
        name=DistributionName.U_QUADRATIC,
        display_name="U-quadratic distribution",
        kind=Kind.CONTINUOUS,
        parameters=_interval_parameters(),
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b")],
    )

    DistributionRegister.register(UQuadratic)


def configure_reciprocal_distribution() -> None:
    """
    Configure and register the reciprocal (log-uniform) distribution.

        f(x) = 1 / (x log(b/a)),  0 < a <= x <= b
    """

    if DistributionRegister.contains(DistributionName.RECIPROCAL):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_pdf(values, x)
        if x < a or x > b:
            return 0.0
        return 1.0 / (x * math.log(b / a))

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if a == b:
            return _point_mass_cdf(values, x)
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        return math.log(x / a) / math.log(b / a)

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, b = values.a, values.b
        return a * math.exp(source.uniform() * math.log(b / a))

    Reciprocal = ProbabilityDistribution(
        name=DistributionName.RECIPROCAL,
        display_name="Reciprocal distribution",
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("a", 0), continuous_parameter("b", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b")],
    )

    DistributionRegister.register(Reciprocal)


def configure_power_distribution() -> None:
    """
    Configure and register the power distribution.

        f(x) = c (x - a)^(c - 1) / (b - a)^c,  a <= x <= b
    """

    if DistributionRegister.contains(DistributionName.POWER):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b, c = values.a, values.b, values.c
        if a == b:
            return _point_mass_pdf(values, x)
        if x < a or x > b:
            return 0.0
        return float(c * np.power(x - a, c - 1) / np.power(b - a, c))

    def cdf(values: ParameterValues, x: float) -> float:
        a, b, c = values.a, values.b, values.c
        if a == b:
            return _point_mass_cdf(values, x)
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        return float(np.power((x - a) / (b - a), c))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, b, c = values.a, values.b, values.c
        u = source.uniform()
        if a == b:
            return a
        return a + (b - a) * float(np.power(u, 1.0 / c))

    Power = ProbabilityDistribution(
        name=DistributionName.POWER,
        display_name="Power distribution",
        kind=Kind.CONTINUOUS,
        parameters=[*_interval_parameters(), continuous_parameter("c", 0)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b")],
    )

    DistributionRegister.register(Power)


def configure_continuous_bernoulli_distribution() -> None:
    """
    Configure and register the continuous Bernoulli distribution, scaled to ``[a, b]``.

        f(z) = C(lambda) lambda^z (1 - lambda)^(1 - z),  z = (x - a)/(b - a) in [0, 1]

    with ``C(lambda) = 2 atanh(1 - 2 lambda) / (1 - 2 lambda)`` and ``C(1/2) = 2``.
    """

    if DistributionRegister.contains(DistributionName.CONTINUOUS_BERNOULLI):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b, lam = values.a, values.b, values["lambda"]
        if a == b:
            return _point_mass_pdf(values, x)
        if x < a or x > b:
            return 0.0
        z = (x - a) / (b - a)
        if lam == 0.5:
            norm = 2.0
        else:
            norm = 2 * math.atanh(1 - 2 * lam) / (1 - 2 * lam)
        return norm * lam**z * (1 - lam) ** (1 - z) / (b - a)

    def cdf(values: ParameterValues, x: float) -> float:
        a, b, lam = values.a, values.b, values["lambda"]
        if a == b:
            return _point_mass_cdf(values, x)
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        z = (x - a) / (b - a)
        if lam == 0.5:
            return z
        return (lam**z * (1 - lam) ** (1 - z) + lam - 1) / (2 * lam - 1)

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, b, lam = values.a, values.b, values["lambda"]
        u = source.uniform()
        if lam == 0.5:
            z = u
        else:
            z = math.log1p(u * (2 * lam - 1) / (1 - lam)) / math.log(lam / (1 - lam))
        return a + (b - a) * z

    ContinuousBernoulli = ProbabilityDistribution(
        name=DistributionName.CONTINUOUS_BERNOULLI,
        display_name="Continuous Bernoulli distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            *_interval_parameters(),
            continuous_parameter("lambda", 0, False, 1, False),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b")],
    )

    DistributionRegister.register(ContinuousBernoulli)


def configure_irwin_hall_distribution() -> None:
    """
    Configure and register the Irwin-Hall distribution.

    Sum of ``n`` independent standard uniform variables:

        f(x) = 1/(n - 1)! sum_{k=0}^{floor(x)} (-1)^k C(n, k) (x - k)^(n - 1),  0 <= x <= n

    The law is symmetric about ``n/2``; points right of the center are mirrored
    to keep the alternating sums short. Random numbers are obtained by
    inverting the cdf numerically.
    """

    if DistributionRegister.contains(DistributionName.IRWIN_HALL):
        return

    def _alternating_sum(n: int, x: float, power: int) -> float:
        return sum(
            (-1) ** k * math.comb(n, k) * (x - k) ** power for k in range(math.floor(x) + 1)
        )

    def pdf(values: ParameterValues, x: float) -> float:
        n = values.n
        if x < 0 or x > n:
            return 0.0
        if x > n / 2:
            x = n - x
        return _alternating_sum(n, x, n - 1) / math.factorial(n - 1)

    def cdf(values: ParameterValues, x: float) -> float:
        n = values.n
        if x <= 0:
            return 0.0
        if x >= n:
            return 1.0
        if x > n / 2:
            return 1.0 - _alternating_sum(n, n - x, n) / math.factorial(n)
        return _alternating_sum(n, x, n) / math.factorial(n)

    IrwinHall = ProbabilityDistribution(
        name=DistributionName.IRWIN_HALL,
        display_name="Irwin-Hall distribution",
        kind=Kind.CONTINUOUS,
        parameters=[discrete_parameter("n", 1, 25)],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
        },
    )

    DistributionRegister.register(IrwinHall)
