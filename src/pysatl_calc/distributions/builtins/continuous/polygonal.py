"""
Distributions with piecewise linear densities.

Contains the triangular, trapezoidal and the two sawtooth distributions.
Random numbers are drawn by inverting the piecewise quadratic cdf.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.parameters import continuous_parameter, ordered_parameters
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.distributions.parameters import ParameterValues


def configure_triangular_distribution() -> None:
    """
    Configure and register the triangular distribution.
    """

    if DistributionRegister.contains(DistributionName.TRIANGULAR):
        return

    TRIANGULAR_DOC = """
    Triangular distribution.

    Density rising linearly from ``a`` to the mode ``c`` and falling linearly
    to ``b``. Parameters are given in the order ``a, c, b``.

    Probability density function:
        f(x) = 2 (x - a) / ((b - a)(c - a))  for a <= x < c
        f(x) = 2 / (b - a)                   for x = c
        f(x) = 2 (b - x) / ((b - a)(b - c))  for c < x <= b
    """

    def pdf(values: ParameterValues, x: float) -> float:
        a, c, b = values.a, values.c, values.b
        if x < a or x > b:
            return 0.0
        if a == b:
            return math.inf if x == a else 0.0
        if x < c:
            return 2 * (x - a) / ((b - a) * (c - a))
        if x == c:
            return 2 / (b - a)
        return 2 * (b - x) / ((b - a) * (b - c))

    def cdf(values: ParameterValues, x: float) -> float:
        a, c, b = values.a, values.c, values.b
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        if a == b:
            return 1.0
        if x < c:
            return (x - a) ** 2 / ((b - a) * (c - a))
        if x == c:
            return (c - a) / (b - a)
        return 1 - (b - x) ** 2 / ((b - a) * (b - c))

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, c, b = values.a, values.c, values.b
        u = source.uniform()
        if a == b:
            return float(a)
        if u <= (c - a) / (b - a):
            return a + math.sqrt(u * (b - a) * (c - a))
        return b - math.sqrt((1 - u) * (b - a) * (b - c))

    Triangular = ProbabilityDistribution(
        name=DistributionName.TRIANGULAR,
        display_name="Triangular distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("a"),
            continuous_parameter("c"),
            continuous_parameter("b"),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "c"), ordered_parameters("c", "b")],
    )
    Triangular.__doc__ = TRIANGULAR_DOC

    DistributionRegister.register(Triangular)


def configure_trapezoid_distribution() -> None:
    """
    Configure and register the trapezoidal distribution.

    Density rising linearly on ``[a, b]``, constant with height
    ``h = 2 / (c + d - a - b)`` on ``[b, c]`` and falling linearly on ``[c, d]``.
    """

    if DistributionRegister.contains(DistributionName.TRAPEZOID):
        return

    def _height(values: ParameterValues) -> float:
        return 2.0 / (values.c + values.d - values.a - values.b)

    def pdf(values: ParameterValues, x: float) -> float:
        a, b, c, d = values.a, values.b, values.c, values.d
        if a == d:
            return math.inf if x == a else 0.0
        if x <= a or x >= d:
            return 0.0
        h = _height(values)
        if x < b:
            return h * (x - a) / (b - a)
        if x > c:
            return h * (d - x) / (d - c)
        return h

    def cdf(values: ParameterValues, x: float) -> float:
        a, b, c, d = values.a, values.b, values.c, values.d
        if a == d:
            return 1.0 if x >= a else 0.0
        if x <= a:
            return 0.0
        if x >= d:
            return 1.0
        h = _height(values)
        if x < b:
            return h * (x - a) ** 2 / (b - a) / 2
        if x > c:
            return 1 - h * (d - x) ** 2 / (d - c) / 2
        return h * (2 * x - a - b) / 2

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, b, c, d = values.a, values.b, values.c, values.d
        u = source.uniform()
        if a == d:
            return float(d)

        h = _height(values)
        mass_left = (b - a) * h / 2
        mass_right_start = 1 - (d - c) * h / 2

        if u < mass_left:
            return a + math.sqrt(u * 2 * (b - a) / h)
        if u > mass_right_start:
            return d - math.sqrt((1 - u) * 2 * (d - c) / h)
        if b == c:
            return float(b)
        return b + (c - b) * (u - mass_left) / (mass_right_start - mass_left)

    Trapezoid = ProbabilityDistribution(
        name=DistributionName.TRAPEZOID,
        display_name="Trapezoidal distribution",
        kind=Kind.CONTINUOUS,
        parameters=[
            continuous_parameter("a"),
            continuous_parameter("b"),
            continuous_parameter("c"),
            continuous_parameter("d"),
        ],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[
            ordered_parameters("a", "b"),
            ordered_parameters("b", "c"),
            ordered_parameters("c", "d"),
        ],
    )

    DistributionRegister.register(Trapezoid)


def _configure_sawtooth_distribution(
    name: DistributionName,
    display_name: str,
    inner_pdf: Callable[[float, float, float], float],
    inner_cdf: Callable[[float, float, float], float],
    inner_ppf: Callable[[float, float, float], float],
) -> None:
    """
    Register a sawtooth law on ``[a, b]`` from its density, cdf and quantile on
    the non-degenerate interval.
    """

    if DistributionRegister.contains(name):
        return

    def pdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if x < a or x > b:
            return 0.0
        if a == b:
            return math.inf if x == a else 0.0
        return inner_pdf(x, a, b)

    def cdf(values: ParameterValues, x: float) -> float:
        a, b = values.a, values.b
        if x < a:
            return 0.0
        if x > b:
            return 1.0
        if a == b:
            return 1.0
        return inner_cdf(x, a, b)

    def sampler(values: ParameterValues, source: RandomSource) -> float:
        a, b = values.a, values.b
        u = source.uniform()
        if a == b:
            return float(a)
        return inner_ppf(u, a, b)

    Sawtooth = ProbabilityDistribution(
        name=name,
        display_name=display_name,
        kind=Kind.CONTINUOUS,
        parameters=[continuous_parameter("a"), continuous_parameter("b")],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.RANDOM: sampler,
        },
        constraints=[ordered_parameters("a", "b")],
    )

    DistributionRegister.register(Sawtooth)


def configure_sawtooth_left_distribution() -> None:
    """
    Configure and register the left sawtooth distribution (density falling from ``a`` to ``b``).
    """
    _configure_sawtooth_distribution(
        DistributionName.SAWTOOTH_LEFT,
        "Left sawtooth distribution",
        inner_pdf=lambda x, a, b: 2 * (b - x) / (b - a) ** 2,
        inner_cdf=lambda x, a, b: 1 - (b - x) ** 2 / (b - a) ** 2,
        inner_ppf=lambda u, a, b: b - (b - a) * math.sqrt(1 - u),
    )


def configure_sawtooth_right_distribution() -> None:
    """
    Configure and register the right sawtooth distribution (density rising from ``a`` to ``b``).
    """
    _configure_sawtooth_distribution(
        DistributionName.SAWTOOTH_RIGHT,
        "Right sawtooth distribution",
        inner_pdf=lambda x, a, b: 2 * (x - a) / (b - a) ** 2,
        inner_cdf=lambda x, a, b: (x - a) ** 2 / (b - a) ** 2,
        inner_ppf=lambda u, a, b: a + (b - a) * math.sqrt(u),
    )
