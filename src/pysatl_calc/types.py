"""
Core Type Definitions
=====================

Fundamental types and names used throughout PySATL Calc.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import Any

import numpy as np


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

type ParameterName = str
"""Type alias for parameter identifiers (e.g., 'mu', 'lambda')."""


class CharacteristicName(StrEnum):
    """
    Names of the characteristics every distribution exposes.

    The value doubles as the suffix of the exported expression function,
    e.g. ``normal_pdf``, ``normal_cdf`` and ``normal_random``.
    """

    PDF = "pdf"
    CDF = "cdf"
    RANDOM = "random"


class DistributionName(StrEnum):
    """Internal names of the built-in distributions."""

    # discrete
    DISCRETE_UNIFORM = "discreteuniform"
    HYPERGEOMETRIC = "hypergeom"
    BINOMIAL = "binomial"
    POISSON = "poisson"
    GEOMETRIC = "geometric"
    NEGATIVE_HYPERGEOMETRIC = "negativehypergeom"
    NEGATIVE_BINOMIAL = "negativebinomial"
    ZETA = "zeta"
    RADEMACHER = "rademacher"
    BERNOULLI = "bernoulli"
    BOREL = "borel"
    GAUSS_KUZMIN = "gaussKuzmin"
    LOGARITHMIC = "logarithmic"
    PLANCK = "planck"
    BOLTZMANN = "boltzmann"

    # continuous
    UNIFORM = "uniform"
    EXPONENTIAL = "exp"
    NORMAL = "normal"
    LOG_NORMAL = "lognormal"
    ARCSINE = "arcsine"
    BETA = "beta"
    CAUCHY = "cauchy"
    CHI = "chi"
    CHI_SQUARED = "chisquared"
    ERLANG = "erlang"
    F = "f"
    GAMMA = "gamma"
    GUMBEL = "gumbel"
    HALF_NORMAL = "halfnormal"
    HYPERBOLIC_SECANT = "hyperbolicsecant"
    INVERSE_GAUSSIAN = "inversegaussian"
    IRWIN_HALL = "irwinhall"
    JOHNSON_SU = "johnsonsu"
    KUMARASWAMY = "kumaraswamy"
    LAPLACE = "laplace"
    LEVY = "levy"
    LOGISTIC = "logistic"
    LOG_LOGISTIC = "loglogistic"
    MAXWELL_BOLTZMANN = "maxwellboltzmann"
    PARETO = "pareto"
    PERT = "pert"
    RECIPROCAL = "reciprocal"
    SINE = "sine"
    STUDENT_T = "studentt"
    TRAPEZOID = "trapezoid"
    TRIANGULAR = "triangular"
    SAWTOOTH_LEFT = "sawtoothleft"
    SAWTOOTH_RIGHT = "sawtoothright"
    U_QUADRATIC = "uquadratic"
    WEIBULL = "weibull"
    WIGNER_SEMICIRCLE = "wignersemicircle"
    FATIGUE_LIFE = "fatiguelife"
    FRECHET = "frechet"
    LOG_CAUCHY = "logcauchy"
    POWER = "power"
    RAYLEIGH = "rayleigh"
    COSINE = "cosine"
    LOG_GAMMA = "loggamma"
    INVERSE_GAMMA = "invgamma"
    CONTINUOUS_BERNOULLI = "continuousbernoulli"
    HALF_CAUCHY = "halfcauchy"
    LOG_LAPLACE = "loglaplace"


__all__ = [
    "Kind",
    "NumPyNumber",
    "Number",
    "ParameterName",
    "CharacteristicName",
    "DistributionName",
]
