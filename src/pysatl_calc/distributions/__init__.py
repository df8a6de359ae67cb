"""
Distributions subpackage

Probability distributions of PySATL Calc and the machinery around them:

- parameter descriptors and cross-parameter constraints (:mod:`.parameters`);
- the validated pdf/cdf/random dispatcher (:mod:`.distribution`);
- generic sampling and cdf fallbacks (:mod:`.strategies`);
- random sources (:mod:`.generators`) and numerical settings (:mod:`.config`);
- the global register and its configuration (:mod:`.registry`, :mod:`.configuration`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .config import DEFAULT_SETTINGS, NumericalSettings
from .configuration import (
    configure_distributions_register,
    get_distributions,
    get_functions,
    reset_distributions_register,
    sorted_by_display_name,
)
from .distribution import ParameterCache, ProbabilityDistribution
from .generators import RandomSource, default_random_source
from .parameters import (
    ParameterConstraint,
    ParameterDescriptor,
    ParameterValues,
    constraint,
    continuous_parameter,
    discrete_parameter,
    ordered_parameters,
)
from .registry import DistributionRegister
from .strategies import (
    AnalyticalSamplingStrategy,
    BisectionSamplingStrategy,
    CumulativeMassSamplingStrategy,
    SamplingStrategy,
)
from .support import IntegerSupport

__all__ = [
    # parameters
    "ParameterDescriptor",
    "ParameterValues",
    "ParameterConstraint",
    "constraint",
    "ordered_parameters",
    "discrete_parameter",
    "continuous_parameter",
    # distribution
    "ProbabilityDistribution",
    "ParameterCache",
    "IntegerSupport",
    # sampling
    "RandomSource",
    "default_random_source",
    "SamplingStrategy",
    "AnalyticalSamplingStrategy",
    "CumulativeMassSamplingStrategy",
    "BisectionSamplingStrategy",
    # settings
    "NumericalSettings",
    "DEFAULT_SETTINGS",
    # registry
    "DistributionRegister",
    "configure_distributions_register",
    "get_distributions",
    "get_functions",
    "sorted_by_display_name",
    "reset_distributions_register",
]
