"""
Built-in discrete distributions.

This module contains implementations of the discrete probability distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_calc.distributions.builtins.discrete.bernoulli import (
    configure_bernoulli_distribution,
    configure_binomial_distribution,
    configure_geometric_distribution,
    configure_negative_binomial_distribution,
    configure_rademacher_distribution,
)
from pysatl_calc.distributions.builtins.discrete.poisson import (
    configure_boltzmann_distribution,
    configure_borel_distribution,
    configure_planck_distribution,
    configure_poisson_distribution,
)
from pysatl_calc.distributions.builtins.discrete.series import (
    configure_gauss_kuzmin_distribution,
    configure_logarithmic_distribution,
    configure_zeta_distribution,
)
from pysatl_calc.distributions.builtins.discrete.uniform import (
    configure_discrete_uniform_distribution,
)
from pysatl_calc.distributions.builtins.discrete.urn import (
    configure_hypergeometric_distribution,
    configure_negative_hypergeometric_distribution,
)

__all__ = [
    "configure_discrete_uniform_distribution",
    "configure_hypergeometric_distribution",
    "configure_binomial_distribution",
    "configure_poisson_distribution",
    "configure_geometric_distribution",
    "configure_negative_hypergeometric_distribution",
    "configure_negative_binomial_distribution",
    "configure_zeta_distribution",
    "configure_rademacher_distribution",
    "configure_bernoulli_distribution",
    "configure_borel_distribution",
    "configure_gauss_kuzmin_distribution",
    "configure_logarithmic_distribution",
    "configure_planck_distribution",
    "configure_boltzmann_distribution",
]
