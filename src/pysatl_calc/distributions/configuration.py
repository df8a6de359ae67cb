"""
Distribution Register Configuration
===================================

This module builds the catalogue of probability distributions for PySATL Calc:

- discrete distributions first, then continuous ones, in catalogue order;
- every distribution exported to expression engines as the three functions
  ``{name}_pdf``, ``{name}_cdf`` and ``{name}_random``.

Notes
-----
- All distributions are registered in the global DistributionRegister.
- The register is built lazily, exactly once per process; repeated calls of
  :func:`configure_distributions_register` and :func:`get_distributions`
  return the same objects.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache
from typing import TYPE_CHECKING

from pysatl_calc.distributions.builtins import (
    configure_arcsine_distribution,
    configure_bernoulli_distribution,
    configure_beta_distribution,
    configure_binomial_distribution,
    configure_boltzmann_distribution,
    configure_borel_distribution,
    configure_cauchy_distribution,
    configure_chi_distribution,
    configure_chi_squared_distribution,
    configure_continuous_bernoulli_distribution,
    configure_cosine_distribution,
    configure_discrete_uniform_distribution,
    configure_erlang_distribution,
    configure_exponential_distribution,
    configure_f_distribution,
    configure_fatigue_life_distribution,
    configure_frechet_distribution,
    configure_gamma_distribution,
    configure_gauss_kuzmin_distribution,
    configure_geometric_distribution,
    configure_gumbel_distribution,
    configure_half_cauchy_distribution,
    configure_half_normal_distribution,
    configure_hyperbolic_secant_distribution,
    configure_hypergeometric_distribution,
    configure_inverse_gamma_distribution,
    configure_inverse_gaussian_distribution,
    configure_irwin_hall_distribution,
    configure_johnson_su_distribution,
    configure_kumaraswamy_distribution,
    configure_laplace_distribution,
    configure_levy_distribution,
    configure_log_cauchy_distribution,
    configure_log_gamma_distribution,
    configure_log_laplace_distribution,
    configure_log_logistic_distribution,
    configure_log_normal_distribution,
    configure_logarithmic_distribution,
    configure_logistic_distribution,
    configure_maxwell_boltzmann_distribution,
    configure_negative_binomial_distribution,
    configure_negative_hypergeometric_distribution,
    configure_normal_distribution,
    configure_pareto_distribution,
    configure_pert_distribution,
    configure_planck_distribution,
    configure_poisson_distribution,
    configure_power_distribution,
    configure_rademacher_distribution,
    configure_rayleigh_distribution,
    configure_reciprocal_distribution,
    configure_sawtooth_left_distribution,
    configure_sawtooth_right_distribution,
    configure_sine_distribution,
    configure_student_t_distribution,
    configure_trapezoid_distribution,
    configure_triangular_distribution,
    configure_u_quadratic_distribution,
    configure_uniform_distribution,
    configure_weibull_distribution,
    configure_wigner_semicircle_distribution,
    configure_zeta_distribution,
)
from pysatl_calc.distributions.registry import DistributionRegister

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pysatl_calc.distributions.distribution import ProbabilityDistribution
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.types import Kind, Number


_DISCRETE_CONFIGURATORS: tuple[Callable[[], None], ...] = (
    configure_discrete_uniform_distribution,
    configure_hypergeometric_distribution,
    configure_binomial_distribution,
    configure_poisson_distribution,
    configure_geometric_distribution,
    configure_negative_hypergeometric_distribution,
    configure_negative_binomial_distribution,
    configure_zeta_distribution,
    configure_rademacher_distribution,
    configure_bernoulli_distribution,
    configure_borel_distribution,
    configure_gauss_kuzmin_distribution,
    configure_logarithmic_distribution,
    configure_planck_distribution,
    configure_boltzmann_distribution,
)

_CONTINUOUS_CONFIGURATORS: tuple[Callable[[], None], ...] = (
    configure_uniform_distribution,
    configure_exponential_distribution,
    configure_normal_distribution,
    configure_log_normal_distribution,
    configure_arcsine_distribution,
    configure_beta_distribution,
    configure_cauchy_distribution,
    configure_chi_distribution,
    configure_chi_squared_distribution,
    configure_erlang_distribution,
    configure_f_distribution,
    configure_gamma_distribution,
    configure_gumbel_distribution,
    configure_half_normal_distribution,
    configure_hyperbolic_secant_distribution,
    configure_inverse_gaussian_distribution,
    configure_irwin_hall_distribution,
    configure_johnson_su_distribution,
    configure_kumaraswamy_distribution,
    configure_laplace_distribution,
    configure_levy_distribution,
    configure_logistic_distribution,
    configure_log_logistic_distribution,
    configure_maxwell_boltzmann_distribution,
    configure_pareto_distribution,
    configure_pert_distribution,
    configure_reciprocal_distribution,
    configure_sine_distribution,
    configure_student_t_distribution,
    configure_trapezoid_distribution,
    configure_triangular_distribution,
    configure_sawtooth_left_distribution,
    configure_sawtooth_right_distribution,
    configure_u_quadratic_distribution,
    configure_weibull_distribution,
    configure_wigner_semicircle_distribution,
    configure_fatigue_life_distribution,
    configure_frechet_distribution,
    configure_log_cauchy_distribution,
    configure_power_distribution,
    configure_rayleigh_distribution,
    configure_cosine_distribution,
    configure_log_gamma_distribution,
    configure_inverse_gamma_distribution,
    configure_continuous_bernoulli_distribution,
    configure_half_cauchy_distribution,
    configure_log_laplace_distribution,
)


@lru_cache(maxsize=1)
def configure_distributions_register() -> DistributionRegister:
    """
    Configure and register all built-in distributions in the global registry.

    Discrete distributions are registered before the continuous ones. The
    call is idempotent: the register is built only on the first call.

    Returns
    -------
    DistributionRegister
        The global register of distributions.
    """
    for configure in (*_DISCRETE_CONFIGURATORS, *_CONTINUOUS_CONFIGURATORS):
        configure()
    return DistributionRegister()


@lru_cache(maxsize=8)
def get_distributions(kind: Kind | None = None) -> tuple[ProbabilityDistribution, ...]:
    """
    All configured distributions, optionally of one kind only.

    Repeated calls with the same ``kind`` return the same tuple.

    Parameters
    ----------
    kind : Kind or None, optional
        ``Kind.DISCRETE`` or ``Kind.CONTINUOUS``; ``None`` returns all of them.
    """
    configure_distributions_register()
    return tuple(DistributionRegister.distributions(kind))


def get_functions(
    distribution: ProbabilityDistribution, source: RandomSource | None = None
) -> dict[str, Callable[..., Number]]:
    """
    The ``{name}_pdf``, ``{name}_cdf`` and ``{name}_random`` functions of a distribution.

    Parameters
    ----------
    distribution : ProbabilityDistribution
        Distribution to export.
    source : RandomSource or None, optional
        Random source used by ``{name}_random``; the thread-local default
        source is used when omitted.
    """
    return distribution.functions(source)


def sorted_by_display_name(
    distributions: Iterable[ProbabilityDistribution],
) -> list[ProbabilityDistribution]:
    """Distributions ordered case-insensitively by their display name."""
    return sorted(distributions, key=lambda d: d.display_name.casefold())


def reset_distributions_register() -> None:
    """
    Reset the cached distributions register.
    """
    configure_distributions_register.cache_clear()
    get_distributions.cache_clear()
    DistributionRegister._reset()


__all__ = [
    "configure_distributions_register",
    "get_distributions",
    "get_functions",
    "sorted_by_display_name",
    "reset_distributions_register",
]
