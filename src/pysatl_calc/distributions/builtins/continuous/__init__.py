"""
Built-in continuous distributions.

This module contains implementations of the continuous probability distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_calc.distributions.builtins.continuous.beta import (
    configure_beta_distribution,
    configure_f_distribution,
    configure_kumaraswamy_distribution,
    configure_pert_distribution,
    configure_student_t_distribution,
)
from pysatl_calc.distributions.builtins.continuous.cauchy import (
    configure_cauchy_distribution,
    configure_half_cauchy_distribution,
    configure_log_cauchy_distribution,
    configure_wigner_semicircle_distribution,
)
from pysatl_calc.distributions.builtins.continuous.extreme_value import (
    configure_frechet_distribution,
    configure_gumbel_distribution,
    configure_pareto_distribution,
    configure_weibull_distribution,
)
from pysatl_calc.distributions.builtins.continuous.gamma import (
    configure_chi_distribution,
    configure_chi_squared_distribution,
    configure_erlang_distribution,
    configure_exponential_distribution,
    configure_gamma_distribution,
    configure_inverse_gamma_distribution,
    configure_log_gamma_distribution,
    configure_maxwell_boltzmann_distribution,
    configure_rayleigh_distribution,
)
from pysatl_calc.distributions.builtins.continuous.logistic import (
    configure_hyperbolic_secant_distribution,
    configure_laplace_distribution,
    configure_log_laplace_distribution,
    configure_log_logistic_distribution,
    configure_logistic_distribution,
)
from pysatl_calc.distributions.builtins.continuous.normal import (
    configure_fatigue_life_distribution,
    configure_half_normal_distribution,
    configure_inverse_gaussian_distribution,
    configure_johnson_su_distribution,
    configure_levy_distribution,
    configure_log_normal_distribution,
    configure_normal_distribution,
)
from pysatl_calc.distributions.builtins.continuous.polygonal import (
    configure_sawtooth_left_distribution,
    configure_sawtooth_right_distribution,
    configure_trapezoid_distribution,
    configure_triangular_distribution,
)
from pysatl_calc.distributions.builtins.continuous.uniform import (
    configure_arcsine_distribution,
    configure_continuous_bernoulli_distribution,
    configure_cosine_distribution,
    configure_irwin_hall_distribution,
    configure_power_distribution,
    configure_reciprocal_distribution,
    configure_sine_distribution,
    configure_u_quadratic_distribution,
    configure_uniform_distribution,
)

__all__ = [
    "configure_uniform_distribution",
    "configure_exponential_distribution",
    "configure_normal_distribution",
    "configure_log_normal_distribution",
    "configure_arcsine_distribution",
    "configure_beta_distribution",
    "configure_cauchy_distribution",
    "configure_chi_distribution",
    "configure_chi_squared_distribution",
    "configure_erlang_distribution",
    "configure_f_distribution",
    "configure_gamma_distribution",
    "configure_gumbel_distribution",
    "configure_half_normal_distribution",
    "configure_hyperbolic_secant_distribution",
    "configure_inverse_gaussian_distribution",
    "configure_irwin_hall_distribution",
    "configure_johnson_su_distribution",
    "configure_kumaraswamy_distribution",
    "configure_laplace_distribution",
    "configure_levy_distribution",
    "configure_logistic_distribution",
    "configure_log_logistic_distribution",
    "configure_maxwell_boltzmann_distribution",
    "configure_pareto_distribution",
    "configure_pert_distribution",
    "configure_reciprocal_distribution",
    "configure_sine_distribution",
    "configure_student_t_distribution",
    "configure_trapezoid_distribution",
    "configure_triangular_distribution",
    "configure_sawtooth_left_distribution",
    "configure_sawtooth_right_distribution",
    "configure_u_quadratic_distribution",
    "configure_weibull_distribution",
    "configure_wigner_semicircle_distribution",
    "configure_fatigue_life_distribution",
    "configure_frechet_distribution",
    "configure_log_cauchy_distribution",
    "configure_power_distribution",
    "configure_rayleigh_distribution",
    "configure_cosine_distribution",
    "configure_log_gamma_distribution",
    "configure_inverse_gamma_distribution",
    "configure_continuous_bernoulli_distribution",
    "configure_half_cauchy_distribution",
    "configure_log_laplace_distribution",
]
