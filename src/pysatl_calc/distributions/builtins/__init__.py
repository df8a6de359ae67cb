"""
Built-in probability distributions for PySATL Calc.

This package contains implementations of the discrete and continuous
distributions that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_calc.distributions.builtins.continuous import *
from pysatl_calc.distributions.builtins.continuous import __all__ as _continuous_all
from pysatl_calc.distributions.builtins.discrete import *
from pysatl_calc.distributions.builtins.discrete import __all__ as _discrete_all

__all__ = [
    *_discrete_all,
    *_continuous_all,
]

del _discrete_all
del _continuous_all
