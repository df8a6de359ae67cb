"""
PySATL Calc
===========

Probability distribution catalogue of a scientific calculator: validated
density, cumulative distribution and random number functions for discrete and
continuous laws, exported to a SymPy based expression engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .expressions import *
from .expressions import __all__ as _expr_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-calc")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_expr_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _expr_all
del _types_all
