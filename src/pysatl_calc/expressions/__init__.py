"""
Expressions subpackage

Text expression compilation and evaluation (:mod:`.engine`) and the
installation of the distribution functions into an engine (:mod:`.extensions`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .engine import CompiledExpression, ExpressionEngine
from .extensions import (
    DISTRIBUTIONS_EXTENSION,
    distribution_functions,
    load_distribution_extensions,
)

__all__ = [
    "CompiledExpression",
    "ExpressionEngine",
    "DISTRIBUTIONS_EXTENSION",
    "distribution_functions",
    "load_distribution_extensions",
]
