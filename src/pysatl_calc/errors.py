"""
Exceptions raised by PySATL Calc.

Validation failures of a single ``{name}_pdf``/``{name}_cdf``/``{name}_random``
call are reported with :class:`ArityError` and :class:`DomainError`. They are
raised at the point of the violated call and never affect the state of the
distribution register.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DistributionError(Exception):
    """Base class for errors raised by probability distributions."""


class ArityError(DistributionError, TypeError):
    """
    Wrong number of distribution parameters.

    Parameters
    ----------
    expected : int
        Number of declared parameters.
    actual : int
        Number of supplied parameters.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"{expected} parameters expected but {actual} given.")
        self.expected = expected
        self.actual = actual


class DomainError(DistributionError, ValueError):
    """
    A parameter violates its declared domain or a cross-parameter relation.

    Parameters
    ----------
    message : str
        Human-readable description of the violation.
    parameter : str or None, optional
        Identifier of the offending parameter (``None`` for relations
        between several parameters).
    """

    def __init__(self, message: str, parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class SamplingError(DistributionError, RuntimeError):
    """A rejection sampler exhausted its iteration budget."""


class ExpressionError(ValueError):
    """Expression could not be compiled or evaluated."""


class ExpressionSyntaxError(ExpressionError):
    """Expression text is not a valid expression."""


__all__ = [
    "DistributionError",
    "ArityError",
    "DomainError",
    "SamplingError",
    "ExpressionError",
    "ExpressionSyntaxError",
]
