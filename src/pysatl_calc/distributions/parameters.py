"""
Parameter descriptors, validated parameter values and cross-parameter constraints.

This module provides the declarative metadata for distribution parameters,
the per-value domain checks performed on every call, and the relational
constraints (e.g. ``b >= a``) a distribution may add on top of them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import wraps
from numbers import Real
from typing import TYPE_CHECKING

import numpy as np

from pysatl_calc.errors import DomainError

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_calc.types import Number, ParameterName


def format_number(value: Number) -> str:
    """Format a parameter value for error messages (``3`` instead of ``3.0``)."""
    if isinstance(value, Real) and math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return f"{value:g}" if isinstance(value, Real) else repr(value)


def is_integer(value: Number) -> bool:
    """Check whether a real number has no fractional part."""
    return math.isfinite(value) and float(value).is_integer()


@dataclass(slots=True, frozen=True)
class ParameterDescriptor:
    """
    Declarative metadata of one distribution parameter.

    Parameters
    ----------
    name : str
        Identifier used as display label and as the key of the validated
        parameter mapping.
    discrete : bool
        Whether the parameter only accepts integer values.
    min_value : float or None
        Lower bound, ``None`` for no lower bound.
    min_inclusive : bool
        Whether ``min_value`` itself is an admissible value.
    max_value : float or None
        Upper bound, ``None`` for no upper bound.
    max_inclusive : bool
        Whether ``max_value`` itself is an admissible value.
    """

    name: ParameterName
    discrete: bool = False
    min_value: float | None = None
    min_inclusive: bool = False
    max_value: float | None = None
    max_inclusive: bool = False

    @property
    def has_min_value(self) -> bool:
        return self.min_value is not None

    @property
    def has_max_value(self) -> bool:
        return self.max_value is not None

    def validate(self, value: object) -> Number:
        """
        Check a supplied value against this descriptor.

        Parameters
        ----------
        value : object
            Value bound to the parameter at call time.

        Returns
        -------
        Number
            The checked value: ``int`` for discrete parameters, ``numpy.float64``
            otherwise, so that overflow in formulas yields ``inf`` instead of
            raising.

        Raises
        ------
        DomainError
            If the value is not a real number, is not an integer although the
            parameter is discrete, or lies outside the declared bounds.
        """
        if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
            raise DomainError(f"{self.name} has to be a real number but is {value!r}", self.name)

        if self.discrete:
            if not is_integer(value):
                raise DomainError(
                    f"{self.name} has to be an integer but is {format_number(value)}", self.name
                )
            value = int(value)
        else:
            value = np.float64(value)

        if self.min_value is not None:
            if self.min_inclusive:
                if value < self.min_value:
                    raise DomainError(
                        f"{self.name} has to be >={format_number(self.min_value)}"
                        f" but is {format_number(value)}",
                        self.name,
                    )
            elif value <= self.min_value:
                raise DomainError(
                    f"{self.name} has to be >{format_number(self.min_value)}"
                    f" but is {format_number(value)}",
                    self.name,
                )

        if self.max_value is not None:
            if self.max_inclusive:
                if value > self.max_value:
                    raise DomainError(
                        f"{self.name} has to be <={format_number(self.max_value)}"
                        f" but is {format_number(value)}",
                        self.name,
                    )
            elif value >= self.max_value:
                raise DomainError(
                    f"{self.name} has to be <{format_number(self.max_value)}"
                    f" but is {format_number(value)}",
                    self.name,
                )

        return value

    def describe(self) -> str:
        """
        Human-readable domain of the parameter.

        Examples: ``"ℤ"``, ``"n>=1"``, ``"ℝ"``, ``"0<p<1"``, ``"0<=p<=1"``.
        """
        if self.discrete and self.max_value is None:
            if self.min_value is None:
                return "ℤ"
            return f"{self.name}>={format_number(self.min_value)}"

        if self.min_value is None and self.max_value is None:
            return "ℝ"

        text = ""
        if self.min_value is not None:
            text += format_number(self.min_value) + ("<=" if self.min_inclusive else "<")
        text += self.name
        if self.max_value is not None:
            text += ("<=" if self.max_inclusive else "<") + format_number(self.max_value)
        return text


def discrete_parameter(
    name: ParameterName, min_value: int | None = None, max_value: int | None = None
) -> ParameterDescriptor:
    """Integer-valued parameter with inclusive bounds."""
    return ParameterDescriptor(
        name=name,
        discrete=True,
        min_value=min_value,
        min_inclusive=True,
        max_value=max_value,
        max_inclusive=True,
    )


def continuous_parameter(
    name: ParameterName,
    min_value: float | None = None,
    min_inclusive: bool = False,
    max_value: float | None = None,
    max_inclusive: bool = False,
) -> ParameterDescriptor:
    """Real-valued parameter with optionally inclusive bounds."""
    return ParameterDescriptor(
        name=name,
        discrete=False,
        min_value=min_value,
        min_inclusive=min_inclusive,
        max_value=max_value,
        max_inclusive=max_inclusive,
    )


class ParameterValues(Mapping[str, "Number"]):
    """
    Read-only, ordered mapping from parameter identifiers to checked values.

    Values are also reachable as attributes (``values.mu``); identifiers that
    are Python keywords (``lambda``) have to be accessed by key.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Number] | None = None) -> None:
        object.__setattr__(self, "_values", dict(values or {}))

    def __getitem__(self, key: str) -> Number:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Number:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ParameterValues is read-only")

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={format_number(v)}" for k, v in self._values.items())
        return f"ParameterValues({inner})"


@dataclass(slots=True, frozen=True)
class ParameterConstraint:
    """
    Relation between several parameters of one distribution.

    Parameters
    ----------
    description : str
        Message reported when the relation does not hold (e.g. ``"b has to be >=a"``).
    check : Callable[[ParameterValues], bool]
        Predicate returning True if the relation is satisfied.
    """

    description: str
    check: Callable[[ParameterValues], bool]

    def validate(self, values: ParameterValues) -> None:
        """
        Raises
        ------
        DomainError
            If the relation does not hold.
        """
        if not self.check(values):
            raise DomainError(self.description)


def constraint(
    description: str,
) -> Callable[[Callable[[ParameterValues], bool]], Callable[[ParameterValues], bool]]:
    """
    Decorator to mark a predicate as a cross-parameter constraint.

    Parameters
    ----------
    description : str
        Message reported when the predicate returns False.

    Notes
    -----
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(
        func: Callable[[ParameterValues], bool],
    ) -> Callable[[ParameterValues], bool]:
        @wraps(func)
        def wrapper(values: ParameterValues) -> bool:
            return func(values)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def as_constraint(
    item: ParameterConstraint | Callable[[ParameterValues], bool],
) -> ParameterConstraint:
    """
    Normalize a constraint declaration.

    Raises
    ------
    TypeError
        If ``item`` is a plain callable that was not marked with :func:`constraint`.
    """
    if isinstance(item, ParameterConstraint):
        return item
    if not getattr(item, "__is_constraint", False):
        raise TypeError(f"{item!r} is not marked with @constraint")
    desc = getattr(item, "__constraint_description", getattr(item, "__name__", "constraint"))
    return ParameterConstraint(description=desc, check=item)


def ordered_parameters(
    lower: ParameterName, upper: ParameterName, description: str | None = None
) -> ParameterConstraint:
    """
    Constraint ``lower <= upper``.

    Reported as ``"<upper> has to be >=<lower>"`` unless ``description`` is given.
    """
    return ParameterConstraint(
        description=description or f"{upper} has to be >={lower}",
        check=lambda values: values[lower] <= values[upper],
    )


__all__ = [
    "ParameterDescriptor",
    "ParameterValues",
    "ParameterConstraint",
    "constraint",
    "as_constraint",
    "ordered_parameters",
    "discrete_parameter",
    "continuous_parameter",
    "format_number",
    "is_integer",
]
