"""
Probability distribution with validated pdf, cdf and random number dispatch.

A :class:`ProbabilityDistribution` pairs the ordered parameter descriptors of
one law with its characteristic implementations. Every public call checks the
parameters first (arity, per-parameter domain, cross-parameter relations) and
only then runs the implementation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import threading
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from numbers import Real
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_calc.distributions.config import DEFAULT_SETTINGS, NumericalSettings
from pysatl_calc.distributions.generators import default_random_source
from pysatl_calc.distributions.parameters import (
    ParameterConstraint,
    ParameterDescriptor,
    ParameterValues,
    as_constraint,
    is_integer,
)
from pysatl_calc.distributions.strategies import (
    AnalyticalSamplingStrategy,
    BisectionSamplingStrategy,
    CumulativeMassSamplingStrategy,
    SamplingStrategy,
    discrete_cdf_by_summation,
)
from pysatl_calc.distributions.support import UNBOUNDED, IntegerSupport
from pysatl_calc.errors import ArityError, DomainError
from pysatl_calc.special import clamp_probability
from pysatl_calc.types import CharacteristicName, Kind

if TYPE_CHECKING:
    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.types import Number

type DensityFunc = Callable[[ParameterValues, Any], Any]


class ParameterCache:
    """
    Memo of one expensive sub-computation keyed by the last seen parameters.

    Only the most recent key and value are kept. Lookups are serialized by a
    lock, so one cache may be shared by several threads. Removing the cache
    never changes results, only speed.

    Parameters
    ----------
    compute : Callable[..., float]
        Pure function of the key values.
    """

    __slots__ = ("_compute", "_key", "_value", "_lock")

    def __init__(self, compute: Callable[..., float]) -> None:
        self._compute = compute
        self._key: tuple[Hashable, ...] | None = None
        self._value = 0.0
        self._lock = threading.Lock()

    def __call__(self, *key: Hashable) -> float:
        with self._lock:
            if key != self._key:
                self._value = self._compute(*key)
                self._key = key
            return self._value


def _check_point(x: object) -> float:
    if isinstance(x, bool) or not isinstance(x, Real) or math.isnan(x):
        raise DomainError(f"x has to be a real number but is {x!r}", "x")
    return x  # type: ignore[return-value]


class ProbabilityDistribution:
    """
    One concrete probability law.

    Parameters
    ----------
    name : str
        Internal name; the exported functions are ``{name}_pdf``,
        ``{name}_cdf`` and ``{name}_random``.
    kind : Kind
        Discrete or continuous.
    parameters : Sequence[ParameterDescriptor]
        Parameter descriptors in positional order.
    distr_characteristics : Mapping[CharacteristicName, Callable]
        Implementations keyed by characteristic name. ``pdf(values, x)`` is
        required. ``cdf(values, x)`` is required for continuous laws; discrete
        laws without it sum the mass function. ``random(values, source)`` is
        optional; without it a generic inverse-transform sampler is used.
    display_name : str or None, optional
        Human-readable name, defaults to ``name``.
    constraints : Iterable, optional
        Cross-parameter relations (:class:`ParameterConstraint` instances or
        functions marked with :func:`constraint`), checked in order.
    support_by_parameters : Callable[[ParameterValues], IntegerSupport] or None, optional
        Support of a discrete law for given parameters; used by the summation
        fallbacks. Defaults to an unbounded integer range.
    sampling_strategy : SamplingStrategy or None, optional
        Explicit sampler; overrides the ``random`` characteristic.
    settings : NumericalSettings or None, optional
        Constants of the generic fallbacks.

    Raises
    ------
    ValueError
        If the pdf is missing, a continuous law has no cdf, or two
        parameters share an identifier.
    """

    def __init__(
        self,
        name: str,
        kind: Kind,
        parameters: Sequence[ParameterDescriptor],
        distr_characteristics: Mapping[CharacteristicName, Callable[..., Any]],
        display_name: str | None = None,
        constraints: Iterable[ParameterConstraint | Callable[[ParameterValues], bool]] = (),
        support_by_parameters: Callable[[ParameterValues], IntegerSupport] | None = None,
        sampling_strategy: SamplingStrategy | None = None,
        settings: NumericalSettings | None = None,
    ) -> None:
        if CharacteristicName.PDF not in distr_characteristics:
            raise ValueError(f"Distribution {name} has no pdf")
        if kind == Kind.CONTINUOUS and CharacteristicName.CDF not in distr_characteristics:
            raise ValueError(f"Continuous distribution {name} has no cdf")
        ids = [p.name for p in parameters]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Distribution {name} has duplicate parameter identifiers")

        self._name = str(name)
        self._display_name = display_name if display_name is not None else name
        self._kind = Kind(kind)
        self._parameters = tuple(parameters)
        self._constraints = tuple(as_constraint(c) for c in constraints)
        self._pdf: DensityFunc = distr_characteristics[CharacteristicName.PDF]
        self._cdf: DensityFunc | None = distr_characteristics.get(CharacteristicName.CDF)
        self._support_by_parameters = support_by_parameters
        self.settings = settings or DEFAULT_SETTINGS

        if sampling_strategy is None:
            sampler = distr_characteristics.get(CharacteristicName.RANDOM)
            if sampler is not None:
                sampling_strategy = AnalyticalSamplingStrategy(sampler)
            elif self.is_discrete:
                sampling_strategy = CumulativeMassSamplingStrategy(self.settings)
            else:
                sampling_strategy = BisectionSamplingStrategy(self.settings)
        self.sampling_strategy = sampling_strategy

    # --------------------------------------------------------------- metadata

    @property
    def name(self) -> str:
        return self._name

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def is_discrete(self) -> bool:
        return self._kind == Kind.DISCRETE

    @property
    def parameters(self) -> tuple[ParameterDescriptor, ...]:
        return self._parameters

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self._parameters)

    @property
    def constraints(self) -> tuple[ParameterConstraint, ...]:
        return self._constraints

    @property
    def has_closed_form_cdf(self) -> bool:
        return self._cdf is not None

    def function_name(self, characteristic: CharacteristicName) -> str:
        return f"{self._name}_{CharacteristicName(characteristic).value}"

    def signatures(self) -> dict[str, str]:
        """
        Call signatures of the exported functions, parameters joined by ``;``.

        Returns
        -------
        dict[str, str]
            E.g. ``{"pdf": "normal_pdf(x;mu;sigma)", "cdf": "normal_cdf(x;mu;sigma)",
            "random": "normal_random(mu;sigma)"}``.
        """
        ids = list(self.parameter_names)
        return {
            CharacteristicName.PDF.value: (
                f"{self.function_name(CharacteristicName.PDF)}({';'.join(['x', *ids])})"
            ),
            CharacteristicName.CDF.value: (
                f"{self.function_name(CharacteristicName.CDF)}({';'.join(['x', *ids])})"
            ),
            CharacteristicName.RANDOM.value: (
                f"{self.function_name(CharacteristicName.RANDOM)}({';'.join(ids)})"
            ),
        }

    # ------------------------------------------------------------- validation

    def bind_parameters(self, params: Sequence[object]) -> ParameterValues:
        """
        Validate positional parameters and bind them to their identifiers.

        Parameters
        ----------
        params : Sequence[object]
            Parameter values in descriptor order.

        Returns
        -------
        ParameterValues
            Identifier to value mapping in descriptor order.

        Raises
        ------
        ArityError
            If the number of values differs from the number of descriptors.
        DomainError
            If a value violates its descriptor or a cross-parameter relation.
        """
        if len(params) != len(self._parameters):
            raise ArityError(len(self._parameters), len(params))

        values = ParameterValues(
            {
                descriptor.name: descriptor.validate(value)
                for descriptor, value in zip(self._parameters, params, strict=True)
            }
        )
        for item in self._constraints:
            item.validate(values)
        return values

    # ----------------------------------------------------- unchecked evaluation

    def support_for(self, values: ParameterValues) -> IntegerSupport:
        """Integer support of a discrete law for validated parameters."""
        if self._support_by_parameters is None:
            return UNBOUNDED
        return self._support_by_parameters(values)

    def density_at(self, values: ParameterValues, x: Number) -> float:
        """Density or mass at ``x`` for already validated parameters."""
        if not self.is_discrete:
            x = np.float64(x)
        with np.errstate(all="ignore"):
            return float(self._pdf(values, x))

    def cumulative_at(self, values: ParameterValues, x: Number) -> float:
        """
        Cumulative probability at ``x`` for already validated parameters.

        Discrete laws evaluate at ``floor(x)``. The result is clipped to ``[0, 1]``.
        """
        if x == math.inf:
            return 1.0
        if x == -math.inf:
            return 0.0
        if self.is_discrete:
            x = math.floor(x)
        else:
            x = np.float64(x)

        with np.errstate(all="ignore"):
            if self._cdf is not None:
                result = float(self._cdf(values, x))
            else:
                result = discrete_cdf_by_summation(
                    lambda k: float(self._pdf(values, k)),
                    self.support_for(values),
                    x,
                    self.settings,
                    self._name,
                )
        return clamp_probability(result)

    def sample(self, values: ParameterValues, source: RandomSource) -> Number:
        """One variate for already validated parameters."""
        with np.errstate(all="ignore"):
            result = float(self.sampling_strategy.sample(self, values, source))
        if self.is_discrete and math.isfinite(result):
            return int(result)
        return result

    # ------------------------------------------------------------- public API

    def pdf(self, x: Number, *params: Number) -> float:
        """
        Density (continuous) or mass (discrete) at ``x``.

        A discrete law returns ``0.0`` at non-integer points; densities are
        ``0.0`` outside the support and ``inf`` at the point of a degenerate law.

        Raises
        ------
        ArityError, DomainError
            On invalid parameters.
        """
        values = self.bind_parameters(params)
        x = _check_point(x)
        if self.is_discrete and not is_integer(x):
            return 0.0
        if not math.isfinite(x):
            return 0.0
        return self.density_at(values, x)

    def cdf(self, x: Number, *params: Number) -> float:
        """
        Probability ``P(X <= x)``; discrete laws floor ``x`` first.

        Raises
        ------
        ArityError, DomainError
            On invalid parameters.
        """
        values = self.bind_parameters(params)
        return self.cumulative_at(values, _check_point(x))

    def random(self, *params: Number, source: RandomSource | None = None) -> Number:
        """
        One pseudo-random variate.

        Parameters
        ----------
        *params : Number
            Distribution parameters in descriptor order.
        source : RandomSource or None, optional
            Random source, defaults to the calling thread's default source.

        Returns
        -------
        int or float
            ``int`` for discrete laws.

        Raises
        ------
        ArityError, DomainError
            On invalid parameters.
        SamplingError
            If a rejection sampler exhausted its iteration cap.
        """
        values = self.bind_parameters(params)
        return self.sample(values, source if source is not None else default_random_source())

    def functions(self, source: RandomSource | None = None) -> dict[str, Callable[..., Number]]:
        """
        The three exported callables ``{name}_pdf``, ``{name}_cdf``, ``{name}_random``.

        Parameters
        ----------
        source : RandomSource or None, optional
            Random source bound into the ``_random`` closure; ``None`` uses the
            calling thread's default source on every call.
        """
        signatures = self.signatures()

        def pdf_function(x: Number, *params: Number) -> float:
            return self.pdf(x, *params)

        def cdf_function(x: Number, *params: Number) -> float:
            return self.cdf(x, *params)

        def random_function(*params: Number) -> Number:
            return self.random(*params, source=source)

        result: dict[str, Callable[..., Number]] = {}
        for characteristic, func in (
            (CharacteristicName.PDF, pdf_function),
            (CharacteristicName.CDF, cdf_function),
            (CharacteristicName.RANDOM, random_function),
        ):
            func_name = self.function_name(characteristic)
            func.__name__ = func_name
            func.__qualname__ = func_name
            func.__doc__ = f"{signatures[characteristic.value]} of the {self._display_name}."
            result[func_name] = func
        return result

    def __repr__(self) -> str:
        return (
            f"ProbabilityDistribution(name={self._name!r}, kind={self._kind.value!r}, "
            f"parameters={list(self.parameter_names)!r})"
        )


__all__ = [
    "ProbabilityDistribution",
    "ParameterCache",
]
