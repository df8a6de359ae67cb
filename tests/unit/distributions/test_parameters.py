from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_calc.distributions.parameters import (
    ParameterConstraint,
    ParameterValues,
    as_constraint,
    constraint,
    continuous_parameter,
    discrete_parameter,
    format_number,
    is_integer,
    ordered_parameters,
)
from pysatl_calc.errors import DomainError


class TestParameterDescriptor:
    @pytest.mark.parametrize(
        "descriptor, expected",
        [
            (discrete_parameter("a"), "ℤ"),
            (discrete_parameter("n", 1), "n>=1"),
            (discrete_parameter("n", 1, 25), "1<=n<=25"),
            (continuous_parameter("mu"), "ℝ"),
            (continuous_parameter("sigma", 0, True), "0<=sigma"),
            (continuous_parameter("lambda", 0), "0<lambda"),
            (continuous_parameter("p", 0, False, 1, False), "0<p<1"),
            (continuous_parameter("p", 0, True, 1, True), "0<=p<=1"),
        ],
    )
    def test_describe(self, descriptor, expected) -> None:
        assert descriptor.describe() == expected

    def test_discrete_value_is_converted_to_int(self) -> None:
        value = discrete_parameter("n", 1).validate(3.0)
        assert value == 3
        assert isinstance(value, int)

    def test_continuous_value_is_converted_to_float64(self) -> None:
        value = continuous_parameter("mu").validate(2)
        assert value == 2.0
        assert isinstance(value, np.float64)

    @pytest.mark.parametrize(
        "descriptor, value, message",
        [
            (continuous_parameter("sigma", 0, True), -1, "sigma has to be >=0 but is -1"),
            (continuous_parameter("lambda", 0), 0, "lambda has to be >0 but is 0"),
            (continuous_parameter("p", 0, True, 1, True), 1.5, "p has to be <=1 but is 1.5"),
            (continuous_parameter("p", 0, False, 1, False), 1, "p has to be <1 but is 1"),
            (discrete_parameter("n", 1), 2.5, "n has to be an integer but is 2.5"),
            (discrete_parameter("n", 1), 0, "n has to be >=1 but is 0"),
            (discrete_parameter("n", 1, 25), 26, "n has to be <=25 but is 26"),
        ],
    )
    def test_validate_messages(self, descriptor, value, message) -> None:
        with pytest.raises(DomainError) as exc_info:
            descriptor.validate(value)
        assert str(exc_info.value) == message
        assert exc_info.value.parameter == descriptor.name

    @pytest.mark.parametrize("value", ["1", None, True, math.nan, 1 + 2j])
    def test_non_real_values_are_rejected(self, value) -> None:
        with pytest.raises(DomainError, match="has to be a real number"):
            continuous_parameter("mu").validate(value)

    def test_boundaries_are_admissible_when_inclusive(self) -> None:
        assert continuous_parameter("p", 0, True, 1, True).validate(0) == 0.0
        assert continuous_parameter("p", 0, True, 1, True).validate(1) == 1.0
        assert discrete_parameter("n", 1, 25).validate(25) == 25

    def test_infinite_continuous_value_passes_unbounded_parameter(self) -> None:
        assert continuous_parameter("mu").validate(math.inf) == math.inf

    def test_infinite_discrete_value_is_not_an_integer(self) -> None:
        with pytest.raises(DomainError, match="has to be an integer"):
            discrete_parameter("a").validate(math.inf)


class TestParameterValues:
    def setup_method(self) -> None:
        self.values = ParameterValues({"mu": 1.5, "lambda": 2.0})

    def test_mapping_access(self) -> None:
        assert self.values["mu"] == 1.5
        assert self.values["lambda"] == 2.0
        assert list(self.values) == ["mu", "lambda"]
        assert len(self.values) == 2
        assert dict(self.values) == {"mu": 1.5, "lambda": 2.0}

    def test_attribute_access(self) -> None:
        assert self.values.mu == 1.5

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            _ = self.values.sigma

    def test_read_only(self) -> None:
        with pytest.raises(AttributeError):
            self.values.mu = 3.0

    def test_repr(self) -> None:
        assert repr(ParameterValues({"n": 3, "p": 0.25})) == "ParameterValues(n=3, p=0.25)"


class TestConstraints:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(values: ParameterValues) -> bool:
            return values["a"] > 0

        c = ParameterConstraint(description="a has to be >0", check=is_positive)
        assert c.description == "a has to be >0"
        assert c.check is is_positive
        c.validate(ParameterValues({"a": 1.0}))
        with pytest.raises(DomainError, match="a has to be >0"):
            c.validate(ParameterValues({"a": -1.0}))

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("b has to be >a")
        def check_order(values: ParameterValues) -> bool:
            return values["b"] > values["a"]

        assert getattr(check_order, "__is_constraint", None) is True
        assert getattr(check_order, "__constraint_description", None) == "b has to be >a"

        normalized = as_constraint(check_order)
        assert isinstance(normalized, ParameterConstraint)
        assert normalized.description == "b has to be >a"
        assert normalized.check(ParameterValues({"a": 0.0, "b": 1.0})) is True

    def test_unmarked_callable_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="not marked with @constraint"):
            as_constraint(lambda values: True)

    def test_ordered_parameters_default_description(self) -> None:
        c = ordered_parameters("a", "b")
        assert c.description == "b has to be >=a"
        c.validate(ParameterValues({"a": 1.0, "b": 1.0}))
        with pytest.raises(DomainError, match="b has to be >=a"):
            c.validate(ParameterValues({"a": 2.0, "b": 1.0}))

    def test_ordered_parameters_custom_description(self) -> None:
        c = ordered_parameters("a", "b", "a has to be <=b")
        with pytest.raises(DomainError, match="a has to be <=b"):
            c.validate(ParameterValues({"a": 2.0, "b": 1.0}))


@pytest.mark.parametrize(
    "value, expected",
    [(3.0, "3"), (3, "3"), (2.5, "2.5"), (-0.125, "-0.125"), (math.inf, "inf")],
)
def test_format_number(value, expected) -> None:
    assert format_number(value) == expected


def test_is_integer() -> None:
    assert is_integer(4.0)
    assert is_integer(-2)
    assert not is_integer(0.5)
    assert not is_integer(math.inf)
