from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_calc.distributions.generators import RandomSource
from pysatl_calc.errors import ArityError, DomainError
from pysatl_calc.expressions import (
    DISTRIBUTIONS_EXTENSION,
    ExpressionEngine,
    distribution_functions,
    load_distribution_extensions,
)


class TestDistributionFunctions:
    def test_three_functions_per_distribution(self) -> None:
        functions = distribution_functions()
        assert len(functions) == 186
        assert {"normal_pdf", "normal_cdf", "normal_random"} <= set(functions)
        assert {"gaussKuzmin_pdf", "loglaplace_random"} <= set(functions)

    def test_functions_are_named(self) -> None:
        functions = distribution_functions()
        for name, func in functions.items():
            assert func.__name__ == name
            assert func.__doc__

    def test_bound_source_is_used(self) -> None:
        first = distribution_functions(RandomSource(5))["normal_random"]
        second = distribution_functions(RandomSource(5))["normal_random"]
        assert [first(0, 1) for _ in range(10)] == [second(0, 1) for _ in range(10)]


class TestLoadDistributionExtensions:
    def setup_method(self) -> None:
        self.engine = ExpressionEngine()

    def test_loads_once(self) -> None:
        assert load_distribution_extensions(self.engine)
        assert DISTRIBUTIONS_EXTENSION in self.engine.loaded_extensions
        assert len(self.engine.functions) == 186

        assert not load_distribution_extensions(self.engine)
        assert len(self.engine.functions) == 186

    def test_engines_are_independent(self) -> None:
        load_distribution_extensions(self.engine)
        other = ExpressionEngine()
        assert other.loaded_extensions == set()
        assert load_distribution_extensions(other)

    def test_conflicting_function_prevents_loading(self) -> None:
        self.engine.register_functions({"normal_pdf": lambda *args: 0.0})
        with pytest.raises(ValueError, match="normal_pdf is already registered"):
            load_distribution_extensions(self.engine)
        assert self.engine.loaded_extensions == set()
        assert len(self.engine.functions) == 1


class TestDistributionExpressions:
    def setup_method(self) -> None:
        self.engine = ExpressionEngine()
        load_distribution_extensions(self.engine, RandomSource(2025))

    def test_poisson(self) -> None:
        assert self.engine.evaluate("poisson_pdf(3, 4)") == pytest.approx(0.1954, abs=1e-4)
        assert self.engine.evaluate("poisson_cdf(3, 4)") == pytest.approx(0.4335, abs=1e-4)

    def test_normal_cdf_at_mean(self) -> None:
        assert self.engine.evaluate("normal_cdf(0, 0, 1)") == 0.5

    def test_combined_expression(self) -> None:
        value = self.engine.evaluate("1 - normal_cdf(z, 0, 1) * 2", {"z": 0})
        assert value == pytest.approx(0.0)

    def test_complementary_probabilities(self) -> None:
        text = "binomial_cdf(k, 10, 0.3) + (1 - binomial_cdf(k, 10, 0.3))"
        value = self.engine.evaluate(text, {"k": 4})
        assert value == pytest.approx(1.0)

    def test_random_in_expression(self) -> None:
        value = self.engine.evaluate("uniform_random(a, a + 1)", {"a": 3})
        assert 3 <= value <= 4

    def test_arity_error(self) -> None:
        with pytest.raises(ArityError, match="2 parameters expected but 0 given."):
            self.engine.evaluate("normal_pdf(0)")

    def test_domain_error(self) -> None:
        with pytest.raises(DomainError, match="p has to be <=1 but is 1.5"):
            self.engine.evaluate("binomial_pdf(2, 5, 1.5)")

    def test_uniform_order_error(self) -> None:
        with pytest.raises(DomainError):
            self.engine.evaluate("uniform_pdf(0, 5, 2)")
