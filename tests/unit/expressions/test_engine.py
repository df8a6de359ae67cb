from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_calc.errors import (
    ArityError,
    DistributionError,
    ExpressionError,
    ExpressionSyntaxError,
)
from pysatl_calc.expressions import ExpressionEngine


def _double(x):
    return 2 * x


def _fail(x):
    raise ArityError(2, 1)


class TestRegisterFunctions:
    def setup_method(self) -> None:
        self.engine = ExpressionEngine()

    def test_registered_functions_are_visible(self) -> None:
        self.engine.register_functions({"double": _double})
        assert self.engine.functions["double"] is _double

    def test_functions_view_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            self.engine.functions["double"] = _double  # type: ignore[index]

    @pytest.mark.parametrize("name", ["x y", "1abc", "", "class"])
    def test_invalid_name(self, name) -> None:
        with pytest.raises(ExpressionError, match="is not a valid function name"):
            self.engine.register_functions({name: _double})

    def test_not_callable(self) -> None:
        with pytest.raises(ExpressionError, match="Function three is not callable"):
            self.engine.register_functions({"three": 3})

    def test_conflict(self) -> None:
        self.engine.register_functions({"double": _double})
        with pytest.raises(ExpressionError, match="Function double is already registered"):
            self.engine.register_functions({"double": lambda x: x + x})

    def test_same_callable_can_be_registered_again(self) -> None:
        self.engine.register_functions({"double": _double})
        self.engine.register_functions({"double": _double})
        assert len(self.engine.functions) == 1

    def test_nothing_installed_on_error(self) -> None:
        with pytest.raises(ExpressionError):
            self.engine.register_functions({"double": _double, "three": 3})
        assert len(self.engine.functions) == 0


class TestCompileAndEvaluate:
    def setup_method(self) -> None:
        self.engine = ExpressionEngine()
        self.engine.register_functions({"double": _double, "fail": _fail})

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1 + 2 * 3", 7),
            ("2^10", 1024),
            ("2**3", 8),
            ("7 / 2", 3.5),
            ("double(21)", 42),
            ("double(double(1.5))", 6.0),
        ],
    )
    def test_constant_expressions(self, text, expected) -> None:
        assert self.engine.evaluate(text) == pytest.approx(expected)

    def test_variables_are_sorted(self) -> None:
        compiled = self.engine.compile("y * x + double(a)")
        assert compiled.variables == ("a", "x", "y")
        assert compiled.evaluate({"a": 1, "x": 2, "y": 3}) == pytest.approx(8)

    def test_compiled_expression_is_reusable(self) -> None:
        compiled = self.engine.compile("x^2 + 1")
        assert [compiled.evaluate({"x": v}) for v in (0, 1, 2)] == [1, 2, 5]
        assert compiled.text == "x^2 + 1"
        assert repr(compiled) == "CompiledExpression('x^2 + 1')"

    def test_math_functions(self) -> None:
        assert self.engine.evaluate("sqrt(x)", {"x": 16}) == pytest.approx(4.0)
        assert self.engine.evaluate("exp(0) + log(1)") == pytest.approx(1.0)

    def test_missing_variables(self) -> None:
        with pytest.raises(ExpressionError, match="Undefined variable\\(s\\): a, b"):
            self.engine.evaluate("b + a + x", {"x": 1})

    @pytest.mark.parametrize("text", ["1 +", "(1 + 2", "double("])
    def test_syntax_errors(self, text) -> None:
        with pytest.raises(ExpressionSyntaxError, match="Invalid expression"):
            self.engine.compile(text)

    def test_syntax_error_is_expression_error(self) -> None:
        assert issubclass(ExpressionSyntaxError, ExpressionError)
        assert issubclass(ExpressionError, ValueError)

    def test_unknown_function(self) -> None:
        with pytest.raises(ExpressionError, match="Unknown function\\(s\\): triple"):
            self.engine.compile("triple(2)")

    def test_distribution_errors_pass_through(self) -> None:
        with pytest.raises(ArityError) as exc_info:
            self.engine.evaluate("fail(1)")
        assert isinstance(exc_info.value, DistributionError)
        assert not isinstance(exc_info.value, ExpressionError)

    def test_arithmetic_errors_are_wrapped(self) -> None:
        with pytest.raises(ExpressionError, match="Cannot evaluate") as exc_info:
            self.engine.evaluate("1 / x", {"x": 0})
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)

    def test_domain_errors_of_math_are_wrapped(self) -> None:
        with pytest.raises(ExpressionError, match="Cannot evaluate"):
            self.engine.evaluate("log(x)", {"x": -1})

    def test_float_results(self) -> None:
        assert self.engine.evaluate("x / 3", {"x": 1.0}) == pytest.approx(1 / 3)
        assert math.isinf(self.engine.evaluate("x * 2", {"x": math.inf}))
