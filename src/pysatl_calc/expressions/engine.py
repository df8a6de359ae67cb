"""
Expression engine on top of SymPy.

Expressions are parsed with :func:`sympy.parsing.sympy_parser.parse_expr`
(``^`` means power) and compiled to plain Python callables with
:func:`sympy.lambdify`. Native functions registered in the engine, such as
``normal_pdf``, are parsed as undefined SymPy functions and resolved by name
when the compiled expression is evaluated.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import keyword
from tokenize import TokenError
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import sympy
from sympy.core.function import AppliedUndef
from sympy.parsing.sympy_parser import convert_xor, parse_expr, standard_transformations

from pysatl_calc.errors import DistributionError, ExpressionError, ExpressionSyntaxError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

_TRANSFORMATIONS = (*standard_transformations, convert_xor)


class CompiledExpression:
    """
    Parsed expression ready to be evaluated against a variable scope.

    Parameters
    ----------
    text : str
        Source text of the expression.
    expression : sympy.Expr
        Parsed (unevaluated) SymPy expression.
    functions : Mapping[str, Callable]
        Native functions visible to the expression.
    """

    __slots__ = ("_text", "_variables", "_func")

    def __init__(
        self,
        text: str,
        expression: sympy.Expr,
        functions: Mapping[str, Callable[..., Any]],
    ) -> None:
        symbols = sorted(expression.free_symbols, key=lambda s: s.name)
        self._text = text
        self._variables = tuple(s.name for s in symbols)
        self._func = sympy.lambdify(symbols, expression, modules=[dict(functions), "math"])

    @property
    def text(self) -> str:
        return self._text

    @property
    def variables(self) -> tuple[str, ...]:
        """Names of the free variables, sorted."""
        return self._variables

    def evaluate(self, scope: Mapping[str, Any] | None = None) -> Any:
        """
        Evaluate the expression.

        Parameters
        ----------
        scope : Mapping[str, Any] or None, optional
            Values of the free variables.

        Returns
        -------
        Any
            Value of the expression.

        Raises
        ------
        ExpressionError
            If a variable has no value or the evaluation fails numerically.
        DistributionError
            Raised by distribution functions on invalid parameters; passed
            through unchanged.
        """
        scope = scope or {}
        missing = [name for name in self._variables if name not in scope]
        if missing:
            raise ExpressionError(f"Undefined variable(s): {', '.join(missing)}")

        try:
            return self._func(*(scope[name] for name in self._variables))
        except DistributionError:
            raise
        except (ArithmeticError, ValueError, TypeError) as exc:
            raise ExpressionError(f"Cannot evaluate {self._text!r}: {exc}") from exc

    def __repr__(self) -> str:
        return f"CompiledExpression({self._text!r})"


class ExpressionEngine:
    """
    Compiler of text expressions with a table of native functions.

    Notes
    -----
    The function table only grows. A name can be registered again only with
    the very same callable, so independent callers cannot silently replace
    each other's functions.
    """

    def __init__(self) -> None:
        self._functions: dict[str, Callable[..., Any]] = {}
        self.loaded_extensions: set[str] = set()

    @property
    def functions(self) -> Mapping[str, Callable[..., Any]]:
        """Read-only view of the registered native functions."""
        return MappingProxyType(self._functions)

    def register_functions(self, functions: Mapping[str, Callable[..., Any]]) -> None:
        """
        Install native functions callable from expressions by name.

        Parameters
        ----------
        functions : Mapping[str, Callable]
            Function name to callable.

        Raises
        ------
        ExpressionError
            If a name is not an identifier, a value is not callable, or a
            name is already bound to a different callable. Nothing is
            installed in that case.
        """
        for name, func in functions.items():
            if not name.isidentifier() or keyword.iskeyword(name):
                raise ExpressionError(f"{name!r} is not a valid function name")
            if not callable(func):
                raise ExpressionError(f"Function {name} is not callable")
            current = self._functions.get(name)
            if current is not None and current is not func:
                raise ExpressionError(f"Function {name} is already registered")
        self._functions.update(functions)

    def compile(self, text: str) -> CompiledExpression:
        """
        Parse an expression.

        Raises
        ------
        ExpressionSyntaxError
            If ``text`` is not a valid expression.
        ExpressionError
            If the expression calls a function that is not registered.
        """
        local_dict = {name: sympy.Function(name) for name in self._functions}
        try:
            expression = parse_expr(
                text,
                local_dict=local_dict,
                transformations=_TRANSFORMATIONS,
                evaluate=False,
            )
        except (SyntaxError, TokenError, TypeError, ValueError) as exc:
            raise ExpressionSyntaxError(f"Invalid expression {text!r}: {exc}") from exc
        if not isinstance(expression, sympy.Basic):
            raise ExpressionSyntaxError(f"Invalid expression {text!r}")
        called = {f.func.__name__ for f in expression.atoms(AppliedUndef)}
        unknown = sorted(called - set(self._functions))
        if unknown:
            raise ExpressionError(f"Unknown function(s): {', '.join(unknown)}")
        return CompiledExpression(text, expression, self._functions)

    def evaluate(self, text: str, scope: Mapping[str, Any] | None = None) -> Any:
        """Compile and evaluate ``text`` in one step."""
        return self.compile(text).evaluate(scope)


__all__ = [
    "CompiledExpression",
    "ExpressionEngine",
]
