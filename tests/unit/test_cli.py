from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest
from typer.testing import CliRunner

from pysatl_calc import __version__
from pysatl_calc.cli import app

runner = CliRunner()


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"pysatl-calc {__version__}" in result.stdout


def test_no_command_prints_help() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "list" in result.stdout
    assert "eval" in result.stdout


class TestListCommand:
    def test_lists_all_distributions(self) -> None:
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "Distributions" in result.stdout
        assert "poisson" in result.stdout
        assert "cauchy" in result.stdout

    def test_discrete_only(self) -> None:
        result = runner.invoke(app, ["list", "--discrete"])
        assert result.exit_code == 0
        assert "poisson" in result.stdout
        assert "cauchy" not in result.stdout

    def test_continuous_only(self) -> None:
        result = runner.invoke(app, ["list", "--continuous"])
        assert result.exit_code == 0
        assert "cauchy" in result.stdout
        assert "poisson" not in result.stdout

    def test_both_filters_are_rejected(self) -> None:
        result = runner.invoke(app, ["list", "--discrete", "--continuous"])
        assert result.exit_code == 1
        assert "Specify either --discrete or --continuous, not both." in result.stdout


class TestDescribeCommand:
    def test_describe_normal(self) -> None:
        result = runner.invoke(app, ["describe", "normal"])
        assert result.exit_code == 0
        assert "Normal distribution (continuous)" in result.stdout
        assert "normal_pdf(x;mu;sigma)" in result.stdout
        assert "normal_random(mu;sigma)" in result.stdout
        assert "Parameters" in result.stdout
        assert "0<=sigma" in result.stdout

    def test_describe_without_parameters(self) -> None:
        result = runner.invoke(app, ["describe", "rademacher"])
        assert result.exit_code == 0
        assert "rademacher_random()" in result.stdout
        assert "Parameters" not in result.stdout

    def test_unknown_distribution(self) -> None:
        result = runner.invoke(app, ["describe", "nope"])
        assert result.exit_code == 1
        assert "No distribution nope found in register" in result.stdout


class TestEvalCommand:
    def test_semicolon_separated_arguments(self) -> None:
        result = runner.invoke(app, ["eval", "normal_cdf(0;0;1)"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0.5"

    def test_variables(self) -> None:
        result = runner.invoke(app, ["eval", "x^2 + y", "--var", "x=3", "--var", "y=1.5"])
        assert result.exit_code == 0
        assert float(result.stdout.strip()) == pytest.approx(10.5)

    def test_seed_makes_random_reproducible(self) -> None:
        args = ["eval", "uniform_random(0;1)", "--seed", "7"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)
        assert first.exit_code == 0
        assert first.stdout == second.stdout
        assert 0.0 <= float(first.stdout.strip()) <= 1.0

    def test_distribution_error(self) -> None:
        result = runner.invoke(app, ["eval", "normal_pdf(0)"])
        assert result.exit_code == 1
        assert "2 parameters expected but 0 given." in result.stdout

    def test_domain_error(self) -> None:
        result = runner.invoke(app, ["eval", "binomial_pdf(2;5;1.5)"])
        assert result.exit_code == 1
        assert "p has to be <=1 but is 1.5" in result.stdout

    def test_syntax_error(self) -> None:
        result = runner.invoke(app, ["eval", "1 +"])
        assert result.exit_code == 1
        assert "Invalid expression" in result.stdout

    def test_undefined_variable(self) -> None:
        result = runner.invoke(app, ["eval", "x + 1"])
        assert result.exit_code == 1
        assert "Undefined variable(s): x" in result.stdout

    @pytest.mark.parametrize("binding", ["x", "=3", "x=abc"])
    def test_bad_binding(self, binding) -> None:
        result = runner.invoke(app, ["eval", "x", "--var", binding])
        assert result.exit_code == 2
