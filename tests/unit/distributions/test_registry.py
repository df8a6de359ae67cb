from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_calc.distributions.configuration import (
    configure_distributions_register,
    get_distributions,
    get_functions,
    reset_distributions_register,
    sorted_by_display_name,
)
from pysatl_calc.distributions.registry import DistributionRegister
from pysatl_calc.types import DistributionName, Kind

from .test_distribution import DistributionTestBase

DISCRETE_NAMES = [
    "discreteuniform",
    "hypergeom",
    "binomial",
    "poisson",
    "geometric",
    "negativehypergeom",
    "negativebinomial",
    "zeta",
    "rademacher",
    "bernoulli",
    "borel",
    "gaussKuzmin",
    "logarithmic",
    "planck",
    "boltzmann",
]


class TestDistributionRegister(DistributionTestBase):
    def test_singleton(self) -> None:
        assert DistributionRegister() is DistributionRegister()

    def test_register_and_get(self) -> None:
        distr = self.make_two_point_distribution()
        DistributionRegister.register(distr)
        assert DistributionRegister.contains("twopoint")
        assert DistributionRegister.get("twopoint") is distr
        assert DistributionRegister.names() == ["twopoint"]
        assert len(DistributionRegister()) == 1

    def test_duplicate_name_is_rejected(self) -> None:
        DistributionRegister.register(self.make_two_point_distribution())
        with pytest.raises(ValueError, match="already found in register"):
            DistributionRegister.register(self.make_two_point_distribution())

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="No distribution nope found in register"):
            DistributionRegister.get("nope")

    def test_filter_by_kind(self) -> None:
        DistributionRegister.register(self.make_two_point_distribution())
        DistributionRegister.register(self.make_interval_distribution())
        assert [d.name for d in DistributionRegister.distributions(Kind.DISCRETE)] == ["twopoint"]
        assert [d.name for d in DistributionRegister.distributions(Kind.CONTINUOUS)] == [
            "interval"
        ]
        assert len(DistributionRegister.distributions()) == 2


class TestConfiguration:
    def test_catalogue_size(self) -> None:
        assert len(get_distributions()) == 62
        assert len(get_distributions(Kind.DISCRETE)) == 15
        assert len(get_distributions(Kind.CONTINUOUS)) == 47

    def test_every_builtin_name_is_registered(self) -> None:
        register = configure_distributions_register()
        assert set(register.names()) == {name.value for name in DistributionName}

    def test_discrete_come_first_in_catalogue_order(self) -> None:
        distributions = get_distributions()
        assert [d.name for d in distributions[:15]] == DISCRETE_NAMES
        assert all(d.kind == Kind.CONTINUOUS for d in distributions[15:])
        assert [d.name for d in distributions[15:18]] == ["uniform", "exp", "normal"]
        assert distributions[-1].name == "loglaplace"

    def test_configuration_is_idempotent(self) -> None:
        first = configure_distributions_register()
        second = configure_distributions_register()
        assert first is second
        assert len(first) == 62

    def test_repeated_calls_return_same_tuple(self) -> None:
        assert get_distributions() is get_distributions()
        assert get_distributions(Kind.DISCRETE) is get_distributions(Kind.DISCRETE)

    def test_reset_rebuilds(self) -> None:
        before = get_distributions()
        reset_distributions_register()
        after = get_distributions()
        assert before is not after
        assert [d.name for d in before] == [d.name for d in after]

    def test_names_are_unique(self) -> None:
        names = [d.name for d in get_distributions()]
        assert len(names) == len(set(names))

    def test_get_functions_exports_three_functions(self) -> None:
        for distribution in get_distributions():
            functions = get_functions(distribution)
            name = distribution.name
            assert set(functions) == {f"{name}_pdf", f"{name}_cdf", f"{name}_random"}

    def test_sorted_by_display_name(self) -> None:
        ordered = sorted_by_display_name(get_distributions())
        keys = [d.display_name.casefold() for d in ordered]
        assert keys == sorted(keys)
        assert len(ordered) == 62

    @pytest.mark.parametrize(
        "name, signatures",
        [
            (
                "normal",
                ("normal_pdf(x;mu;sigma)", "normal_cdf(x;mu;sigma)", "normal_random(mu;sigma)"),
            ),
            ("rademacher", ("rademacher_pdf(x)", "rademacher_cdf(x)", "rademacher_random()")),
            (
                "hypergeom",
                ("hypergeom_pdf(x;N;R;n)", "hypergeom_cdf(x;N;R;n)", "hypergeom_random(N;R;n)"),
            ),
            (
                "triangular",
                (
                    "triangular_pdf(x;a;c;b)",
                    "triangular_cdf(x;a;c;b)",
                    "triangular_random(a;c;b)",
                ),
            ),
        ],
    )
    def test_signatures(self, name, signatures) -> None:
        configure_distributions_register()
        distribution = DistributionRegister.get(name)
        assert tuple(distribution.signatures().values()) == signatures

    def test_display_names_are_set(self) -> None:
        for distribution in get_distributions():
            assert distribution.display_name
            assert distribution.display_name != distribution.name
