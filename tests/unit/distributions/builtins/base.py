"""
Common fixtures and utilities for built-in distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np

from pysatl_calc.distributions.configuration import configure_distributions_register
from pysatl_calc.distributions.distribution import ProbabilityDistribution
from pysatl_calc.distributions.generators import RandomSource


class BaseDistributionTest:
    """Base class for all built-in distributions' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    SAMPLE_SIZE = 10_000
    SEED = 20250101

    @staticmethod
    def get_distribution(name: str) -> ProbabilityDistribution:
        """Configure the register and return one distribution."""
        return configure_distributions_register().get(name)

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    @classmethod
    def draw(
        cls, distribution: ProbabilityDistribution, *params: float, size: int | None = None
    ) -> np.ndarray[Any, Any]:
        """Seeded sample of ``size`` variates (``SAMPLE_SIZE`` by default)."""
        source = RandomSource(cls.SEED)
        n = cls.SAMPLE_SIZE if size is None else size
        return np.array([distribution.random(*params, source=source) for _ in range(n)])

    @staticmethod
    def vectorized_cdf(distribution: ProbabilityDistribution, *params: float) -> Any:
        """CDF with bound parameters accepting arrays, as expected by ``scipy.stats.kstest``."""
        return np.vectorize(lambda x: distribution.cdf(x, *params), otypes=[float])
