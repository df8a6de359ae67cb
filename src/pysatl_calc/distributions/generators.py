"""
Random sources used by the samplers.

A :class:`RandomSource` wraps a :class:`numpy.random.Generator` and keeps the
spare value of the Marsaglia polar method. Each thread gets its own default
source, so samplers never share generator state across threads.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import threading

import numpy as np

from pysatl_calc.distributions.config import DEFAULT_SETTINGS
from pysatl_calc.errors import SamplingError


class RandomSource:
    """
    Uniform and Gaussian variates from one generator.

    Parameters
    ----------
    seed : int, numpy.random.Generator or None, optional
        Seed or ready generator passed to :func:`numpy.random.default_rng`.
    max_rejection_iterations : int, optional
        Cap on rejected candidate pairs in :meth:`gaussian`.
    """

    __slots__ = ("_rng", "_spare", "_has_spare", "max_rejection_iterations")

    def __init__(
        self,
        seed: int | np.random.Generator | None = None,
        max_rejection_iterations: int = DEFAULT_SETTINGS.max_rejection_iterations,
    ) -> None:
        self._rng = np.random.default_rng(seed)
        self._spare = 0.0
        self._has_spare = False
        self.max_rejection_iterations = max_rejection_iterations

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    def uniform(self) -> float:
        """Uniform variate on ``[0, 1)``."""
        return float(self._rng.random())

    def gaussian(self, mean: float = 0.0, std: float = 1.0) -> float:
        """
        Normal variate generated with the Marsaglia polar method.

        Every accepted pair yields two independent variates; the second one is
        kept and returned by the next call.

        Raises
        ------
        SamplingError
            If no candidate pair was accepted within ``max_rejection_iterations``.
        """
        if self._has_spare:
            self._has_spare = False
            return mean + std * self._spare

        for _ in range(self.max_rejection_iterations):
            u = 2.0 * self.uniform() - 1.0
            v = 2.0 * self.uniform() - 1.0
            s = u * u + v * v
            if 0.0 < s < 1.0:
                factor = math.sqrt(-2.0 * math.log(s) / s)
                self._spare = v * factor
                self._has_spare = True
                return mean + std * u * factor

        raise SamplingError(
            f"Polar method rejected {self.max_rejection_iterations} candidate pairs in a row"
        )


_local = threading.local()


def default_random_source() -> RandomSource:
    """Return the calling thread's default :class:`RandomSource` (created on first use)."""
    source = getattr(_local, "source", None)
    if source is None:
        source = RandomSource()
        _local.source = source
    return source


__all__ = [
    "RandomSource",
    "default_random_source",
]
