from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import numpy as np
import pytest

from pysatl_calc.distributions.generators import RandomSource, default_random_source
from pysatl_calc.errors import SamplingError


class TestRandomSource:
    def test_seed_reproducibility(self) -> None:
        first = RandomSource(123)
        second = RandomSource(123)
        assert [first.uniform() for _ in range(10)] == [second.uniform() for _ in range(10)]
        assert [first.gaussian() for _ in range(10)] == [second.gaussian() for _ in range(10)]

    def test_accepts_generator(self) -> None:
        rng = np.random.default_rng(5)
        source = RandomSource(rng)
        assert source.generator is rng

    def test_uniform_range(self) -> None:
        source = RandomSource(0)
        samples = [source.uniform() for _ in range(1000)]
        assert all(0.0 <= u < 1.0 for u in samples)

    def test_gaussian_moments(self) -> None:
        source = RandomSource(2024)
        samples = np.array([source.gaussian(3.0, 2.0) for _ in range(20_000)])
        assert np.mean(samples) == pytest.approx(3.0, abs=0.06)
        assert np.std(samples) == pytest.approx(2.0, abs=0.06)

    def test_gaussian_uses_spare_value(self) -> None:
        source = RandomSource(1)
        source.gaussian()
        state = source.generator.bit_generator.state
        source.gaussian()
        assert source.generator.bit_generator.state == state

    def test_rejection_cap(self) -> None:
        class Stuck(RandomSource):
            def uniform(self) -> float:
                return 0.0

        with pytest.raises(SamplingError, match="rejected 5 candidate pairs"):
            Stuck(0, max_rejection_iterations=5).gaussian()


def test_default_source_is_per_thread() -> None:
    main_source = default_random_source()
    assert default_random_source() is main_source

    other: list[RandomSource] = []
    thread = threading.Thread(target=lambda: other.append(default_random_source()))
    thread.start()
    thread.join()

    assert len(other) == 1
    assert other[0] is not main_source
