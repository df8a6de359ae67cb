"""
Supports of discrete distributions.

Discrete laws in the catalogue live on a contiguous range of integers. The
range is used by the generic summation fallbacks to decide where to start
accumulating mass and where to stop.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_calc.types import Number


@dataclass(slots=True, frozen=True)
class IntegerSupport:
    """
    Contiguous integer range ``min_k..max_k``; either side may be unbounded.

    Parameters
    ----------
    min_k : int or None
        Smallest support point, ``None`` if unbounded to the left.
    max_k : int or None
        Largest support point, ``None`` if unbounded to the right.
    """

    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.min_k is not None and self.max_k is not None and self.min_k > self.max_k:
            raise ValueError("min_k must not exceed max_k.")

    def contains(self, x: Number) -> bool:
        xf = float(x)
        if xf != floor(xf):
            return False
        if self.min_k is not None and xf < self.min_k:
            return False
        if self.max_k is not None and xf > self.max_k:
            return False
        return True

    def __contains__(self, x: object) -> bool:
        return self.contains(x)  # type: ignore[arg-type]

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    def start(self, sentinel: int) -> int:
        """
        First point to accumulate mass from.

        The support minimum when it is known, otherwise ``sentinel``.
        """
        if self.min_k is None:
            return sentinel
        return self.min_k

    def iter_leq(self, x: Number, sentinel: int) -> Iterator[int]:
        """
        Iterate support points ``<= x`` from :meth:`start` upwards.

        Parameters
        ----------
        x : Number
            Upper limit (floored).
        sentinel : int
            Left bound used for left-unbounded supports.
        """
        first = self.start(sentinel)
        last = int(floor(float(x)))
        if self.max_k is not None and last > self.max_k:
            last = self.max_k

        def _gen() -> Iterator[int]:
            current = first
            while current <= last:
                yield current
                current += 1

        return _gen()

    def iter_points(self, sentinel: int) -> Iterator[int]:
        """Iterate support points from :meth:`start`; endless for right-unbounded supports."""
        current = self.start(sentinel)
        while self.max_k is None or current <= self.max_k:
            yield current
            current += 1


UNBOUNDED = IntegerSupport()
"""Support assumed for discrete laws that do not declare one."""


__all__ = [
    "IntegerSupport",
    "UNBOUNDED",
]
