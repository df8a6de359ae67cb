"""
Numeric helpers on top of :mod:`scipy.special`.

The special functions themselves (gamma, incomplete gamma/beta, error
function, ...) come from SciPy; this module only packs a few recurring
combinations of them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
from scipy.special import gammaln

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def log_binom(n: float, k: float) -> float:
    """
    Logarithm of the binomial coefficient ``C(n, k)``.

    Returns ``-inf`` when ``k < 0`` or ``k > n`` (the coefficient is zero).
    """
    if k < 0 or k > n:
        return -math.inf
    return float(gammaln(n + 1) - gammaln(k + 1) - gammaln(n - k + 1))


def std_normal_pdf(z: float) -> float:
    """Density of the standard normal distribution."""
    return float(_INV_SQRT_2PI * np.exp(-0.5 * z * z))


def clamp_probability(p: float) -> float:
    """Clip a probability to ``[0, 1]`` to absorb floating-point drift."""
    return float(np.clip(p, 0.0, 1.0))


__all__ = [
    "log_binom",
    "std_normal_pdf",
    "clamp_probability",
]
