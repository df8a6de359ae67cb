"""
Installation of the distribution functions into an expression engine.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from typing import TYPE_CHECKING

from pysatl_calc.distributions.configuration import get_distributions, get_functions

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_calc.distributions.generators import RandomSource
    from pysatl_calc.expressions.engine import ExpressionEngine
    from pysatl_calc.types import Number

DISTRIBUTIONS_EXTENSION = "distributions"

_load_lock = threading.Lock()


def distribution_functions(source: RandomSource | None = None) -> dict[str, Callable[..., Number]]:
    """
    The ``{name}_pdf``, ``{name}_cdf`` and ``{name}_random`` functions of every
    configured distribution, merged into one table.
    """
    functions: dict[str, Callable[..., Number]] = {}
    for distribution in get_distributions():
        functions.update(get_functions(distribution, source))
    return functions


def load_distribution_extensions(
    engine: ExpressionEngine, source: RandomSource | None = None
) -> bool:
    """
    Register all distribution functions in ``engine`` once.

    Parameters
    ----------
    engine : ExpressionEngine
        Target engine.
    source : RandomSource or None, optional
        Random source of the ``{name}_random`` functions; the thread-local
        default source is used when omitted.

    Returns
    -------
    bool
        ``True`` if the functions were installed by this call, ``False`` if
        they had already been loaded into ``engine``.
    """
    with _load_lock:
        if DISTRIBUTIONS_EXTENSION in engine.loaded_extensions:
            return False
        engine.register_functions(distribution_functions(source))
        engine.loaded_extensions.add(DISTRIBUTIONS_EXTENSION)
        return True


__all__ = [
    "DISTRIBUTIONS_EXTENSION",
    "distribution_functions",
    "load_distribution_extensions",
]
