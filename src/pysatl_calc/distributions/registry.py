"""
Global register of probability distributions using singleton pattern.

The register keeps every configured distribution under its unique internal
name, in registration order.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_calc.distributions.distribution import ProbabilityDistribution
    from pysatl_calc.types import Kind


class DistributionRegister:
    """
    Singleton register of probability distributions.

    Maintains an ordered, name-unique collection of distributions, allowing
    them to be accessed by name or listed by kind.
    """

    _instance: ClassVar[DistributionRegister | None] = None
    _registered_distributions: dict[str, ProbabilityDistribution]

    def __new__(cls) -> DistributionRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_distributions = {}
        return cls._instance

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered_distributions

    @classmethod
    def get(cls, name: str) -> ProbabilityDistribution:
        """
        Retrieve a distribution by name.

        Parameters
        ----------
        name : str
            Internal name of the distribution.

        Returns
        -------
        ProbabilityDistribution
            The requested distribution.

        Raises
        ------
        ValueError
            If no distribution with the given name exists.
        """
        self = cls()
        if name not in self._registered_distributions:
            raise ValueError(f"No distribution {name} found in register")
        return self._registered_distributions[name]

    @classmethod
    def register(cls, distribution: ProbabilityDistribution) -> None:
        """
        Register a new distribution.

        Parameters
        ----------
        distribution : ProbabilityDistribution
            The distribution to register.

        Raises
        ------
        ValueError
            If a distribution with the same name is already registered.
        """
        self = cls()
        if distribution.name in self._registered_distributions:
            raise ValueError(f"Distribution {distribution.name} already found in register")
        self._registered_distributions[distribution.name] = distribution

    @classmethod
    def distributions(cls, kind: Kind | None = None) -> list[ProbabilityDistribution]:
        """
        Registered distributions in registration order.

        Parameters
        ----------
        kind : Kind or None, optional
            Only return distributions of this kind.
        """
        items = cls()._registered_distributions.values()
        if kind is None:
            return list(items)
        return [d for d in items if d.kind == kind]

    @classmethod
    def names(cls) -> list[str]:
        return list(cls()._registered_distributions)

    def __len__(self) -> int:
        return len(self._registered_distributions)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None


__all__ = [
    "DistributionRegister",
]
