"""
Metal Catalog - Named Metals for the Second Alloy Component.

Supplies the (name, density) records used as the impurity of a binary
gold alloy. Lookups are case-insensitive; adding a metal whose name is
already present replaces the existing entry.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from alloy_resolver.domain.entities import Metal

logger = logging.getLogger(__name__)


DEFAULT_METALS: List[Metal] = [
    Metal(name="Copper", density=8.96),
    Metal(name="Silver", density=10.49),
    Metal(name="Platinum", density=21.45),
    Metal(name="Palladium", density=12.02),
]


class UnknownMetalError(KeyError):
    """Raised when a metal name is not in the catalog."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown metal: {self.name}. Available: {', '.join(self.available)}"


class MetalCatalog:
    """
    In-memory catalog of metals, keyed by name.

    Usage:
        catalog = MetalCatalog()
        copper = catalog.get("copper")
        catalog.add(Metal(name="Nickel", density=8.908))
    """

    def __init__(self, metals: Optional[Iterable[Metal]] = None) -> None:
        """
        Initialize catalog.

        Args:
            metals: Initial metals (default: copper, silver, platinum, palladium)
        """
        self._metals: Dict[str, Metal] = {}
        for metal in DEFAULT_METALS if metals is None else metals:
            self.add(metal)

    def add(self, metal: Metal) -> None:
        """Add or replace a metal."""
        key = self._key(metal.name)
        if key in self._metals:
            logger.info(f"Replacing catalog entry for {metal.name}")
        self._metals[key] = metal

    def remove(self, name: str) -> Metal:
        """Remove and return a metal."""
        key = self._key(name)
        if key not in self._metals:
            raise UnknownMetalError(name, self.names())
        logger.info(f"Removing catalog entry for {name}")
        return self._metals.pop(key)

    def get(self, name: str) -> Metal:
        """Look up a metal by name (case-insensitive)."""
        metal = self._metals.get(self._key(name))
        if metal is None:
            raise UnknownMetalError(name, self.names())
        return metal

    def names(self) -> List[str]:
        """Names in insertion order."""
        return [m.name for m in self._metals.values()]

    def metals(self) -> List[Metal]:
        return list(self._metals.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._metals

    def __iter__(self) -> Iterator[Metal]:
        return iter(list(self._metals.values()))

    def __len__(self) -> int:
        return len(self._metals)

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().casefold()
