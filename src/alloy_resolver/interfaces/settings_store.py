"""
Settings Store Protocol.

Defines the abstract interface for persisting the toolkit's small amount
of state: the gold price per gram and the metal catalog.

The settings store is responsible for:
    - Loading and saving the price per gram
    - Loading and saving the list of catalog metals

Design Notes:
    - A store with nothing saved yet reports "no price", not a price of 0
    - The resolver never talks to a store; the pipeline does
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from alloy_resolver.domain.entities import Metal


@runtime_checkable
class SettingsStore(Protocol):
    """Abstract interface for price and catalog persistence."""

    def load_price(self) -> Optional[float]:
        """
        Load the saved gold price.

        Returns:
            Price per gram, or None when no price has been saved
        """
        ...

    def save_price(self, price_per_gram: float) -> None:
        """Persist the gold price per gram."""
        ...

    def load_metals(self) -> List[Metal]:
        """
        Load saved catalog metals.

        Returns:
            Saved metals, empty when none were saved
        """
        ...

    def save_metals(self, metals: List[Metal]) -> None:
        """Persist the catalog metals."""
        ...
