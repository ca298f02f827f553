"""
In-Memory Adapters.

Settings store and calculation log that keep everything in memory.
Used in tests and for throwaway sessions.
"""

from __future__ import annotations

from threading import Lock
from typing import List, Optional

from alloy_resolver.domain.entities import CalculationRecord, Metal


class InMemorySettingsStore:
    """Settings store holding values in memory."""

    def __init__(
        self,
        price_per_gram: Optional[float] = None,
        metals: Optional[List[Metal]] = None,
    ) -> None:
        self._price = price_per_gram
        self._metals: List[Metal] = list(metals or [])

    def load_price(self) -> Optional[float]:
        if self._price is None or self._price <= 0:
            return None
        return self._price

    def save_price(self, price_per_gram: float) -> None:
        self._price = price_per_gram

    def load_metals(self) -> List[Metal]:
        return list(self._metals)

    def save_metals(self, metals: List[Metal]) -> None:
        self._metals = list(metals)


class InMemoryCalculationLog:
    """Calculation log holding records in memory."""

    def __init__(self) -> None:
        self._records: List[CalculationRecord] = []
        self._lock = Lock()

    def append(self, record: CalculationRecord) -> None:
        with self._lock:
            self._records.append(record)

    def read_all(self) -> List[CalculationRecord]:
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
