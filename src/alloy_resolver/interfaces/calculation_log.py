"""
Calculation Log Protocol.

Defines the abstract interface for the append-only record of past
calculations. Every pipeline operation appends exactly one
CalculationRecord, whether its result was conclusive or not.

Design Notes:
    - Append-only: records are never edited or removed
    - No side effects on calculation results
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from alloy_resolver.domain.entities import CalculationRecord


@runtime_checkable
class CalculationLog(Protocol):
    """Abstract interface for the calculation log."""

    def append(self, record: CalculationRecord) -> None:
        """
        Append one record.

        Args:
            record: Projection of a finished calculation
        """
        ...

    def read_all(self) -> List[CalculationRecord]:
        """
        Read every record in append order.

        Returns:
            List of records, empty when nothing was logged yet
        """
        ...
