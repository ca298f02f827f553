"""
Console Calculation Log.

A simple calculation log that prints each record to the console and
keeps the records of the current session in memory.
"""

from __future__ import annotations

from typing import List

from alloy_resolver.domain.entities import CalculationRecord


class ConsoleCalculationLog:
    """Simple console-based calculation log."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console log.

        Args:
            verbose: If True, print inputs and outputs. If False, only a summary.
        """
        self._verbose = verbose
        self._records: List[CalculationRecord] = []

    def append(self, record: CalculationRecord) -> None:
        """Print and remember a record."""
        self._records.append(record)
        self._print(record)

    def read_all(self) -> List[CalculationRecord]:
        return list(self._records)

    def _print(self, record: CalculationRecord) -> None:
        """Internal printing method."""
        timestamp = record.timestamp.strftime("%H:%M:%S")
        line = f"[{timestamp}] [{record.status:12}] {record.operation}"
        if self._verbose:
            outputs = ", ".join(f"{k}={_fmt(v)}" for k, v in record.outputs.items())
            line = f"{line}: {outputs}"
        print(line)


def _fmt(value: object) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)
