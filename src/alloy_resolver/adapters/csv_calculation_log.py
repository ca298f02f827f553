"""
CSV Calculation Log.

Append-only CSV file with one row per calculation. Inputs and outputs are
stored as JSON objects in their own columns so rows stay flat.
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Union

from alloy_resolver.domain.entities import CalculationRecord

logger = logging.getLogger(__name__)


class CsvCalculationLog:
    """Calculation log backed by a CSV file."""

    FIELDNAMES = ["timestamp", "operation", "status", "inputs", "outputs"]

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, record: CalculationRecord) -> None:
        """Append one row, writing the header for a new file."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        write_header = not self._path.exists() or self._path.stat().st_size == 0

        with open(self._path, "a", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            if write_header:
                writer.writeheader()
            writer.writerow(
                {
                    "timestamp": record.timestamp.isoformat(),
                    "operation": record.operation,
                    "status": record.status,
                    "inputs": json.dumps(record.inputs, sort_keys=True),
                    "outputs": json.dumps(record.outputs, sort_keys=True),
                }
            )

    def read_all(self) -> List[CalculationRecord]:
        """Read every row in file order."""
        if not self._path.exists():
            logger.debug(f"Calculation log {self._path} does not exist yet")
            return []

        with open(self._path, newline="", encoding="utf-8") as f:
            return [
                CalculationRecord(
                    timestamp=datetime.fromisoformat(row["timestamp"]),
                    operation=row["operation"],
                    status=row["status"],
                    inputs=json.loads(row["inputs"] or "{}"),
                    outputs=json.loads(row["outputs"] or "{}"),
                )
                for row in csv.DictReader(f)
            ]
